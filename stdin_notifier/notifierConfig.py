from __future__ import annotations

import os
import typing as t
from dataclasses import dataclass

import tomli
from loguru import logger

from stdin_notifier.errors import ConfigIOError, ConfigParseError, InvalidFieldType, MissingField

REQUIRED_FIELDS = ("endpoint", "function", "token", "chat_id")


@dataclass(frozen=True)
class NotifierConfig:
    endpoint: str
    function: str
    token: str
    chat_id: str
    markdown: bool | None = None            # None = key absent, distinct from False


def parse_conf(path: str | os.PathLike[str]) -> NotifierConfig:
    """
    Load a NotifierConfig from a TOML file.

    Raises:
        ConfigIOError: file cannot be opened or read
        ConfigParseError: content is not valid TOML
        MissingField: a required key is absent
        InvalidFieldType: a required key is not a string
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(f"could not read config {os.fspath(path)!r}: {e}") from e

    try:
        doc = tomli.loads(content)
    except tomli.TOMLDecodeError as e:
        raise ConfigParseError(f"invalid TOML in {os.fspath(path)!r}: {e}") from e

    values = {name: _required_str(doc, name) for name in REQUIRED_FIELDS}

    # Lenient optional lookup: anything other than a real bool counts as absent
    markdown = doc.get("markdown")
    if not isinstance(markdown, bool):
        markdown = None

    logger.debug(f"Loaded config from {os.fspath(path)} (function={values['function']}, markdown={markdown})")
    return NotifierConfig(markdown=markdown, **values)


def _required_str(doc: dict[str, t.Any], name: str) -> str:
    if name not in doc:
        raise MissingField(name)
    value = doc[name]
    if not isinstance(value, str):
        raise InvalidFieldType(name)
    return value
