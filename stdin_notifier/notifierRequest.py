from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from urllib.parse import urlsplit

import requests
from loguru import logger

from stdin_notifier.errors import UriError
from stdin_notifier.notifierConfig import NotifierConfig

_INVALID_URI_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


@dataclass(frozen=True)
class PreparedMessage:
    uri: str
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "POST"
    token: str = field(default="", repr=False)   # only used to mask error messages


def build_request(conf: NotifierConfig, text: str) -> PreparedMessage:
    """
    Build the POST for one message. No I/O happens here.

    The URI is the literal concatenation endpoint + token + "/" + function;
    nothing is inserted or encoded, so endpoint must already end where the
    token should start (e.g. "https://api.telegram.org/bot").
    """
    uri = f"{conf.endpoint}{conf.token}/{conf.function}"
    _check_uri(uri, conf.token)

    payload = {
        "chat_id": conf.chat_id,
        "text": text,
    }
    if conf.markdown is True:
        payload["parse_mode"] = "Markdown"

    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    headers = {
        "Content-Type": "application/json",
        "Content-Length": str(len(body)),
    }

    logger.debug(f"Built request POST {mask_token(uri, conf.token)} ({len(body)} bytes)")
    return PreparedMessage(uri=uri, body=body, headers=headers, token=conf.token)


def _check_uri(uri: str, token: str) -> None:
    if _INVALID_URI_CHARS.search(uri):
        raise UriError(mask_token(f"invalid URI {uri!r}: contains whitespace or control characters", token))

    parts = urlsplit(uri)
    if not parts.scheme or not parts.netloc:
        raise UriError(mask_token(f"invalid URI {uri!r}: scheme and host are required", token))

    # Validate only; the literal string is what gets sent
    try:
        requests.PreparedRequest().prepare_url(uri, None)
    except requests.exceptions.RequestException as e:
        raise UriError(mask_token(f"invalid URI {uri!r}: {e}", token)) from e


def mask_token(text: str, token: str) -> str:
    """Replace every occurrence of the secret token with ***."""
    return text.replace(token, "***") if token else text
