import json
from unittest import mock

import pytest
import requests

from stdin_notifier import NotifierConfig

BASE_CONF = {
    "endpoint": "https://api.example.com/bot",
    "function": "sendMessage",
    "token": "T1",
    "chat_id": "42",
}


def to_toml_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, list):
        return "[" + ", ".join(to_toml_value(v) for v in value) + "]"
    if isinstance(value, dict):
        return "{ " + ", ".join(f"{k} = {to_toml_value(v)}" for k, v in value.items()) + " }"
    raise TypeError(f"unsupported TOML value: {value!r}")


@pytest.fixture
def write_conf(tmp_path):
    """Write a TOML config (dict of top-level keys or raw text) and return its path."""

    def _write(content, name="conf.toml"):
        path = tmp_path / name
        if isinstance(content, str):
            text = content
        else:
            text = "".join(f"{k} = {to_toml_value(v)}\n" for k, v in content.items())
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def conf():
    return NotifierConfig(**BASE_CONF)


def make_session(status_code=200, reason="OK", exc=None):
    session = mock.Mock(spec=requests.Session)
    if exc is not None:
        session.request.side_effect = exc
    else:
        session.request.return_value = mock.Mock(
            spec=requests.Response, status_code=status_code, reason=reason
        )
    return session
