"""
Stdin Notifier - pipe text into a chat-bot "send message" API.

Reads connection settings from a TOML file and sends exactly one POST:
- {endpoint}{token}/{function} with a JSON body
- chat_id, text and an optional Markdown parse_mode
- any 2xx is success, anything else raises

Basic usage:
    $ echo "Training finished" | stdin-notifier conf.toml

    from stdin_notifier import send_message
    send_message("conf.toml", "Training finished")
"""

__version__ = "0.1.0"

from .errors import (
    ConfigIOError,
    ConfigParseError,
    InvalidFieldType,
    MissingField,
    NetworkError,
    NotifierError,
    RequestError,
    UriError,
)
from .notifierConfig import NotifierConfig, parse_conf
from .notifierRequest import PreparedMessage, build_request
from .stdinNotifier import StdinNotifier, send_message, send_request

__all__ = [
    "StdinNotifier",
    "NotifierConfig",
    "PreparedMessage",
    "parse_conf",
    "build_request",
    "send_request",
    "send_message",
    "NotifierError",
    "ConfigIOError",
    "ConfigParseError",
    "MissingField",
    "InvalidFieldType",
    "UriError",
    "NetworkError",
    "RequestError",
    "__version__",
]
