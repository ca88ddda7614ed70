"""
stdinNotifier.py

Config file (TOML):
  endpoint = "https://api.telegram.org/bot"   # token is appended directly
  function = "sendMessage"
  token    = "123456:ABC-DEF..."
  chat_id  = "-1001234567890"
  markdown = true                             # optional

Basic usage:
  from stdin_notifier import send_message
  send_message("conf.toml", "Backup finished")

Client usage:
  with StdinNotifier.from_file("conf.toml") as sn:
      sn.send_text("*bold*")

One request per message: no retries, no timeout, no batching.
"""

from __future__ import annotations

import os

import requests
from loguru import logger

from stdin_notifier.errors import NetworkError, RequestError
from stdin_notifier.notifierConfig import NotifierConfig, parse_conf
from stdin_notifier.notifierRequest import PreparedMessage, build_request, mask_token


class StdinNotifier:
    """
    Chat-bot "send message" client driven by a NotifierConfig.

    - Builds the POST with build_request() and sends it with send_request().
    - Any 2xx status is success; everything else raises.
    """

    def __init__(self, conf: NotifierConfig, *, session: requests.Session | None = None) -> None:
        self._conf = conf
        self._owns_session = session is None
        self._session = session or requests.Session()

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], *, session: requests.Session | None = None
    ) -> "StdinNotifier":
        return cls(parse_conf(path), session=session)

    @property
    def conf(self) -> NotifierConfig:
        return self._conf

    # ----------------------------- Public API -----------------------------

    def send_text(self, text: str) -> requests.Response:
        """
        Send one message verbatim.

        Raises:
            UriError: endpoint/token/function do not form a valid URI
            NetworkError: transport-level failure
            RequestError: non-2xx response
        """
        return send_request(build_request(self._conf, text), session=self._session)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "StdinNotifier":
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close session on exit."""
        self.close()


def send_request(prepared: PreparedMessage, session: requests.Session | None = None) -> requests.Response:
    """
    Send a PreparedMessage and check the status code. The body is not inspected.

    A caller-supplied session is left open; otherwise a throwaway one is used.
    """
    own_session = session is None
    session = session or requests.Session()
    try:
        logger.debug(f"Sending {prepared.method} ({len(prepared.body)} bytes)")
        try:
            resp = session.request(
                prepared.method,
                prepared.uri,
                data=prepared.body,
                headers=prepared.headers,
            )
        except requests.RequestException as e:
            raise NetworkError(mask_token(f"request could not be sent: {e}", prepared.token)) from e
    finally:
        if own_session:
            session.close()

    if not 200 <= resp.status_code < 300:
        logger.debug(f"API responded with {resp.status_code} {resp.reason or ''}".rstrip())
        raise RequestError(resp.status_code, resp.reason)

    logger.debug(f"Request successful: {resp.status_code}")
    return resp


def send_message(
    conf_path: str | os.PathLike[str], message: str, *, session: requests.Session | None = None
) -> None:
    """Quick one-off send: load the config, build the request, send it."""
    with StdinNotifier.from_file(conf_path, session=session) as notifier:
        notifier.send_text(message)
