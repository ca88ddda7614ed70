from __future__ import annotations


class NotifierError(Exception):
    """Base class for every failure of a single send."""


class ConfigIOError(NotifierError):
    """Config file could not be opened or read."""


class ConfigParseError(NotifierError):
    """Config file is not valid TOML."""


class MissingField(NotifierError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Toml Element "{name}" could not be found')
        self.name = name


class InvalidFieldType(NotifierError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Toml Element "{name}" is invalid')
        self.name = name


class UriError(NotifierError):
    """Concatenated endpoint/token/function is not a usable URI."""


class NetworkError(NotifierError):
    """Transport-level failure (DNS, TLS, refused connection, ...)."""


class RequestError(NotifierError):
    def __init__(self, status_code: int, reason: str | None = None) -> None:
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"Request Error: {status}")
        self.status_code = status_code
        self.reason = reason
