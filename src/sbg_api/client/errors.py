from __future__ import annotations

from typing import Any


class SBGError(Exception):
    """Base class for errors raised by the SBG API client."""


class UnsupportedMethodError(SBGError, ValueError):
    def __init__(self, method: str, supported: tuple[str, ...]) -> None:
        super().__init__(f"unsupported HTTP method '{method}', expected one of {', '.join(supported)}")
        self.method = method


class RequestURLError(SBGError, ValueError):
    """The request URL or its query string could not be composed."""


class InvalidQueryParameterError(RequestURLError):
    def __init__(self, key: str, value: Any) -> None:
        super().__init__(f"query parameter '{key}' must be a scalar, got {type(value).__name__}")
        self.key = key
        self.value = value


class RequestBodyError(SBGError, ValueError):
    """The request body cannot be serialized as strict JSON."""


class ResponseStatusError(SBGError):
    """The server answered with a status outside 200, 201 and 204."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"Server responded with status code: {status_code} . {reason}")
        self.status_code = status_code
        self.reason = reason


class ResponseParseError(SBGError, ValueError):
    pass


__all__ = [
    "InvalidQueryParameterError",
    "RequestBodyError",
    "RequestURLError",
    "ResponseParseError",
    "ResponseStatusError",
    "SBGError",
    "UnsupportedMethodError",
]
