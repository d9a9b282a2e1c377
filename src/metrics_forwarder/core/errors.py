"""Errors raised by the metrics forwarder."""
from typing import Any, Optional


class ForwarderError(Exception):
    """Base class for all errors surfaced by a collection cycle."""


class ConfigError(ForwarderError):
    """Required configuration is missing or invalid."""


class NetworkError(ForwarderError):
    """Transport-level failure while talking to a remote endpoint."""


class HTTPStatusError(ForwarderError):
    """A remote endpoint answered with a status other than 200."""

    def __init__(self, status: int, reason: str = "", body: str = "", url: Optional[str] = None):
        self.status = status
        self.reason = reason
        self.body = body
        self.url = url
        message = f"received {status} {reason}".rstrip()
        if url:
            message += f" from {url}"
        if body:
            message += f"\n\n{body}"
        super().__init__(message)


class DecodeError(ForwarderError):
    """A response body is not a JSON object."""


class PathNotFound(ForwarderError):
    """A metric path does not resolve in the fetched document."""

    def __init__(self, path: str, segment: str):
        self.path = path
        self.segment = segment
        super().__init__(f"path {path!r} not found (missing {segment!r})")


class TypeMismatch(ForwarderError):
    """A resolved value cannot be coerced to the requested metric kind."""

    def __init__(self, path: str, value: Any, kind: str):
        self.path = path
        self.value = value
        self.kind = kind
        super().__init__(f"value at {path!r} is not a valid {kind}: {value!r}")
