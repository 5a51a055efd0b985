"""Errors raised by the ftrack client."""
from __future__ import annotations

from typing import Any, List, Optional


class FtrackError(Exception):
    """Base class for every ftrack client failure."""

    kind = "ftrack"

    @property
    def message(self) -> str:
        return str(self)


class ConfigurationError(FtrackError):
    """Required connection values are missing or malformed."""

    kind = "configuration"

    def __init__(self, missing: List[str], message: Optional[str] = None) -> None:
        self.missing = list(missing)
        if message is None:
            names = ", ".join(self.missing)
            message = (
                f"Missing ftrack configuration: {names} "
                "(set the environment variables or pass the values explicitly)"
            )
        super().__init__(message)

    @classmethod
    def invalid(cls, name: str, value: str, expected: str) -> "ConfigurationError":
        return cls([], f"Invalid ftrack configuration: {name}={value!r} is not {expected}")


class TransportError(FtrackError):
    """The HTTP request failed or returned a non-success status."""

    kind = "transport"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int, body: str) -> "TransportError":
        return cls(f"ftrack API error ({status_code}): {body}", status_code, body)


class ProtocolError(FtrackError):
    """The response body is not a JSON array of results."""

    kind = "protocol"


class OperationError(FtrackError):
    """The server flagged one operation of a batch as failed."""

    kind = "operation"

    def __init__(self, index: int, content: Any, exception: Optional[str] = None) -> None:
        self.index = index
        self.content = content
        self.exception = exception
        super().__init__(f"Operation {index} failed: {content}")
