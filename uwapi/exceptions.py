"""
Custom exceptions for uwapi.

Every error raised by the library derives from UWAPIError. Each class carries a
`kind` naming its place in the error taxonomy (transport-error, read-error,
parse-error, ...), so callers can branch on one attribute instead of the class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


class UWAPIError(Exception):
    """Base exception for all uwapi errors."""

    kind: ClassVar[str] = "error"

    def __init__(self, message: str = "A uwapi error occurred.") -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class KeyMissingError(UWAPIError):
    """Raised when the API key is missing or not a usable string."""

    kind: ClassVar[str] = "config-error"

    def __init__(
        self,
        message: str = "UW API key is missing. Pass the key to create(key) or UWAPIClient(key).",
    ) -> None:
        super().__init__(message)


class ValidationError(UWAPIError):
    """Raised when operation arguments fail validation."""

    kind: ClassVar[str] = "validation-error"

    def __init__(self, message: str = "Input validation failed.") -> None:
        super().__init__(message)


class TransportError(UWAPIError):
    """The GET could not be issued or the connection failed before a response arrived."""

    kind: ClassVar[str] = "transport-error"

    def __init__(self, message: str = "UW API request could not be sent.") -> None:
        super().__init__(message)


class ReadError(UWAPIError):
    """A response started arriving but its body could not be read in full."""

    kind: ClassVar[str] = "read-error"

    def __init__(self, message: str = "Failed to read UW API response body.") -> None:
        super().__init__(message)


class ParseError(UWAPIError):
    """Raised when the response body is not valid JSON."""

    kind: ClassVar[str] = "parse-error"

    def __init__(self, message: str = "Failed to parse UW API response.") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class HTTPStatusError(UWAPIError):
    """
    Raised when the upstream answers with status >= 400 and a body that is not JSON.

    Fields:
        status_code: HTTP status code.
        message: A human-readable error message.
        url: The requested URL with the key redacted.
    """

    kind: ClassVar[str] = "http-error"

    status_code: Optional[int] = None
    message: str = "UW API request failed."
    url: Optional[str] = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.__str__())

    def __str__(self) -> str:
        parts: list[str] = []
        if self.status_code is not None:
            parts.append(f"HTTP {self.status_code}")
        if self.url:
            parts.append(f"url={self.url}")
        prefix = " ".join(parts).strip()

        if prefix:
            return f"UW API error ({prefix}): {self.message}"
        return f"UW API error: {self.message}"


@dataclass(frozen=True)
class ApplicationError(UWAPIError):
    """
    Raised by envelope.raise_for_meta when `meta.status` reports a failure.

    The request itself succeeded; the upstream rejected it (invalid key,
    unknown subject, ...) inside its JSON envelope.
    """

    kind: ClassVar[str] = "application-error"

    status: Optional[int] = None
    message: str = "UW API reported an error."
    method: Optional[str] = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.__str__())

    def __str__(self) -> str:
        where = f" in {self.method}" if self.method else ""
        if self.status is not None:
            return f"UW API application error {self.status}{where}: {self.message}"
        return f"UW API application error{where}: {self.message}"
