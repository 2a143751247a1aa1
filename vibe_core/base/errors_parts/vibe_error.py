"""
Structured exception types for the request/response pipeline.

Every failure raised by providers, the provider registry, or the plugin
pipeline is a `VibeError` subclass carrying a normalized `ErrorCode`. The
orchestrator forwards these unchanged to its caller.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode


class VibeError(Exception):
    """Base class for all typed pipeline errors.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for status text.
    """

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotConfigured(VibeError):
    """An operation needs a provider or credential that was not supplied."""

    code = ErrorCode.NOT_CONFIGURED

    def __init__(self, message: str = "Provider not configured", provider: Optional[str] = None) -> None:
        super().__init__(message)
        self.provider = provider


class NetworkError(VibeError):
    """Transport-level failure: no response was received (DNS, refused, timeout)."""

    code = ErrorCode.NETWORK

    def __init__(self, message: str, *, timed_out: bool = False) -> None:
        super().__init__(message)
        self.timed_out = timed_out
        if timed_out:
            self.code = ErrorCode.TIMEOUT

    def __str__(self) -> str:
        return f"Network error: {self.message}"


class ApiError(VibeError):
    """The endpoint answered but with a non-success status or a malformed payload.

    Attributes:
        status: HTTP status code of the reply.
        body: Raw reply body for non-2xx replies, or a schema-violation
            description when a 2xx body is malformed.
    """

    code = ErrorCode.API

    def __init__(self, status: int, body: str) -> None:
        super().__init__(body)
        self.status = status
        self.body = body

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.status, self.body) == (other.status, other.body)

    def __hash__(self) -> int:
        return hash((self.status, self.body))

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, body={self.body!r})"

    def __str__(self) -> str:
        return f"API error {self.status}: {self.body}"


class ProviderIndexError(VibeError, IndexError):
    """Raised when a provider index falls outside the registered sequence."""

    code = ErrorCode.INDEX

    def __init__(self, index: int, size: int) -> None:
        if size:
            message = f"Provider index {index} out of bounds (0..{size - 1})"
        else:
            message = f"Provider index {index} out of bounds (no providers registered)"
        super().__init__(message)
        self.index = index
        self.size = size


class PluginError(VibeError):
    """A plugin transform step (or its initialization) failed."""

    code = ErrorCode.PLUGIN

    def __init__(self, plugin_name: str, message: str) -> None:
        super().__init__(message)
        self.plugin_name = plugin_name

    def __str__(self) -> str:
        return f"Plugin '{self.plugin_name}' failed: {self.message}"


__all__ = [
    "VibeError",
    "NotConfigured",
    "NetworkError",
    "ApiError",
    "ProviderIndexError",
    "PluginError",
]
