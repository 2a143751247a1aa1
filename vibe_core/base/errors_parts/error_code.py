"""
Normalized error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `VibeError`. Values are
lowercase snake_case and are considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    NOT_CONFIGURED = "not_configured"
    NETWORK = "network"
    TIMEOUT = "timeout"
    API = "api"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    SERVER_ERROR = "server_error"
    INVALID_RESPONSE = "invalid_response"
    INDEX = "index"
    PLUGIN = "plugin"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
