"""Timeout configuration for provider HTTP calls.

TimeoutConfig
    Dataclass capturing normalized timeout values.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use (and again whenever the relevant variables change). Supported
    environment variables (all optional):
        VIBE_TIMEOUT_HTTP_SECONDS
        VIBE_TIMEOUT_CONNECT_SECONDS

Per-request deadlines travel on ``AIRequest.timeout_seconds``; when absent the
HTTP timeout from this module applies.
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Baseline timeout for a single provider request.
        connect_timeout_seconds: Timeout for establishing the TCP/TLS
            connection.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(
        [
            os.getenv("VIBE_TIMEOUT_HTTP_SECONDS", ""),
            os.getenv("VIBE_TIMEOUT_CONNECT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("VIBE_TIMEOUT_HTTP_SECONDS", 60.0),
        connect_timeout_seconds=_parse_env_float("VIBE_TIMEOUT_CONNECT_SECONDS", 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
