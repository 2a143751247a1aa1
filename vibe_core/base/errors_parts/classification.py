"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction and status-to-code mapping so log events can
carry a stable ``error_code`` regardless of which layer raised.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .vibe_error import ApiError, VibeError


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status``
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status", "status_code"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    408: ErrorCode.TIMEOUT,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.SERVER_ERROR,
    503: ErrorCode.SERVER_ERROR,
    504: ErrorCode.TIMEOUT,
}


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ``ApiError`` with a mapped HTTP status (auth, rate limit, ...).
        2. ``VibeError`` passthrough.
        3. httpx timeouts and transport errors.
        4. HTTP status mapping on foreign exceptions.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ApiError) and exc.status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[exc.status]
    if isinstance(exc, VibeError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.NETWORK
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
