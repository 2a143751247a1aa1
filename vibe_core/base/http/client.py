"""Shared HTTP client pool for network-backed providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances to avoid per-call allocations and reduce connection overhead
    across providers. Default timeouts derive from :func:`get_timeout_config`;
    callers pass a per-request timeout on each call.

Lifecycle & cleanup:
    - Clients are cached by a composite key of ``base_url`` and ``purpose``.
    - All clients are closed at interpreter exit via ``atexit``. Tests may also
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL to associate with the client so that
            relative request paths can be used.
        purpose: A short string discriminating separate pools (e.g.,
            "ollama.generate"). Keep stable to maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        cfg = get_timeout_config()
        timeout = httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
