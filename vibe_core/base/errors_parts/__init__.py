"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `vibe_core.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .vibe_error import (
    ApiError,
    NetworkError,
    NotConfigured,
    PluginError,
    ProviderIndexError,
    VibeError,
)
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "VibeError",
    "NotConfigured",
    "NetworkError",
    "ApiError",
    "ProviderIndexError",
    "PluginError",
    "classify_exception",
]
