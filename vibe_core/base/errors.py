"""Unified error taxonomy public surface.

This module re-exports the implementations under
``vibe_core.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.vibe_error import (
    ApiError,
    NetworkError,
    NotConfigured,
    PluginError,
    ProviderIndexError,
    VibeError,
)
from .errors_parts.classification import classify_exception

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
