"""vibe_core package

Prompt pipeline core: plugin pre/post-processing around a dispatch to one of
several interchangeable AI providers, and a parser that turns the markdown
reply into typed content blocks.

Public API (re-exported):
    - Version: ``__version__``
    - Entry point: :class:`Orchestrator`
    - Providers: :class:`ProviderConfig`, :class:`ProviderKind`,
      :class:`ProviderRegistry`, :class:`Provider`
    - Plugins: :class:`Plugin`, :class:`PluginCapability`,
      :class:`PluginMetadata`, :class:`PluginRegistry`
    - Parser: :func:`parse`, :class:`ParsedResponse`
    - Exceptions: :class:`VibeError` and its subclasses, :class:`ErrorCode`
    - Settings: :func:`load_settings`
"""

from .base.errors import (
    ApiError,
    ErrorCode,
    NetworkError,
    NotConfigured,
    PluginError,
    ProviderIndexError,
    VibeError,
)
from .base.interfaces import Provider
from .base.models import AIRequest, AIResponse, ProviderConfig, ProviderKind
from .base.plugins import Plugin, PluginCapability, PluginMetadata, PluginRegistry
from .base.registry import ProviderRegistry
from .config import load_settings
from .parser import ParsedResponse, parse
from .service import Orchestrator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Orchestrator",
    "Provider",
    "ProviderConfig",
    "ProviderKind",
    "ProviderRegistry",
    "AIRequest",
    "AIResponse",
    "Plugin",
    "PluginCapability",
    "PluginMetadata",
    "PluginRegistry",
    "parse",
    "ParsedResponse",
    "VibeError",
    "NotConfigured",
    "NetworkError",
    "ApiError",
    "ProviderIndexError",
    "PluginError",
    "ErrorCode",
    "load_settings",
]
