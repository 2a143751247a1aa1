"""
Base package

Exports the provider-agnostic contracts shared by every layer:

- Errors: typed failure taxonomy and classification
- Models (DTOs): provider config and request/response shapes
- Interfaces: the ``Provider`` contract
- Factory: kind-driven creation of providers
- Timeouts: HTTP timeout configuration

Registries and plugins live in the ``registry`` and ``plugins`` subpackages.
"""

from .errors import (
    ApiError,
    ErrorCode,
    NetworkError,
    NotConfigured,
    PluginError,
    ProviderIndexError,
    VibeError,
    classify_exception,
)
from .factory import ProviderFactory
from .interfaces import Provider
from .models import AIRequest, AIResponse, ProviderConfig, ProviderKind, TokenUsage
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "ApiError",
    "ErrorCode",
    "NetworkError",
    "NotConfigured",
    "PluginError",
    "ProviderIndexError",
    "VibeError",
    "classify_exception",
    "ProviderFactory",
    "Provider",
    "AIRequest",
    "AIResponse",
    "ProviderConfig",
    "ProviderKind",
    "TokenUsage",
    "TimeoutConfig",
    "get_timeout_config",
]
