"""
Provider-agnostic domain models public surface.

This module re-exports the one-class-per-file implementations under
``vibe_core.base.models_parts``.
"""

from .models_parts.provider_kind import ProviderKind
from .models_parts.provider_config import ProviderConfig
from .models_parts.ai_request import AIRequest
from .models_parts.ai_response import AIResponse, TokenUsage

__all__ = [
    "ProviderKind",
    "ProviderConfig",
    "AIRequest",
    "AIResponse",
    "TokenUsage",
]
