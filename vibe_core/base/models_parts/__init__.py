"""Domain model parts; import from ``vibe_core.base.models`` instead."""

from .provider_kind import ProviderKind
from .provider_config import ProviderConfig
from .ai_request import AIRequest
from .ai_response import AIResponse, TokenUsage

__all__ = ["ProviderKind", "ProviderConfig", "AIRequest", "AIResponse", "TokenUsage"]
