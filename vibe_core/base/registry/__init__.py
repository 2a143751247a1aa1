"""Provider registry package."""

from .provider_registry import ProviderBuilder, ProviderRegistry

__all__ = ["ProviderRegistry", "ProviderBuilder"]
