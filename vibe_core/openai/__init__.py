"""OpenAI-compatible provider package."""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
