"""
Provider interface for the dispatch layer.

Every backend variant (network-backed or mock) implements :class:`Provider`.
The registry stores providers by this type only and is agnostic to the
concrete variant.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import AIRequest, AIResponse, ProviderConfig


class Provider(ABC):
    """Capability to submit a prompt to one backend and return its reply.

    Implementations raise :class:`~vibe_core.base.errors.VibeError` subclasses
    on failure (``NotConfigured``, ``NetworkError``, ``ApiError``) and never
    leak transport-library exceptions upstream.
    """

    def __init__(self, config: ProviderConfig) -> None:
        self._config = config

    @property
    def config(self) -> ProviderConfig:
        """The immutable configuration this provider was built from."""
        return self._config

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"ollama"``."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Effective model identifier used for requests."""

    def display_name(self) -> str:
        """Human-facing label: the configured display name, else a per-variant default."""
        return self._config.display_name or self.default_display_name()

    def default_display_name(self) -> str:
        return self._config.kind

    @abstractmethod
    def complete(self, request: AIRequest) -> AIResponse:
        """Execute a single request and return the full response."""

    def send(self, prompt: str, temperature: float, max_tokens: int) -> str:
        """Send ``prompt`` and return the reply text."""
        return self.complete(AIRequest(prompt=prompt, temperature=temperature, max_tokens=max_tokens)).text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.display_name()!r}, model={self.model!r})"


__all__ = ["Provider"]
