"""
Enumerated provider kinds.

The kind tag on a :class:`ProviderConfig` selects which provider variant the
factory builds. Tags are matched case-insensitively; unknown tags are not an
error at this layer (see ``ProviderFactory``).
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ProviderKind(str, Enum):
    """Closed set of provider variants known to the factory."""

    MOCK = "Mock"
    OLLAMA = "Ollama"
    OPENAI = "OpenAI"
    ANTHROPIC = "Anthropic"

    @classmethod
    def parse(cls, value: "str | ProviderKind | None") -> Optional["ProviderKind"]:
        """Return the matching kind, or ``None`` for unrecognised tags."""
        if isinstance(value, ProviderKind):
            return value
        name = (value or "").strip().lower()
        for kind in cls:
            if kind.value.lower() == name:
                return kind
        return None


__all__ = ["ProviderKind"]
