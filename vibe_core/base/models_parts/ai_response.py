"""
AIResponse DTO and token usage counters.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TokenUsage:
    """Token counters reported by a backend; any field may be unknown."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @classmethod
    def from_counts(cls, prompt: Optional[int], completion: Optional[int]) -> "TokenUsage":
        total = prompt + completion if prompt is not None and completion is not None else None
        return cls(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AIResponse:
    """Reply from a provider.

    Attributes:
        text: Reply text (unparsed markdown).
        model: Model that produced the reply.
        usage: Optional token counters.
    """

    text: str
    model: str
    usage: Optional[TokenUsage] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "model": self.model,
            "usage": self.usage.to_dict() if self.usage else None,
        }


__all__ = ["AIResponse", "TokenUsage"]
