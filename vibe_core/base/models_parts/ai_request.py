"""
AIRequest DTO describing a single dispatch.

Transient: created per call and never persisted by the core.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AIRequest:
    """Normalized prompt submission.

    Attributes:
        prompt: Prompt text after the pre-process chain.
        temperature: Sampling temperature.
        max_tokens: Upper bound on generated tokens.
        context: Optional prior context; network providers prepend it to the
            prompt.
        timeout_seconds: Optional per-request deadline for the HTTP call.
            ``None`` uses the configured HTTP timeout.
    """

    prompt: str
    temperature: float = 0.7
    max_tokens: int = 2000
    context: Optional[str] = None
    timeout_seconds: Optional[float] = None

    def full_prompt(self) -> str:
        """Return the prompt with any context prepended."""
        if self.context:
            return f"{self.context}\n\n{self.prompt}"
        return self.prompt


__all__ = ["AIRequest"]
