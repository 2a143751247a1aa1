"""Ollama provider.

Purpose:
    Implements non-streaming generation against the local Ollama HTTP API
    (default ``http://localhost:11434``) via ``POST /api/generate``.

External dependencies:
    HTTP client only (``httpx``, through the shared pool). No API key is
    required since Ollama is a local daemon.

Reply shape:
    ``{"response": "...", "prompt_eval_count": N, "eval_count": M, ...}``;
    a 2xx body without a string ``response`` field is a schema violation.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from ..base.models import AIRequest, ProviderKind, TokenUsage
from ..base.network_provider import NetworkBackedProvider, optional_int


class OllamaProvider(NetworkBackedProvider):
    """Local Ollama daemon backend."""

    @property
    def provider_name(self) -> str:
        return "ollama"

    def default_display_name(self) -> str:
        return ProviderKind.OLLAMA.value

    @property
    def request_path(self) -> str:
        return "/api/generate"

    def build_payload(self, request: AIRequest) -> Dict[str, Any]:
        return {
            "model": self._model,
            "prompt": request.full_prompt(),
            "stream": False,
            "options": {
                "temperature": request.temperature,
                "num_predict": request.max_tokens,
            },
        }

    def extract_reply(self, data: Mapping[str, Any]) -> Tuple[str, Optional[TokenUsage]]:
        text = data["response"]
        prompt_tokens = optional_int(data, "prompt_eval_count")
        completion_tokens = optional_int(data, "eval_count")
        usage = None
        if prompt_tokens is not None or completion_tokens is not None:
            usage = TokenUsage.from_counts(prompt_tokens, completion_tokens)
        return text, usage


__all__ = ["OllamaProvider"]
