"""OpenAI-compatible provider.

Purpose:
    Implements a single non-streaming Chat Completions call
    (``POST {endpoint}/chat/completions``) with bearer authentication. Any
    OpenAI-compatible endpoint (OpenRouter, DeepSeek, local gateways) works by
    overriding ``endpoint`` on the config.

Reply shape:
    ``choices[0].message.content`` carries the text; ``usage`` carries
    ``prompt_tokens``/``completion_tokens``/``total_tokens`` when present.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from ..base.models import AIRequest, ProviderKind, TokenUsage
from ..base.network_provider import NetworkBackedProvider, optional_int


class OpenAIProvider(NetworkBackedProvider):
    """OpenAI Chat Completions backend."""

    requires_credential = True

    @property
    def provider_name(self) -> str:
        return "openai"

    def default_display_name(self) -> str:
        return ProviderKind.OPENAI.value

    @property
    def request_path(self) -> str:
        return "/chat/completions"

    def build_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._credential}"}

    def build_payload(self, request: AIRequest) -> Dict[str, Any]:
        return {
            "model": self._model,
            "messages": [{"role": "user", "content": request.full_prompt()}],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }

    def extract_reply(self, data: Mapping[str, Any]) -> Tuple[str, Optional[TokenUsage]]:
        text = data["choices"][0]["message"]["content"]
        usage = None
        raw_usage = data.get("usage")
        if isinstance(raw_usage, dict):
            usage = TokenUsage(
                prompt_tokens=optional_int(raw_usage, "prompt_tokens"),
                completion_tokens=optional_int(raw_usage, "completion_tokens"),
                total_tokens=optional_int(raw_usage, "total_tokens"),
            )
        return text, usage


__all__ = ["OpenAIProvider"]
