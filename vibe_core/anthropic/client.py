"""Anthropic Messages API provider.

Purpose:
    Implements a single non-streaming call to ``POST {endpoint}/messages``
    using ``x-api-key`` authentication and a pinned ``anthropic-version``.

Reply shape:
    ``content`` is a list of parts; the reply text is the concatenation of all
    parts of type ``text``. A reply with no text part is a schema violation.
    ``usage.input_tokens``/``usage.output_tokens`` feed the token counters.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from ..base.models import AIRequest, ProviderKind, TokenUsage
from ..base.network_provider import NetworkBackedProvider, optional_int
from ..config.defaults import ANTHROPIC_API_VERSION


class AnthropicProvider(NetworkBackedProvider):
    """Anthropic Claude backend."""

    requires_credential = True

    @property
    def provider_name(self) -> str:
        return "anthropic"

    def default_display_name(self) -> str:
        return ProviderKind.ANTHROPIC.value

    @property
    def request_path(self) -> str:
        return "/messages"

    def build_headers(self) -> Dict[str, str]:
        return {"x-api-key": self._credential, "anthropic-version": ANTHROPIC_API_VERSION}

    def build_payload(self, request: AIRequest) -> Dict[str, Any]:
        return {
            "model": self._model,
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": [{"role": "user", "content": request.full_prompt()}],
        }

    def extract_reply(self, data: Mapping[str, Any]) -> Tuple[str, Optional[TokenUsage]]:
        texts = [part["text"] for part in data["content"] if part.get("type") == "text"]
        if not texts:
            raise KeyError("content[type=text]")
        usage = None
        raw_usage = data.get("usage")
        if isinstance(raw_usage, dict):
            usage = TokenUsage.from_counts(
                optional_int(raw_usage, "input_tokens"),
                optional_int(raw_usage, "output_tokens"),
            )
        return "".join(texts), usage


__all__ = ["AnthropicProvider"]
