"""Deterministic mock provider for offline use, tests, and the dispatch fallback.

Purpose
-------
Implement the ``Provider`` contract without any network traffic. The reply is a
pure function of the prompt: a fixed markdown document (title, echoed prompt,
code block, explanation) that exercises every parser path a typical reply
would. ``send`` never fails.

The provider registry also builds a throwaway ``MockProvider`` when no
provider is registered or active, and the factory uses it for unknown kinds.
"""

from __future__ import annotations

from typing import Optional

from ..base.interfaces import Provider
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import AIRequest, AIResponse, ProviderConfig, ProviderKind, TokenUsage
from ..config.defaults import MOCK_DEFAULT_MODEL

MOCK_TOKENS_USED = 150

_RESPONSE_TEMPLATE = (
    "# Mock AI Response\n"
    "\n"
    "You asked: {prompt}\n"
    "\n"
    "## Code Example\n"
    "\n"
    "```python\n"
    "def hello():\n"
    "    print(\"Hello from Vibe Coder!\")\n"
    "```\n"
    "\n"
    "## Explanation\n"
    "\n"
    "This is a mock response demonstrating the parsing capabilities."
)


def render_mock_reply(prompt: str) -> str:
    """Return the canned markdown reply for ``prompt``."""
    return _RESPONSE_TEMPLATE.format(prompt=prompt)


class MockProvider(Provider):
    """Provider that answers every prompt with deterministic demonstration markdown."""

    def __init__(self, config: Optional[ProviderConfig] = None) -> None:
        super().__init__(config or ProviderConfig(kind=ProviderKind.MOCK.value))
        self._model = self._config.model or MOCK_DEFAULT_MODEL
        self._logger = get_logger("providers.mock")

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def model(self) -> str:
        return self._model

    def default_display_name(self) -> str:
        # unknown kinds served by the mock keep their configured tag
        if self._config.parsed_kind is ProviderKind.MOCK:
            return ProviderKind.MOCK.value
        return self._config.kind

    def complete(self, request: AIRequest) -> AIResponse:
        ctx = LogContext(provider=self.provider_name, model=self._model)
        usage = TokenUsage(total_tokens=MOCK_TOKENS_USED)
        response = AIResponse(text=render_mock_reply(request.prompt), model=self._model, usage=usage)
        normalized_log_event(self._logger, "send.end", ctx, phase="finalize", tokens=usage)
        return response


__all__ = ["MockProvider", "render_mock_reply", "MOCK_TOKENS_USED"]
