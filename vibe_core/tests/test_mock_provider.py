from __future__ import annotations

from vibe_core.base.models import AIRequest, ProviderConfig
from vibe_core.mock import MOCK_TOKENS_USED, MockProvider, render_mock_reply


def test_mock_reply_is_deterministic():
    provider = MockProvider()
    assert provider.send("abc", 0.1, 1) == provider.send("abc", 1.5, 9999)
    assert provider.send("abc", 0.7, 10) != provider.send("abd", 0.7, 10)


def test_mock_reply_echoes_prompt():
    text = render_mock_reply("What is Rust?")
    assert text.startswith("# Mock AI Response\n")
    assert "You asked: What is Rust?" in text
    assert "```python" in text


def test_mock_complete_reports_usage_and_model():
    response = MockProvider(ProviderConfig(kind="Mock", model="m-2")).complete(AIRequest(prompt="x"))
    assert response.model == "m-2"
    assert response.usage is not None
    assert response.usage.total_tokens == MOCK_TOKENS_USED == 150


def test_mock_defaults():
    provider = MockProvider()
    assert provider.provider_name == "mock"
    assert provider.model == "mock-model-v1"
    assert provider.display_name() == "Mock"
    assert "MockProvider" in repr(provider)
