"""Mock provider package exposing the deterministic offline provider."""

from .client import MOCK_TOKENS_USED, MockProvider, render_mock_reply

__all__ = ["MockProvider", "render_mock_reply", "MOCK_TOKENS_USED"]
