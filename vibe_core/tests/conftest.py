"""Pytest configuration for the vibe_core test suite.

Keeps tests hermetic: ``VIBE_*`` environment variables from the developer's
shell are removed, and pooled HTTP clients are closed after each test.
"""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Dict, Iterator, List

import pytest

from vibe_core.base.http import close_all_clients
from vibe_core.base.interfaces import Provider
from vibe_core.base.logging import get_logger
from vibe_core.base.models import AIRequest, AIResponse, ProviderConfig


@pytest.fixture(autouse=True)
def _clean_vibe_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.startswith("VIBE_"):
            monkeypatch.delenv(key, raising=False)
    yield
    close_all_clients()
    # Point the shared console handler back at a live stream once capsys is gone.
    get_logger()


@pytest.fixture()
def read_events(capsys: pytest.CaptureFixture[str]) -> Callable[[], List[Dict[str, Any]]]:
    """Return a reader for structured log events written to stderr.

    ``get_logger`` rebinds the shared console handler to the captured stream.
    """
    get_logger()

    def _read() -> List[Dict[str, Any]]:
        err = capsys.readouterr().err
        return [json.loads(line) for line in err.splitlines() if line.startswith("{")]

    return _read


class RecordingProvider(Provider):
    """Provider double that records prompts and echoes them with its label."""

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        self.calls: List[AIRequest] = []

    @property
    def provider_name(self) -> str:
        return "recording"

    @property
    def model(self) -> str:
        return self.config.model or "recording-model"

    def complete(self, request: AIRequest) -> AIResponse:
        self.calls.append(request)
        return AIResponse(text=f"{self.display_name()}:{request.prompt}", model=self.model)


@pytest.fixture()
def recording_factory() -> Callable[[ProviderConfig], RecordingProvider]:
    """Factory building ``RecordingProvider`` instances; built ones are kept on ``.built``."""
    built: List[RecordingProvider] = []

    def _factory(config: ProviderConfig) -> RecordingProvider:
        provider = RecordingProvider(config)
        built.append(provider)
        return provider

    _factory.built = built  # type: ignore[attr-defined]
    return _factory
