"""Provider registry: registration, selection, dispatch and fallback."""

from __future__ import annotations

import threading

import pytest

from vibe_core.base.errors import ProviderIndexError, VibeError
from vibe_core.base.models import AIRequest, ProviderConfig
from vibe_core.base.registry import ProviderRegistry
from vibe_core.mock import MockProvider, render_mock_reply


def _configs(n):
    return [ProviderConfig(kind="Mock", display_name=f"P{i}") for i in range(n)]


def test_first_registration_becomes_active(recording_factory):
    reg = ProviderRegistry(factory=recording_factory)
    assert reg.active_index is None
    assert reg.register(ProviderConfig(kind="Mock", display_name="one")) == 0
    assert reg.register(ProviderConfig(kind="Mock", display_name="two")) == 1
    assert reg.active_index == 0
    assert reg.list() == ["one", "two"]
    assert len(reg) == 2


def test_set_active_routes_dispatch_to_that_provider(recording_factory):
    reg = ProviderRegistry(factory=recording_factory)
    for cfg in _configs(4):
        reg.register(cfg)
    for i in range(4):
        reg.set_active(i)
        assert reg.dispatch("hello", 0.5, 10) == f"P{i}:hello"
        assert recording_factory.built[i].calls[-1] == AIRequest(prompt="hello", temperature=0.5, max_tokens=10)
    assert [len(p.calls) for p in recording_factory.built] == [1, 1, 1, 1]


@pytest.mark.parametrize("bad", [-1, 3, 100])
def test_out_of_range_set_active_leaves_state(recording_factory, bad):
    reg = ProviderRegistry(factory=recording_factory)
    for cfg in _configs(3):
        reg.register(cfg)
    reg.set_active(2)
    with pytest.raises(IndexError) as excinfo:
        reg.set_active(bad)
    assert isinstance(excinfo.value, ProviderIndexError)
    assert isinstance(excinfo.value, VibeError)
    assert excinfo.value.index == bad
    assert excinfo.value.size == 3
    assert reg.active_index == 2


def test_set_active_on_empty_registry_raises():
    reg = ProviderRegistry()
    with pytest.raises(ProviderIndexError, match="no providers registered"):
        reg.set_active(0)
    assert reg.active_index is None


def test_empty_registry_dispatch_uses_mock(read_events):
    reg = ProviderRegistry()
    assert reg.dispatch("What is Rust?", 0.7, 100) == render_mock_reply("What is Rust?")
    events = [e["event"] for e in read_events()]
    assert "dispatch.fallback.mock" in events


def test_empty_registry_dispatch_request_reports_mock_usage():
    response = ProviderRegistry().dispatch_request(AIRequest(prompt="x"))
    assert response.text == render_mock_reply("x")
    assert response.usage is not None and response.usage.total_tokens == 150


def test_unknown_kind_registers_usable_mock_provider(read_events):
    reg = ProviderRegistry()
    idx = reg.register(ProviderConfig(kind="Unknown", display_name="Mystery"))
    assert reg.list() == ["Mystery"]
    assert isinstance(reg.active_provider(), MockProvider)
    assert reg.dispatch("ping", 0.7, 10) == render_mock_reply("ping")
    events = read_events()
    warning = next(e for e in events if e["event"] == "provider.kind.unknown")
    assert warning["level"] == "WARNING"
    assert warning["provider"] == "Unknown"
    registered = next(e for e in events if e["event"] == "provider.registered")
    assert registered["index"] == idx


def test_unknown_kind_without_display_name_lists_its_kind(read_events):
    reg = ProviderRegistry()
    reg.register(ProviderConfig(kind="Unknown"))
    assert reg.list() == ["Unknown"]
    warning = next(e for e in read_events() if e["event"] == "provider.kind.unknown")
    assert warning["display_name"] == "Unknown"


def test_list_returns_a_copy(recording_factory):
    reg = ProviderRegistry(factory=recording_factory)
    reg.register(ProviderConfig(kind="Mock", display_name="a"))
    names = reg.list()
    names.append("intruder")
    assert reg.list() == ["a"]


def test_provider_errors_propagate_unchanged():
    class Boom(VibeError):
        pass

    err = Boom("kaput")

    class Failing(MockProvider):
        def complete(self, request):
            raise err

    reg = ProviderRegistry(factory=lambda cfg: Failing(cfg))
    reg.register(ProviderConfig(kind="Mock"))
    with pytest.raises(Boom) as excinfo:
        reg.dispatch("x", 0.7, 10)
    assert excinfo.value is err
    assert reg.active_index == 0


def test_slow_provider_does_not_block_registry():
    entered = threading.Event()
    release = threading.Event()

    class Slow(MockProvider):
        def complete(self, request):
            entered.set()
            release.wait(5)
            return super().complete(request)

    reg = ProviderRegistry(factory=lambda cfg: Slow(cfg))
    reg.register(ProviderConfig(kind="Mock", display_name="slow"))
    results = []
    worker = threading.Thread(target=lambda: results.append(reg.dispatch("x", 0.7, 10)))
    worker.start()
    try:
        assert entered.wait(5)
        # Both sides of the lock stay available while the call is in flight.
        assert reg.list() == ["slow"]
        assert reg.register(ProviderConfig(kind="Mock", display_name="fast")) == 1
        reg.set_active(1)
    finally:
        release.set()
        worker.join(5)
    assert results == [render_mock_reply("x")]
    assert reg.active_index == 1


def test_concurrent_registration_keeps_indices_unique(recording_factory):
    reg = ProviderRegistry(factory=recording_factory)
    indices = []
    lock = threading.Lock()

    def worker(n):
        for j in range(25):
            idx = reg.register(ProviderConfig(kind="Mock", display_name=f"w{n}-{j}"))
            with lock:
                indices.append(idx)
            reg.list()

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(indices) == list(range(100))
    assert len(reg) == 100
    assert reg.active_index == 0
