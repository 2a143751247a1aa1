"""Plugin pipeline: fold order, fail-fast, registration and sample plugins."""

from __future__ import annotations

import threading
from typing import FrozenSet, List

import pytest

from vibe_core.base.errors import PluginError
from vibe_core.base.plugins import (
    FORMATTER_MARKER,
    CodeFormatterPlugin,
    Plugin,
    PluginCapability,
    PluginMetadata,
    PluginRegistry,
    UppercasePlugin,
)


class Tagger(Plugin):
    """Appends its tag; declares whichever stages it is given."""

    def __init__(self, tag: str, caps=(PluginCapability.PRE_PROCESSOR, PluginCapability.POST_PROCESSOR), log=None):
        self.tag = tag
        self._caps = frozenset(caps)
        self.log: List[str] = log if log is not None else []

    @property
    def metadata(self) -> PluginMetadata:
        return PluginMetadata(name=self.tag, version="1.0")

    def capabilities(self) -> FrozenSet[PluginCapability]:
        return self._caps

    def pre_process(self, text: str) -> str:
        self.log.append(f"pre:{self.tag}")
        return f"{text}+{self.tag}"

    def post_process(self, text: str) -> str:
        self.log.append(f"post:{self.tag}")
        return f"{text}-{self.tag}"


class Exploding(Tagger):
    def __init__(self, tag: str, exc: Exception, **kw):
        super().__init__(tag, **kw)
        self.exc = exc

    def pre_process(self, text: str) -> str:
        self.log.append(f"pre:{self.tag}")
        raise self.exc


class BadInit(Tagger):
    def initialize(self) -> None:
        raise RuntimeError("no config")


def test_empty_pipeline_is_identity():
    reg = PluginRegistry()
    assert reg.run_pre("x") == "x"
    assert reg.run_post("y") == "y"


def test_fold_follows_registration_order():
    reg = PluginRegistry()
    reg.register(Tagger("p1"))
    reg.register(Tagger("p2"))
    assert reg.run_pre("x") == "x+p1+p2"
    assert reg.run_post("x") == "x-p1-p2"


def test_plugins_without_capability_are_skipped():
    log: List[str] = []
    reg = PluginRegistry()
    reg.register(Tagger("pre-only", caps=[PluginCapability.PRE_PROCESSOR], log=log))
    reg.register(Tagger("post-only", caps=[PluginCapability.POST_PROCESSOR], log=log))
    reg.register(Tagger("cmd", caps=[PluginCapability.CUSTOM_COMMAND], log=log))
    assert reg.run_pre("x") == "x+pre-only"
    assert reg.run_post("x") == "x-post-only"
    assert log == ["pre:pre-only", "post:post-only"]


def test_first_failure_aborts_fold(read_events):
    log: List[str] = []
    reg = PluginRegistry()
    failure = PluginError("p1", "bad input")
    reg.register(Exploding("p1", failure, log=log))
    reg.register(Tagger("p2", log=log))
    with pytest.raises(PluginError) as excinfo:
        reg.run_pre("x")
    assert excinfo.value is failure
    assert log == ["pre:p1"]
    abort = next(e for e in read_events() if e["event"] == "pipeline.abort")
    assert abort["plugin"] == "p1"
    assert abort["error_code"] == "plugin"
    assert abort["phase"] == "pre"


def test_foreign_exceptions_are_wrapped():
    reg = PluginRegistry()
    reg.register(Exploding("p1", ValueError("nope")))
    with pytest.raises(PluginError) as excinfo:
        reg.run_pre("x")
    assert excinfo.value.plugin_name == "p1"
    assert excinfo.value.message == "nope"
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert str(excinfo.value) == "Plugin 'p1' failed: nope"


def test_failed_initialize_is_reported_and_not_added():
    reg = PluginRegistry()
    reg.register(Tagger("ok"))
    with pytest.raises(PluginError) as excinfo:
        reg.register(BadInit("broken"))
    assert excinfo.value.plugin_name == "broken"
    assert "no config" in excinfo.value.message
    assert [m.name for m in reg.list_plugins()] == ["ok"]
    assert reg.run_pre("x") == "x+ok"


def test_lookup_helpers():
    reg = PluginRegistry()
    upper = UppercasePlugin()
    fmt = CodeFormatterPlugin()
    reg.register(upper)
    reg.register(fmt)
    assert len(reg) == 2
    assert reg.get("Uppercase Converter") is upper
    assert reg.get("missing") is None
    assert reg.find_by_capability(PluginCapability.CODE_FORMATTER) == [fmt]
    assert reg.find_by_capability("PreProcessor") == [upper]
    assert reg.find_by_capability("NotACapability") == []
    meta = reg.list_plugins()[0]
    assert (meta.name, meta.version, meta.author) == ("Uppercase Converter", "0.1.0", "Vibe Coder Team")


def test_sample_plugins_refuse_to_run_uninitialized():
    with pytest.raises(PluginError, match="not initialized"):
        UppercasePlugin().pre_process("x")
    with pytest.raises(PluginError, match="not initialized"):
        CodeFormatterPlugin().post_process("x")


def test_sample_plugins_through_pipeline():
    reg = PluginRegistry()
    reg.register(UppercasePlugin())
    reg.register(CodeFormatterPlugin())
    assert reg.run_pre("hello world") == "HELLO WORLD"
    assert reg.run_post("hello world") == "hello world"
    out = reg.run_post("```rust\nfn main() {}\n```")
    assert out.count(FORMATTER_MARKER) == 2
    assert out.startswith(f"```\n{FORMATTER_MARKER}\nrust")


def test_registration_during_fold_does_not_disturb_snapshot():
    reg = PluginRegistry()
    started = threading.Event()
    proceed = threading.Event()

    class Gate(Tagger):
        def pre_process(self, text: str) -> str:
            started.set()
            proceed.wait(5)
            return super().pre_process(text)

    reg.register(Gate("gate"))
    out = []
    t = threading.Thread(target=lambda: out.append(reg.run_pre("x")))
    t.start()
    assert started.wait(5)
    reg.register(Tagger("late"))
    proceed.set()
    t.join(5)
    assert out == ["x+gate"]
    assert reg.run_pre("x") == "x+gate+late"
