"""Sample plugins shipped with the core.

``UppercasePlugin`` upper-cases the prompt; ``CodeFormatterPlugin`` tags every
code fence in the reply with a marker comment. Both refuse to run until the
registry has initialized them.
"""

from __future__ import annotations

from typing import FrozenSet

from ..errors import PluginError
from .base import Plugin, PluginCapability, PluginMetadata

SAMPLE_AUTHOR = "Vibe Coder Team"
FORMATTER_MARKER = "// Formatted by Code Formatter Plugin"


class UppercasePlugin(Plugin):
    """Converts prompt text to uppercase."""

    def __init__(self) -> None:
        self._metadata = PluginMetadata(
            name="Uppercase Converter",
            version="0.1.0",
            description="Converts input text to uppercase",
            author=SAMPLE_AUTHOR,
        )
        self._enabled = False

    @property
    def metadata(self) -> PluginMetadata:
        return self._metadata

    def capabilities(self) -> FrozenSet[PluginCapability]:
        return frozenset({PluginCapability.PRE_PROCESSOR})

    def initialize(self) -> None:
        self._enabled = True

    def pre_process(self, text: str) -> str:
        if not self._enabled:
            raise PluginError(self._metadata.name, "Plugin not initialized")
        return text.upper()


class CodeFormatterPlugin(Plugin):
    """Adds a formatting marker line after every code fence in the reply."""

    def __init__(self) -> None:
        self._metadata = PluginMetadata(
            name="Code Formatter",
            version="0.1.0",
            description="Adds syntax highlighting hints to code blocks",
            author=SAMPLE_AUTHOR,
        )
        self._enabled = False

    @property
    def metadata(self) -> PluginMetadata:
        return self._metadata

    def capabilities(self) -> FrozenSet[PluginCapability]:
        return frozenset({PluginCapability.POST_PROCESSOR, PluginCapability.CODE_FORMATTER})

    def initialize(self) -> None:
        self._enabled = True

    def post_process(self, text: str) -> str:
        if not self._enabled:
            raise PluginError(self._metadata.name, "Plugin not initialized")
        return text.replace("```", f"```\n{FORMATTER_MARKER}\n")


__all__ = ["UppercasePlugin", "CodeFormatterPlugin", "FORMATTER_MARKER"]
