"""Base plugin abstractions for the request pipeline.

Defines the plugin contract, its capability tags and descriptive metadata.
A plugin only takes part in the stages it declares a capability for; the
base class supplies identity transforms for the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Union


class PluginCapability(str, Enum):
    """Closed set of capability tags a plugin may declare."""

    PRE_PROCESSOR = "PreProcessor"
    POST_PROCESSOR = "PostProcessor"
    CODE_FORMATTER = "CodeFormatter"
    CUSTOM_COMMAND = "CustomCommand"


@dataclass(frozen=True)
class PluginMetadata:
    """Metadata describing a plugin.

    Attributes:
        name: Plugin identifier used for lookups and enable/disable flags.
        version: Plugin version string.
        description: Human-readable plugin description.
        author: Plugin author/maintainer.
    """

    name: str
    version: str
    description: str = ""
    author: str = ""


class Plugin:
    """Base class for all plugins.

    Subclasses provide :attr:`metadata` and :meth:`capabilities` and override
    the hooks they declare. Hooks signal failure by raising; the registry
    reports any failure as :class:`~vibe_core.base.errors.PluginError`.
    """

    @property
    def metadata(self) -> PluginMetadata:
        raise NotImplementedError

    @property
    def name(self) -> str:
        return self.metadata.name

    def capabilities(self) -> FrozenSet[PluginCapability]:
        return frozenset()

    def initialize(self) -> None:
        """Prepare the plugin; called once by the registry at registration time."""

    def pre_process(self, text: str) -> str:
        """Transform the prompt before dispatch."""
        return text

    def post_process(self, text: str) -> str:
        """Transform the reply after dispatch."""
        return text

    def provides_capability(self, capability: Union[PluginCapability, str]) -> bool:
        """Check if the plugin declares ``capability`` (enum member or tag string)."""
        try:
            cap = PluginCapability(capability)
        except ValueError:
            return False
        return cap in self.capabilities()

    def __repr__(self) -> str:
        meta = self.metadata
        return f"{type(self).__name__}(name={meta.name!r}, version={meta.version!r})"


__all__ = ["Plugin", "PluginCapability", "PluginMetadata"]
