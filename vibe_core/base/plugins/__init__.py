"""Plugin pipeline: contract, registry and sample plugins."""

from .base import Plugin, PluginCapability, PluginMetadata
from .registry import PluginRegistry
from .samples import FORMATTER_MARKER, CodeFormatterPlugin, UppercasePlugin

__all__ = [
    "Plugin",
    "PluginCapability",
    "PluginMetadata",
    "PluginRegistry",
    "UppercasePlugin",
    "CodeFormatterPlugin",
    "FORMATTER_MARKER",
]
