"""
Pydantic DTOs and validators for the settings document.

Purpose
-------
Validate the externally supplied settings mapping (provider entries, plugin
flags, general request defaults) before it enters the core, then convert it
into plain frozen values: :class:`ProviderConfig` tuples and plugin flags.

External dependencies: Pydantic only (no I/O). Reading the document from disk
lives in ``vibe_core.config``.

Failure semantics: validation either succeeds or raises
``pydantic.ValidationError``; callers surface that at the edge (CLI/UI).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..models import ProviderConfig


class ProviderSettingsDTO(BaseModel):
    """One ``ai_providers`` entry.

    ``kind`` may also be spelled ``type``; when both are absent the entry's
    ``name`` doubles as its kind (the older single-field layout).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1)
    kind: Optional[str] = Field(default=None, alias="type")
    enabled: bool = True
    api_key: Optional[str] = None
    api_endpoint: Optional[str] = None
    model: Optional[str] = None

    def to_config(self) -> ProviderConfig:
        return ProviderConfig(
            kind=(self.kind or self.name).strip(),
            display_name=self.name,
            credential=self.api_key or "",
            endpoint=self.api_endpoint or None,
            model=self.model or None,
        )


class PluginSettingsDTO(BaseModel):
    """Enable/disable flag for a plugin, matched by metadata name."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    enabled: bool = True


class GeneralSettingsDTO(BaseModel):
    """Request defaults and session limits."""

    model_config = ConfigDict(extra="ignore")

    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=2000, gt=0)
    max_history: int = Field(default=100, gt=0)


class AppSettingsDTO(BaseModel):
    """Top-level settings document. Unknown sections (``ui`` etc.) are ignored."""

    model_config = ConfigDict(extra="ignore")

    ai_providers: List[ProviderSettingsDTO] = Field(default_factory=list)
    plugins: List[PluginSettingsDTO] = Field(default_factory=list)
    general: GeneralSettingsDTO = Field(default_factory=GeneralSettingsDTO)

    def to_settings(self) -> "AppSettings":
        return AppSettings(
            providers=tuple(p.to_config() for p in self.ai_providers if p.enabled),
            plugin_flags={p.name: p.enabled for p in self.plugins},
            temperature=self.general.temperature,
            max_tokens=self.general.max_tokens,
            max_history=self.general.max_history,
        )


@dataclass(frozen=True)
class AppSettings:
    """Validated settings consumed by the orchestrator.

    Attributes:
        providers: Configs of the enabled provider entries, in document order.
        plugin_flags: Plugin name -> enabled flag.
        temperature: Default sampling temperature for prompts.
        max_tokens: Default generation bound for prompts.
        max_history: Session history capacity.
    """

    providers: Tuple[ProviderConfig, ...] = ()
    plugin_flags: Dict[str, bool] = field(default_factory=dict)
    temperature: float = 0.7
    max_tokens: int = 2000
    max_history: int = 100

    def plugin_enabled(self, name: str, default: bool = True) -> bool:
        """Return the flag for ``name``; plugins not mentioned get ``default``."""
        return self.plugin_flags.get(name, default)


__all__ = [
    "ProviderSettingsDTO",
    "PluginSettingsDTO",
    "GeneralSettingsDTO",
    "AppSettingsDTO",
    "AppSettings",
]
