"""
Provider configuration value object.

A ``ProviderConfig`` is the only input needed to build a provider. It is frozen:
once a provider is constructed from it, neither side can change it. Missing
endpoint/model values are resolved against per-kind defaults by the provider
at construction time.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .provider_kind import ProviderKind


@dataclass(frozen=True)
class ProviderConfig:
    """Settings for one backend.

    Attributes:
        kind: Provider kind tag (e.g. ``"Ollama"``). Accepts a
            :class:`ProviderKind` or any string; unknown strings are kept as-is.
        display_name: Optional label shown to users; defaults to ``kind``.
        credential: API key or token; empty when the backend needs none.
        endpoint: Optional base URL; a per-kind default applies when omitted.
        model: Optional model identifier; a per-kind default applies when omitted.
    """

    kind: str
    display_name: Optional[str] = None
    credential: str = ""
    endpoint: Optional[str] = None
    model: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.kind, ProviderKind):
            object.__setattr__(self, "kind", self.kind.value)

    @property
    def parsed_kind(self) -> Optional[ProviderKind]:
        """Return the recognised :class:`ProviderKind`, or ``None``."""
        return ProviderKind.parse(self.kind)

    def resolved_display_name(self) -> str:
        """Return ``display_name`` when set, else the kind tag."""
        return self.display_name or self.kind

    def to_dict(self, *, redact: bool = True) -> Dict[str, Any]:
        """Return a JSON-serializable mapping; the credential is masked by default."""
        data = asdict(self)
        if redact and data.get("credential"):
            data["credential"] = "***"
        return data


__all__ = ["ProviderConfig"]
