"""Provider Factory utilities.

Purpose
-------
Build the concrete :class:`~vibe_core.base.interfaces.Provider` for a
:class:`ProviderConfig` from its ``kind`` tag. Provider modules are imported
lazily using ``importlib`` so that loading the factory does not pull in every
backend.

Fallback semantics
------------------
The set of provider variants is closed. A kind tag the factory does not know
is not an error: the config is served by a :class:`MockProvider` and a
WARNING-level ``provider.kind.unknown`` event is logged so the misconfiguration
stays visible.
"""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type

import httpx

from .interfaces import Provider
from .logging import LogContext, get_logger, log_event
from .models import ProviderConfig, ProviderKind

_logger = get_logger("providers.factory")


class ProviderFactory:
    """Create providers based on a config's kind tag (e.g. ``"Ollama"``).

    Design notes
    ------------
    - Table-driven: one entry per :class:`ProviderKind`.
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Network-backed providers accept an optional ``httpx.Client``; tests use
      it to inject a ``MockTransport``. The mock provider ignores it.
    """

    _PROVIDERS: Dict[ProviderKind, Dict[str, str]] = {
        ProviderKind.MOCK: {"module": "vibe_core.mock.client", "class": "MockProvider"},
        ProviderKind.OLLAMA: {"module": "vibe_core.ollama.client", "class": "OllamaProvider"},
        ProviderKind.OPENAI: {"module": "vibe_core.openai.client", "class": "OpenAIProvider"},
        ProviderKind.ANTHROPIC: {"module": "vibe_core.anthropic.client", "class": "AnthropicProvider"},
    }

    @classmethod
    def create(cls, config: ProviderConfig, *, client: Optional[httpx.Client] = None) -> Provider:
        """Create a provider for ``config``.

        Parameters
        ----------
        config:
            Immutable provider configuration; ``config.kind`` selects the variant.
        client:
            Optional HTTP client handed to network-backed providers.

        Returns
        -------
        Provider
            The matching variant, or a ``MockProvider`` for unknown kinds.
        """
        kind = config.parsed_kind
        if kind is None:
            log_event(
                _logger,
                "provider.kind.unknown",
                LogContext(provider=config.kind),
                level=logging.WARNING,
                display_name=config.resolved_display_name(),
                fallback=ProviderKind.MOCK.value,
            )
            kind = ProviderKind.MOCK

        klass = cls._resolve(kind)
        kwargs: Dict[str, Any] = {}
        if client is not None and kind is not ProviderKind.MOCK:
            kwargs["client"] = client
        return klass(config, **kwargs)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the kind tags the factory knows, in deterministic order."""
        return tuple(kind.value for kind in cls._PROVIDERS)

    @classmethod
    def _resolve(cls, kind: ProviderKind) -> Type[Provider]:
        entry = cls._PROVIDERS[kind]
        mod = import_module(entry["module"])
        return getattr(mod, entry["class"])


__all__ = ["ProviderFactory"]
