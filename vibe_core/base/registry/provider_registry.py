"""Provider registry and dispatch.

Holds the ordered sequence of configured providers and the index of the
active one, and routes each prompt to the active provider.

Concurrency
-----------
State (provider sequence, active index) is guarded by a reader/writer lock:
``register`` and ``set_active`` take the exclusive side, ``list`` and the
provider lookup in ``dispatch`` take the shared side. The provider call
itself runs after the lock is released, so a slow backend never blocks
registry reads or other in-flight dispatches.

Fallback
--------
With no provider registered (or none active) ``dispatch`` answers through a
throwaway :class:`MockProvider`. This is the one deliberate recovery in the
request path; provider errors are propagated unchanged.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from ...mock import MockProvider
from ..errors import ProviderIndexError
from ..factory import ProviderFactory
from ..interfaces import Provider
from ..logging import LogContext, get_logger, log_event
from ..models import AIRequest, AIResponse, ProviderConfig
from ..rwlock import RWLock

ProviderBuilder = Callable[[ProviderConfig], Provider]


class ProviderRegistry:
    """Ordered, append-only set of providers with one optional active entry.

    Invariant: ``active_index`` is either ``None`` or a valid index into the
    sequence. Providers are owned by the registry; callers only see display
    names and indices.
    """

    def __init__(self, factory: Optional[ProviderBuilder] = None) -> None:
        """Create an empty registry.

        Parameters:
            factory: Callable building a provider from a config. Defaults to
                :meth:`ProviderFactory.create`.
        """
        self._factory: ProviderBuilder = factory or ProviderFactory.create
        self._providers: List[Provider] = []
        self._active: Optional[int] = None
        self._lock = RWLock()
        self._logger = get_logger("registry.providers")

    def register(self, config: ProviderConfig) -> int:
        """Build a provider for ``config``, append it and return its index.

        The first provider registered becomes active.
        """
        # Construction may import modules and read the environment; keep it
        # outside the exclusive section.
        provider = self._factory(config)
        with self._lock.write():
            self._providers.append(provider)
            index = len(self._providers) - 1
            if self._active is None:
                self._active = index
            active = self._active
        log_event(
            self._logger,
            "provider.registered",
            LogContext(provider=provider.provider_name, model=provider.model),
            index=index,
            display_name=provider.display_name(),
            active=active == index,
        )
        return index

    def list(self) -> List[str]:
        """Return a snapshot of display names in registration order."""
        with self._lock.read():
            providers = tuple(self._providers)
        return [p.display_name() for p in providers]

    def set_active(self, index: int) -> None:
        """Make the provider at ``index`` active.

        Raises:
            ProviderIndexError: ``index`` is negative or past the end. The
                active index is left unchanged.
        """
        with self._lock.write():
            size = len(self._providers)
            if index < 0 or index >= size:
                raise ProviderIndexError(index, size)
            previous, self._active = self._active, index
        log_event(self._logger, "provider.active.changed", previous=previous, index=index)

    @property
    def active_index(self) -> Optional[int]:
        with self._lock.read():
            return self._active

    def active_provider(self) -> Optional[Provider]:
        """Return the active provider, or ``None`` when nothing is registered."""
        with self._lock.read():
            if self._active is None:
                return None
            return self._providers[self._active]

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._providers)

    def dispatch(self, prompt: str, temperature: float, max_tokens: int) -> str:
        """Send ``prompt`` to the active provider and return its reply text.

        Raises whatever the provider raises (``NotConfigured``,
        ``NetworkError``, ``ApiError``) unchanged.
        """
        return self._resolve().send(prompt, temperature, max_tokens)

    def dispatch_request(self, request: AIRequest) -> AIResponse:
        """Like :meth:`dispatch` but takes and returns the full request/response shapes."""
        return self._resolve().complete(request)

    def _resolve(self) -> Provider:
        provider = self.active_provider()
        if provider is not None:
            return provider
        fallback = MockProvider()
        log_event(
            self._logger,
            "dispatch.fallback.mock",
            LogContext(provider=fallback.provider_name, model=fallback.model),
            reason="no active provider",
        )
        return fallback


__all__ = ["ProviderRegistry", "ProviderBuilder"]
