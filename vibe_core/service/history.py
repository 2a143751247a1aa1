"""In-memory session history.

Keeps the most recent prompt/reply exchanges for the running session. The
log is bounded: once ``max_size`` entries are held, adding one evicts the
oldest. Nothing is persisted.
"""

from __future__ import annotations

import threading
import time
import uuid
from collections import deque
from dataclasses import asdict, dataclass, field
from typing import Any, Deque, Dict, List, Optional

from ..config.defaults import DEFAULT_MAX_HISTORY


@dataclass(frozen=True)
class SessionEntry:
    """One completed exchange.

    Attributes:
        prompt: Prompt as typed by the user (before the pre-process chain).
        response: Reply text after the post-process chain.
        model: Model that produced the reply.
        tokens_used: Total tokens reported by the provider, when known.
        id: Unique entry id.
        timestamp: Seconds since the epoch when the entry was recorded.
    """

    prompt: str
    response: str
    model: str = ""
    tokens_used: Optional[int] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SessionHistory:
    """Thread-safe bounded log of :class:`SessionEntry`, oldest first."""

    def __init__(self, max_size: int = DEFAULT_MAX_HISTORY) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._entries: Deque[SessionEntry] = deque(maxlen=max_size)
        self._lock = threading.Lock()

    def add(self, entry: SessionEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def record(
        self,
        prompt: str,
        response: str,
        model: str = "",
        tokens_used: Optional[int] = None,
    ) -> SessionEntry:
        """Build an entry for one exchange, add it and return it."""
        entry = SessionEntry(prompt=prompt, response=response, model=model, tokens_used=tokens_used)
        self.add(entry)
        return entry

    def entries(self) -> List[SessionEntry]:
        with self._lock:
            return list(self._entries)

    def get(self, entry_id: str) -> Optional[SessionEntry]:
        with self._lock:
            return next((e for e in self._entries if e.id == entry_id), None)

    def search(self, query: str) -> List[SessionEntry]:
        """Return entries whose prompt or response contains ``query`` (case-insensitive)."""
        needle = query.lower()
        with self._lock:
            return [e for e in self._entries if needle in e.prompt.lower() or needle in e.response.lower()]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["SessionEntry", "SessionHistory"]
