"""Service layer: orchestrator, session history and the CLI."""

from .history import SessionEntry, SessionHistory
from .orchestrator import Orchestrator, default_plugins

__all__ = ["Orchestrator", "SessionEntry", "SessionHistory", "default_plugins"]
