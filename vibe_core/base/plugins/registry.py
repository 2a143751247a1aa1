"""Plugin registry and pipeline folds.

Registration order is execution order. Each fold threads the text through
every plugin declaring the stage's capability and stops at the first failure;
later plugins never run for that request.

The plugin sequence is an immutable tuple replaced on every registration
(copy-on-write), so folds iterate a stable snapshot while other threads
register.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Tuple, Union

from ..errors import PluginError
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from .base import Plugin, PluginCapability, PluginMetadata


class PluginRegistry:
    """Ordered, append-only pipeline of plugins.

    Attributes:
        logger: Structured logger instance.
    """

    def __init__(self) -> None:
        """Initialize an empty plugin registry."""
        self._plugins: Tuple[Plugin, ...] = ()
        self._lock = threading.Lock()
        self.logger = get_logger("plugins.registry")

    def register(self, plugin: Plugin) -> None:
        """Initialize and append a plugin.

        Args:
            plugin: Plugin instance to register.

        Raises:
            PluginError: If ``initialize`` fails. The plugin is not added and
                previously registered plugins are untouched.
        """
        meta = plugin.metadata
        try:
            plugin.initialize()
        except Exception as e:
            error = e if isinstance(e, PluginError) else PluginError(meta.name, f"initialization failed: {e}")
            normalized_log_event(
                self.logger,
                "plugin.init.failed",
                LogContext(plugin=meta.name),
                phase="initialize",
                error_code=error.code.value,
                level=logging.ERROR,
                error=str(e),
            )
            if error is e:
                raise
            raise error from e

        with self._lock:
            self._plugins = self._plugins + (plugin,)
            position = len(self._plugins) - 1
        log_event(
            self.logger,
            "plugin.registered",
            LogContext(plugin=meta.name),
            version=meta.version,
            capabilities=sorted(c.value for c in plugin.capabilities()),
            position=position,
        )

    def run_pre(self, text: str) -> str:
        """Fold ``text`` through every PreProcessor in registration order.

        Raises:
            PluginError: From the first plugin that fails.
        """
        return self._fold(text, PluginCapability.PRE_PROCESSOR, "pre", lambda p: p.pre_process)

    def run_post(self, text: str) -> str:
        """Fold ``text`` through every PostProcessor in registration order.

        Raises:
            PluginError: From the first plugin that fails.
        """
        return self._fold(text, PluginCapability.POST_PROCESSOR, "post", lambda p: p.post_process)

    def list_plugins(self) -> List[PluginMetadata]:
        """List registered plugin metadata in registration order."""
        return [plugin.metadata for plugin in self._plugins]

    def get(self, name: str) -> Optional[Plugin]:
        """Return the first plugin registered under ``name``, or ``None``."""
        return next((p for p in self._plugins if p.metadata.name == name), None)

    def find_by_capability(self, capability: Union[PluginCapability, str]) -> List[Plugin]:
        """Find all plugins providing a specific capability, in order."""
        return [p for p in self._plugins if p.provides_capability(capability)]

    def __len__(self) -> int:
        return len(self._plugins)

    def _fold(
        self,
        text: str,
        capability: PluginCapability,
        stage: str,
        hook: Callable[[Plugin], Callable[[str], str]],
    ) -> str:
        snapshot = self._plugins
        for plugin in snapshot:
            if not plugin.provides_capability(capability):
                continue
            try:
                text = hook(plugin)(text)
            except PluginError as e:
                self._log_abort(plugin, stage, e)
                raise
            except Exception as e:
                error = PluginError(plugin.metadata.name, str(e) or type(e).__name__)
                self._log_abort(plugin, stage, error)
                raise error from e
        return text

    def _log_abort(self, plugin: Plugin, stage: str, error: PluginError) -> None:
        normalized_log_event(
            self.logger,
            "pipeline.abort",
            LogContext(plugin=plugin.metadata.name),
            phase=stage,
            error_code=error.code.value,
            level=logging.WARNING,
            error=str(error),
        )


__all__ = ["PluginRegistry"]
