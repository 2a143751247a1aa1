"""Request orchestrator.

Purpose
-------
Compose the plugin pipeline, the provider registry and the response parser
into the end-to-end request flow used by the UI and the CLI::

    prompt -> run_pre -> dispatch (active provider, or mock) -> run_post -> text
    text -> parse -> ParsedResponse

Error semantics
---------------
The first failure (``PluginError`` from either chain, or ``NotConfigured``,
``NetworkError``, ``ApiError`` from the provider) is re-raised unchanged after
a ``prompt.error`` log event. Registry state is never modified by a failed
request and nothing is retried here. Parsing never fails.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Iterable, List, Optional

from ..base.dto import AppSettings
from ..base.errors import classify_exception
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import AIRequest, ProviderConfig
from ..base.plugins import CodeFormatterPlugin, Plugin, PluginMetadata, PluginRegistry, UppercasePlugin
from ..base.registry import ProviderRegistry
from ..config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from ..parser import ParsedResponse, parse
from .history import SessionHistory


def default_plugins() -> List[Plugin]:
    """Fresh instances of the plugins shipped with the core."""
    return [UppercasePlugin(), CodeFormatterPlugin()]


class Orchestrator:
    """Entry point for prompt submission, provider selection and parsing.

    Safe to share across threads: the registries carry their own locking and
    the request defaults are read-only after construction.
    """

    def __init__(
        self,
        providers: Optional[ProviderRegistry] = None,
        plugins: Optional[PluginRegistry] = None,
        *,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout_seconds: Optional[float] = None,
        history: Optional[SessionHistory] = None,
    ) -> None:
        self._providers = providers if providers is not None else ProviderRegistry()
        self._plugins = plugins if plugins is not None else PluginRegistry()
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds
        self.history = history if history is not None else SessionHistory()
        self._logger = get_logger("service.orchestrator")

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        *,
        plugins: Optional[Iterable[Plugin]] = None,
        providers: Optional[ProviderRegistry] = None,
    ) -> "Orchestrator":
        """Build an orchestrator from validated settings.

        Every provider config in ``settings`` is registered in order (the first
        becomes active). Candidate plugins (the shipped samples by default)
        are registered only when the settings enable them by name.
        """
        orch = cls(
            providers=providers,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            history=SessionHistory(settings.max_history),
        )
        for config in settings.providers:
            orch.register_provider(config)
        for plugin in default_plugins() if plugins is None else plugins:
            if settings.plugin_enabled(plugin.metadata.name, default=False):
                orch.register_plugin(plugin)
        return orch

    # ----- Providers -----
    @property
    def providers(self) -> ProviderRegistry:
        return self._providers

    def register_provider(self, config: ProviderConfig) -> int:
        return self._providers.register(config)

    def list_providers(self) -> List[str]:
        return self._providers.list()

    def set_active_provider(self, index: int) -> None:
        """Select the provider used for subsequent prompts.

        Raises:
            ProviderIndexError: ``index`` is out of range; selection unchanged.
        """
        self._providers.set_active(index)

    @property
    def active_provider_index(self) -> Optional[int]:
        return self._providers.active_index

    # ----- Plugins -----
    @property
    def plugins(self) -> PluginRegistry:
        return self._plugins

    def register_plugin(self, plugin: Plugin) -> None:
        self._plugins.register(plugin)

    def list_plugins(self) -> List[PluginMetadata]:
        return self._plugins.list_plugins()

    # ----- Requests -----
    def send_prompt(self, text: str) -> str:
        """Run ``text`` through the pre chain, the active provider and the post chain.

        Returns:
            The post-processed reply text.

        Raises:
            VibeError: The first failure encountered, unchanged.
        """
        ctx = LogContext(request_id=uuid.uuid4().hex[:12])
        normalized_log_event(self._logger, "prompt.start", ctx, phase="start", prompt_chars=len(text))
        t0 = time.perf_counter()
        try:
            prompt = self._plugins.run_pre(text)
            response = self._providers.dispatch_request(
                AIRequest(
                    prompt=prompt,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                    timeout_seconds=self.timeout_seconds,
                )
            )
            reply = self._plugins.run_post(response.text)
        except Exception as e:
            normalized_log_event(
                self._logger,
                "prompt.error",
                ctx,
                phase="finalize",
                error_code=classify_exception(e).value,
                level=logging.WARNING,
                error=str(e),
            )
            raise

        usage = response.usage
        self.history.record(
            text,
            reply,
            model=response.model,
            tokens_used=usage.total_tokens if usage else None,
        )
        normalized_log_event(
            self._logger,
            "prompt.end",
            ctx,
            phase="finalize",
            tokens=usage,
            model=response.model,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 3),
        )
        return reply

    def parse_response(self, text: str) -> ParsedResponse:
        """Parse reply text into typed blocks. Total: never raises."""
        return parse(text)

    def ask(self, text: str) -> ParsedResponse:
        """``send_prompt`` followed by ``parse_response``."""
        return self.parse_response(self.send_prompt(text))


__all__ = ["Orchestrator", "default_plugins"]
