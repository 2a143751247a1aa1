"""Base class for providers that talk to a single HTTP endpoint.

Purpose:
- Share the request lifecycle (credential check, pooled ``httpx`` client,
  per-request timeout, outcome classification, structured logging) across
  the vendor-specific providers. Subclasses only describe the vendor shape:
  request path, headers, JSON body, and how to pull text and usage from the
  reply.

Outcome classification:
- No response received (DNS failure, refused connection, timeout)
  -> ``NetworkError``.
- Non-2xx status -> ``ApiError(status, raw body)``.
- 2xx body that is not JSON or lacks the expected field -> ``ApiError`` with
  the received status and a schema-violation message.
- Credential required by the vendor but empty -> ``NotConfigured`` before any
  I/O.

No retries are performed here; a failure aborts only the current request.
"""

from __future__ import annotations

import time
from abc import abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from ..config import get_provider_defaults
from .errors import ApiError, NetworkError, NotConfigured, VibeError, classify_exception
from .http import get_httpx_client
from .interfaces import Provider
from .logging import LogContext, get_logger, normalized_log_event
from .models import AIRequest, AIResponse, ProviderConfig, TokenUsage


class NetworkBackedProvider(Provider):
    """Provider issuing one JSON POST per request to a configured endpoint.

    Subclasses must implement ``provider_name``, ``request_path``,
    ``build_payload`` and ``extract_reply``; they may override
    ``build_headers`` and set ``requires_credential``.
    """

    requires_credential: bool = False

    def __init__(self, config: ProviderConfig, *, client: Optional[httpx.Client] = None) -> None:
        """Resolve endpoint/model defaults for the kind and prepare logging.

        Parameters:
            config: Immutable provider configuration.
            client: Optional ``httpx.Client`` to use instead of the shared
                pool (tests inject one backed by ``httpx.MockTransport``).
        """
        super().__init__(config)
        resolved = get_provider_defaults(
            self.provider_name,
            overrides={"endpoint": config.endpoint, "model": config.model, "credential": config.credential},
        )
        self._endpoint: str = str(resolved.get("endpoint", "")).rstrip("/")
        self._model: str = str(resolved.get("model", ""))
        self._credential: str = str(resolved.get("credential") or "")
        self._client = client
        self._logger = get_logger(f"providers.{self.provider_name}")

    # ----- Vendor surface -----
    @property
    @abstractmethod
    def request_path(self) -> str:
        """Path appended to the endpoint, e.g. ``/api/generate``."""

    @abstractmethod
    def build_payload(self, request: AIRequest) -> Dict[str, Any]:
        """Return the vendor JSON body for ``request``."""

    @abstractmethod
    def extract_reply(self, data: Mapping[str, Any]) -> Tuple[str, Optional[TokenUsage]]:
        """Pull reply text and usage from a decoded 2xx body.

        May raise ``KeyError``, ``IndexError``, ``TypeError`` or
        ``AttributeError`` when the body
        does not have the expected shape; the caller maps those to
        ``ApiError``.
        """

    def build_headers(self) -> Dict[str, str]:
        return {}

    # ----- Provider contract -----
    @property
    def model(self) -> str:
        return self._model

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def url(self) -> str:
        return f"{self._endpoint}{self.request_path}"

    def complete(self, request: AIRequest) -> AIResponse:
        """POST ``request`` to the endpoint and return the normalized reply.

        Raises:
            NotConfigured: Credential required but missing.
            NetworkError: No response was received.
            ApiError: Non-2xx status or malformed 2xx body.
        """
        ctx = LogContext(provider=self.provider_name, model=self._model)
        normalized_log_event(
            self._logger,
            "send.start",
            ctx,
            phase="start",
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )
        t0 = time.perf_counter()
        try:
            response = self._invoke(request)
        except VibeError as e:
            normalized_log_event(
                self._logger,
                "send.error",
                ctx,
                phase="finalize",
                error_code=classify_exception(e).value,
                error=str(e),
            )
            raise
        normalized_log_event(
            self._logger,
            "send.end",
            ctx,
            phase="finalize",
            tokens=response.usage,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 3),
        )
        return response

    # ----- Internal helpers -----
    def _http(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return get_httpx_client(self._endpoint, purpose=f"{self.provider_name}.send")

    def _invoke(self, request: AIRequest) -> AIResponse:
        if self.requires_credential and not self._credential:
            raise NotConfigured(f"{self.display_name()}: missing API credential", provider=self.provider_name)
        if not self._endpoint:
            raise NotConfigured(f"{self.display_name()}: missing endpoint", provider=self.provider_name)

        kwargs: Dict[str, Any] = {"json": self.build_payload(request), "headers": self.build_headers()}
        if request.timeout_seconds is not None:
            kwargs["timeout"] = request.timeout_seconds
        try:
            resp = self._http().post(self.url, **kwargs)
        except httpx.TimeoutException as e:
            raise NetworkError(f"request to {self.url} timed out: {e}", timed_out=True) from e
        except httpx.TransportError as e:
            raise NetworkError(f"request to {self.url} failed: {e}") from e

        if not resp.is_success:
            raise ApiError(resp.status_code, resp.text)
        try:
            data = resp.json()
        except ValueError as e:
            raise ApiError(resp.status_code, f"invalid JSON in response body: {e}") from e
        if not isinstance(data, dict):
            raise ApiError(resp.status_code, "response body is not a JSON object")
        try:
            text, usage = self.extract_reply(data)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ApiError(resp.status_code, f"unexpected response schema: missing {e}") from e
        if not isinstance(text, str):
            raise ApiError(resp.status_code, "unexpected response schema: reply text is not a string")
        return AIResponse(text=text, model=self._model, usage=usage)


def optional_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    """Return ``data[key]`` when it is an int, else ``None``."""
    value = data.get(key)
    return value if isinstance(value, int) and not isinstance(value, bool) else None


__all__ = ["NetworkBackedProvider", "optional_int"]
