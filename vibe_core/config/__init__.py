"""Unified configuration layer.

Goals
-----
* Centralize per-kind defaults (endpoints, models).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Environment variables (e.g. VIBE_OPENAI_API_KEY, VIBE_OLLAMA_BASE_URL)
    3. Values supplied on the ``ProviderConfig`` itself
* Map a settings document (JSON, pointed to by ``VIBE_SETTINGS_FILE`` or passed
  explicitly) into ``ProviderConfig`` values and plugin flags.

Environment Variable Conventions
--------------------------------
VIBE_<KIND>_API_KEY, VIBE_<KIND>_BASE_URL, VIBE_<KIND>_MODEL
e.g. VIBE_OPENAI_API_KEY, VIBE_OLLAMA_BASE_URL.

Settings document example
-------------------------
```
{
  "ai_providers": [
    {"name": "Local", "kind": "Ollama", "enabled": true, "model": "llama3"},
    {"name": "GPT", "kind": "OpenAI", "api_key": "sk-...", "enabled": false}
  ],
  "plugins": [{"name": "Uppercase Converter", "enabled": true}],
  "general": {"temperature": 0.5, "max_tokens": 1024, "max_history": 50}
}
```

Public API
----------
* get_provider_defaults(kind: str, overrides: dict | None = None) -> dict
* load_settings(path: str | None = None) -> AppSettings
* settings_from_mapping(data: Mapping) -> AppSettings
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..base.dto import AppSettings, AppSettingsDTO
from .defaults import (
    ANTHROPIC_DEFAULT_ENDPOINT,
    ANTHROPIC_DEFAULT_MODEL,
    ENV_PREFIX,
    MOCK_DEFAULT_MODEL,
    OLLAMA_DEFAULT_ENDPOINT,
    OLLAMA_DEFAULT_MODEL,
    OPENAI_DEFAULT_ENDPOINT,
    OPENAI_DEFAULT_MODEL,
    SETTINGS_FILE_ENV,
)

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "mock": {"model": MOCK_DEFAULT_MODEL},
    "ollama": {"endpoint": OLLAMA_DEFAULT_ENDPOINT, "model": OLLAMA_DEFAULT_MODEL},
    "openai": {"endpoint": OPENAI_DEFAULT_ENDPOINT, "model": OPENAI_DEFAULT_MODEL},
    "anthropic": {"endpoint": ANTHROPIC_DEFAULT_ENDPOINT, "model": ANTHROPIC_DEFAULT_MODEL},
}

ENV_FIELD_MAP = {
    "credential": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "endpoint": "BASE_URL",
    "model": "MODEL",
}


def _env_overrides(kind: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = f"{ENV_PREFIX}_{kind.upper()}"
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


def get_provider_defaults(kind: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged settings for a provider kind.

    Merge order (later wins): defaults -> env vars -> overrides. Override
    values that are ``None`` or empty strings are ignored so that an unset
    field on a ``ProviderConfig`` never masks a default.
    """
    name = (kind or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))
    cfg |= _env_overrides(name)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v not in (None, "")}
    return cfg


def settings_from_mapping(data: Mapping[str, Any]) -> AppSettings:
    """Validate a settings mapping and convert it into :class:`AppSettings`.

    Raises:
        pydantic.ValidationError: When the document violates the schema.
    """
    return AppSettingsDTO.model_validate(dict(data)).to_settings()


def load_settings(path: Optional[str] = None) -> AppSettings:
    """Load the JSON settings document.

    The path comes from ``path`` or the ``VIBE_SETTINGS_FILE`` environment
    variable. A missing path (or missing file) yields empty settings.

    Raises:
        ValueError: When the file is not valid JSON or not a JSON object.
        pydantic.ValidationError: When the document violates the schema.
    """
    path = path or os.getenv(SETTINGS_FILE_ENV)
    if not path:
        return AppSettings()
    p = Path(path).expanduser()
    if not p.exists():
        return AppSettings()
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"settings document {p} must be a JSON object")
    return settings_from_mapping(data)


__all__ = [
    "DEFAULTS",
    "get_provider_defaults",
    "load_settings",
    "settings_from_mapping",
]
