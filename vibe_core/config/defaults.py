"""vibe_core.config.defaults
=========================

Central place for small, stable default values used across the package. These
can be overridden via environment variables or a settings document, but give
sensible fallbacks for local development and tests.

This module intentionally avoids importing from other vibe_core packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Request defaults ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000

# ---- Session history ----
DEFAULT_MAX_HISTORY = 100

# ---- Provider-specific defaults ----
OLLAMA_DEFAULT_ENDPOINT = "http://localhost:11434"
OLLAMA_DEFAULT_MODEL = "llama3"

OPENAI_DEFAULT_ENDPOINT = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"

ANTHROPIC_DEFAULT_ENDPOINT = "https://api.anthropic.com/v1"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-latest"
ANTHROPIC_API_VERSION = "2023-06-01"

MOCK_DEFAULT_MODEL = "mock-model-v1"

# ---- Environment ----
SETTINGS_FILE_ENV = "VIBE_SETTINGS_FILE"
ENV_PREFIX = "VIBE"


__all__ = [
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_MAX_HISTORY",
    "OLLAMA_DEFAULT_ENDPOINT",
    "OLLAMA_DEFAULT_MODEL",
    "OPENAI_DEFAULT_ENDPOINT",
    "OPENAI_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_ENDPOINT",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_API_VERSION",
    "MOCK_DEFAULT_MODEL",
    "SETTINGS_FILE_ENV",
    "ENV_PREFIX",
]
