"""Validated DTOs for inbound configuration."""

from .settings import (
    AppSettings,
    AppSettingsDTO,
    GeneralSettingsDTO,
    PluginSettingsDTO,
    ProviderSettingsDTO,
)

__all__ = [
    "AppSettings",
    "AppSettingsDTO",
    "GeneralSettingsDTO",
    "PluginSettingsDTO",
    "ProviderSettingsDTO",
]
