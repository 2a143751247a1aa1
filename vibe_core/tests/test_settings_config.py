"""Settings DTO validation and the configuration layer."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from vibe_core.base.dto import AppSettingsDTO, ProviderSettingsDTO
from vibe_core.base.models import ProviderConfig
from vibe_core.config import get_provider_defaults, load_settings, settings_from_mapping


def test_provider_entry_maps_to_config():
    dto = ProviderSettingsDTO.model_validate(
        {"name": "Local", "kind": "Ollama", "api_endpoint": "http://x:1", "model": "m", "extra": 1}
    )
    assert dto.to_config() == ProviderConfig(
        kind="Ollama", display_name="Local", credential="", endpoint="http://x:1", model="m"
    )


def test_type_alias_and_name_as_kind():
    assert ProviderSettingsDTO.model_validate({"name": "A", "type": "OpenAI"}).to_config().kind == "OpenAI"
    assert ProviderSettingsDTO.model_validate({"name": "Mock"}).to_config().kind == "Mock"


def test_disabled_providers_are_dropped_and_flags_kept():
    settings = settings_from_mapping(
        {
            "ai_providers": [
                {"name": "One", "kind": "Mock"},
                {"name": "Two", "kind": "OpenAI", "enabled": False},
            ],
            "plugins": [{"name": "Code Formatter", "enabled": False}],
            "general": {"temperature": 0.2},
            "ui": {"theme": "dark"},
        }
    )
    assert [c.display_name for c in settings.providers] == ["One"]
    assert settings.plugin_enabled("Code Formatter") is False
    assert settings.plugin_enabled("Other") is True
    assert settings.plugin_enabled("Other", default=False) is False
    assert settings.temperature == 0.2
    assert (settings.max_tokens, settings.max_history) == (2000, 100)


@pytest.mark.parametrize(
    "doc",
    [
        {"ai_providers": [{"kind": "Mock"}]},
        {"general": {"temperature": 3.5}},
        {"general": {"max_tokens": 0}},
        {"ai_providers": "nope"},
    ],
)
def test_invalid_documents_raise(doc):
    with pytest.raises(ValidationError):
        AppSettingsDTO.model_validate(doc)


def test_load_settings_from_path(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"ai_providers": [{"name": "M", "kind": "Mock"}]}), encoding="utf-8")
    assert load_settings(str(path)).providers[0].display_name == "M"


def test_load_settings_from_env(tmp_path, monkeypatch):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"general": {"max_history": 7}}), encoding="utf-8")
    monkeypatch.setenv("VIBE_SETTINGS_FILE", str(path))
    assert load_settings().max_history == 7


def test_missing_settings_yield_defaults(tmp_path):
    assert load_settings().providers == ()
    assert load_settings(str(tmp_path / "absent.json")).providers == ()


def test_non_object_document_is_rejected(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_settings(str(path))


def test_provider_defaults_merge_order(monkeypatch):
    assert get_provider_defaults("Ollama")["endpoint"] == "http://localhost:11434"
    monkeypatch.setenv("VIBE_OLLAMA_MODEL", "env-model")
    assert get_provider_defaults("ollama")["model"] == "env-model"
    merged = get_provider_defaults("ollama", overrides={"model": "explicit", "endpoint": None, "credential": ""})
    assert merged["model"] == "explicit"
    assert merged["endpoint"] == "http://localhost:11434"
    assert "credential" not in merged


def test_unknown_kind_has_no_defaults():
    assert get_provider_defaults("nope") == {}


def test_config_redacts_credential():
    data = ProviderConfig(kind="OpenAI", credential="sk-secret").to_dict()
    assert data["credential"] == "***"
    assert ProviderConfig(kind="OpenAI", credential="sk-secret").to_dict(redact=False)["credential"] == "sk-secret"
