"""vibe-cli subcommands, driven through ``main`` with captured output."""

from __future__ import annotations

import json

import pytest

from vibe_core.mock import render_mock_reply
from vibe_core.service.cli import main
from vibe_core.service.cli.cli_parser import build_parser


def _write_settings(tmp_path, doc):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return str(path)


def test_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_prompt_without_settings_uses_mock(capsys):
    assert main(["prompt", "hello"]) == 0
    assert capsys.readouterr().out == render_mock_reply("hello") + "\n"


def test_prompt_json_output(capsys):
    assert main(["prompt", "hi", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"text": render_mock_reply("hi")}


def test_prompt_parse_json_output(capsys):
    assert main(["prompt", "hi", "--parse", "--json"]) == 0
    blocks = json.loads(capsys.readouterr().out)["blocks"]
    assert blocks[0] == {"type": "title", "level": 1, "text": "Mock AI Response"}
    assert {"type": "code_block", "language": "python", "code": 'def hello():\n    print("Hello from Vibe Coder!")'} in blocks


def test_providers_listing_marks_active(tmp_path, capsys):
    path = _write_settings(
        tmp_path,
        {"ai_providers": [{"name": "First", "kind": "Mock"}, {"name": "Second", "kind": "Ollama"}]},
    )
    assert main(["providers", "--settings", path]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["* 0: First", "  1: Second"]


def test_providers_json(tmp_path, capsys):
    path = _write_settings(tmp_path, {"ai_providers": [{"name": "Only", "kind": "Mock"}]})
    assert main(["providers", "--settings", path, "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"providers": ["Only"], "active": 0}


def test_bad_provider_index_reports_json_error(capsys):
    assert main(["prompt", "x", "--provider", "3"]) == 1
    err_lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    error = next(e for e in err_lines if "error_code" in e and "event" not in e)
    assert error["error_code"] == "index"


def test_adhoc_kind_missing_credential_fails(capsys):
    assert main(["prompt", "x", "--kind", "OpenAI"]) == 1
    err = capsys.readouterr().err
    assert "not_configured" in err


def test_invalid_settings_document(tmp_path, capsys):
    path = _write_settings(tmp_path, {"general": {"temperature": 9}})
    assert main(["providers", "--settings", path]) == 1
    assert '"error"' in capsys.readouterr().err


def test_settings_plugins_apply(tmp_path, capsys):
    path = _write_settings(tmp_path, {"plugins": [{"name": "Uppercase Converter", "enabled": True}]})
    assert main(["prompt", "quiet", "--settings", path]) == 0
    assert "You asked: QUIET" in capsys.readouterr().out
