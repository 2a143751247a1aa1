"""CLI action handlers.

Purpose
-------
Subcommand handlers for vibe-cli, keeping the entrypoint minimal. This module
has no top-level side effects and is safe to import in tests.

Fallback & Error Semantics
--------------------------
- With no provider configured, prompts are answered by the mock provider
  (the registry's documented fallback).
- Any failure (settings validation, provider error, bad index) is printed as
  a JSON object on stderr and the handler returns ``1``.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

from ...base.errors import classify_exception
from ...base.models import ProviderConfig
from ...config import load_settings
from ..orchestrator import Orchestrator


def build_orchestrator(args: argparse.Namespace) -> Orchestrator:
    """Create an orchestrator from ``--settings`` plus any ad-hoc ``--kind`` provider.

    Raises
    ------
    ValueError, pydantic.ValidationError
        When the settings document is malformed.
    ProviderIndexError
        When ``--provider`` is out of range.
    """
    orch = Orchestrator.from_settings(load_settings(args.settings))
    if args.kind:
        index = orch.register_provider(
            ProviderConfig(
                kind=args.kind,
                credential=args.api_key or "",
                endpoint=args.endpoint,
                model=args.model,
            )
        )
        orch.set_active_provider(index)
    provider_index = getattr(args, "provider", None)
    if provider_index is not None:
        orch.set_active_provider(provider_index)
    return orch


def error_payload(exc: Exception) -> Dict[str, Any]:
    """Return the JSON error object printed on stderr."""
    payload: Dict[str, Any] = {"error": str(exc), "error_code": classify_exception(exc).value}
    status = getattr(exc, "status", None)
    if isinstance(status, int):
        payload["status"] = status
    return payload


def handle_providers(args: argparse.Namespace) -> int:
    """Execute the ``providers`` subcommand.

    Returns
    -------
    int
        ``0`` on success; ``1`` if the settings cannot be loaded.
    """
    try:
        orch = build_orchestrator(args)
    except Exception as e:
        print(json.dumps(error_payload(e)), file=sys.stderr)
        return 1
    names = orch.list_providers()
    active = orch.active_provider_index
    if args.json:
        print(json.dumps({"providers": names, "active": active}))
        return 0
    if not names:
        print("(no providers configured; prompts use the mock provider)")
    for i, name in enumerate(names):
        marker = "*" if i == active else " "
        print(f"{marker} {i}: {name}")
    return 0


def handle_prompt(args: argparse.Namespace) -> int:
    """Execute the ``prompt`` subcommand.

    Prints the post-processed reply as text, or its parsed blocks with
    ``--parse``; ``--json`` switches either form to JSON.

    Returns
    -------
    int
        ``0`` on success; ``1`` on any error (printed as JSON to stderr).
    """
    try:
        orch = build_orchestrator(args)
        reply = orch.send_prompt(args.text)
    except Exception as e:
        print(json.dumps(error_payload(e)), file=sys.stderr)
        return 1

    if args.parse:
        parsed = orch.parse_response(reply)
        if args.json:
            print(json.dumps(parsed.to_dict()))
        else:
            print(parsed.to_markdown())
        return 0
    print(json.dumps({"text": reply}) if args.json else reply)
    return 0


__all__ = ["build_orchestrator", "error_payload", "handle_providers", "handle_prompt"]
