"""CLI parser construction for vibe-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def add_settings_flags(parser: argparse.ArgumentParser) -> None:
    """Attach the flags that select and extend the provider set.

    Notes
    -----
    - ``--settings`` points at a JSON settings document; without it the
      ``VIBE_SETTINGS_FILE`` environment variable is consulted.
    - ``--kind`` registers one extra provider from the remaining flags and
      makes it active, which is handy for one-off calls without a settings
      file.
    """
    parser.add_argument("--settings", default=None, help="Path to a JSON settings document")
    parser.add_argument("--kind", default=None, help="Register an ad-hoc provider of this kind (Mock, Ollama, ...)")
    parser.add_argument("--model", default=None)
    parser.add_argument("--endpoint", default=None)
    parser.add_argument("--api-key", dest="api_key", default=None)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``providers`` and ``prompt`` subcommands.
    """
    p = argparse.ArgumentParser(prog="vibe-cli", description="Send prompts through the vibe pipeline")
    sub = p.add_subparsers(dest="cmd", required=True)

    # providers
    p_list = sub.add_parser("providers", help="List configured providers (active one marked with '*')")
    add_settings_flags(p_list)
    p_list.add_argument("--json", action="store_true")

    # prompt
    p_prompt = sub.add_parser("prompt", help="Send a prompt to the active provider")
    p_prompt.add_argument("text")
    add_settings_flags(p_prompt)
    p_prompt.add_argument("--provider", type=int, default=None, help="Index of the provider to activate")
    p_prompt.add_argument("--parse", action="store_true", help="Print parsed content blocks instead of raw text")
    p_prompt.add_argument("--json", action="store_true")

    return p


__all__ = ["build_parser", "add_settings_flags"]
