"""vibe-cli (package entrypoint).

This package wires argument parsing to action handlers kept in small, focused
modules. It performs no pipeline logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import List, Optional

from .cli_actions import handle_prompt, handle_providers
from .cli_parser import build_parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.cmd == "providers":
        return handle_providers(args)
    return handle_prompt(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
