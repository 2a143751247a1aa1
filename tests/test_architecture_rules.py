"""Architecture enforcement tests for the package's layering.

This module provides lightweight, repository-local invariants to ensure the
inner layers of ``vibe_core`` stay decoupled from outer ones. It focuses on
import boundaries only and is designed to fail fast if a forbidden
dependency is introduced.

Rules validated here:
1) ``base``, the provider packages and the parser must not import the
   service layer (orchestrator, CLI).
2) The parser is self-contained: it imports nothing else from ``vibe_core``.
3) The plugin pipeline does not depend on providers or their registry.

These tests are static scans (via ``ast``) to avoid import-time side effects,
and they emit clear failure messages for quick remediation.
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import Iterable, Iterator, List

import pytest

PKG_ROOT = Path(__file__).resolve().parent.parent / "vibe_core"


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all non-test Python source files under ``root``."""
    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.parts:
            continue
        yield path


def _module_name(path: Path) -> str:
    rel = path.relative_to(PKG_ROOT.parent).with_suffix("")
    parts = list(rel.parts)
    if parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def _imported_modules(path: Path) -> Iterator[str]:
    """Yield absolute module names imported by ``path`` (relative imports resolved)."""
    tree = ast.parse(path.read_text(encoding="utf-8", errors="replace"))
    package = _module_name(path)
    if path.name != "__init__.py":
        package = package.rpartition(".")[0]
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                base = package.split(".")
                base = base[: len(base) - (node.level - 1)]
                yield ".".join(base + ([node.module] if node.module else []))
            elif node.module:
                yield node.module


def _offenders(scope: Path, forbidden_prefixes: List[str]) -> List[str]:
    found: List[str] = []
    for py in _iter_python_files(scope):
        for mod in _imported_modules(py):
            if any(mod == p or mod.startswith(p + ".") for p in forbidden_prefixes):
                found.append(f"{py.relative_to(PKG_ROOT.parent)}: imports '{mod}'")
    return found


@pytest.mark.parametrize("inner", ["base", "mock", "ollama", "openai", "anthropic", "parser", "config"])
def test_inner_layers_do_not_import_service(inner: str) -> None:
    offenders = _offenders(PKG_ROOT / inner, ["vibe_core.service"])
    if offenders:
        pytest.fail("Inner layers must not import the service layer.\n" + "\n".join(offenders))


def test_parser_is_self_contained() -> None:
    offenders = [
        line
        for line in _offenders(PKG_ROOT / "parser", ["vibe_core"])
        if "imports 'vibe_core.parser" not in line
    ]
    if offenders:
        pytest.fail("The parser must not depend on other vibe_core modules.\n" + "\n".join(offenders))


def test_plugins_do_not_depend_on_providers() -> None:
    offenders = _offenders(
        PKG_ROOT / "base" / "plugins",
        [
            "vibe_core.base.registry",
            "vibe_core.base.factory",
            "vibe_core.base.network_provider",
            "vibe_core.mock",
            "vibe_core.ollama",
            "vibe_core.openai",
            "vibe_core.anthropic",
        ],
    )
    if offenders:
        pytest.fail("The plugin pipeline must not depend on providers.\n" + "\n".join(offenders))
