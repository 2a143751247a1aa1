"""
Typed content blocks produced by the response parser.

Each block is a frozen dataclass; a parse always builds fresh instances.
``render_block`` turns a block back into markdown such that parsing the
rendered text yields an equal block.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Title:
    """ATX heading. ``level`` is 1-6."""

    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code. ``code`` is the verbatim interior, lines joined with ``\\n``."""

    language: Optional[str]
    code: str


@dataclass(frozen=True)
class ListBlock:
    ordered: bool
    items: Tuple[str, ...]


@dataclass(frozen=True)
class Quote:
    text: str


ContentBlock = Union[Title, Paragraph, CodeBlock, ListBlock, Quote]

_BLOCK_TYPES = {
    Title: "title",
    Paragraph: "paragraph",
    CodeBlock: "code_block",
    ListBlock: "list",
    Quote: "quote",
}

_BACKTICK_RUN_RE = re.compile(r"^\s*(`+)", re.MULTILINE)
_TILDE_RUN_RE = re.compile(r"^\s*(~+)", re.MULTILINE)


def _fence_for(code: str, language: Optional[str] = None) -> str:
    # a backtick info string may not contain a backtick
    if language and "`" in language:
        char, run_re = "~", _TILDE_RUN_RE
    else:
        char, run_re = "`", _BACKTICK_RUN_RE
    longest = max((len(m.group(1)) for m in run_re.finditer(code)), default=0)
    return char * max(3, longest + 1)


def render_block(block: ContentBlock) -> str:
    """Render one block back to markdown."""
    if isinstance(block, Title):
        return f"{'#' * block.level} {block.text}"
    if isinstance(block, Paragraph):
        return block.text
    if isinstance(block, CodeBlock):
        fence = _fence_for(block.code, block.language)
        opening = f"{fence}{block.language or ''}"
        if not block.code:
            return f"{opening}\n{fence}"
        return f"{opening}\n{block.code}\n{fence}"
    if isinstance(block, ListBlock):
        if block.ordered:
            return "\n".join(f"{n}. {item}" for n, item in enumerate(block.items, start=1))
        return "\n".join(f"- {item}" for item in block.items)
    if isinstance(block, Quote):
        return "\n".join(f"> {line}" if line else ">" for line in block.text.split("\n"))
    raise TypeError(f"not a content block: {block!r}")


def block_to_dict(block: ContentBlock) -> Dict[str, Any]:
    """Return a JSON-serializable mapping tagged with the block ``type``."""
    data: Dict[str, Any] = {"type": _BLOCK_TYPES[type(block)]}
    data.update(
        {name: list(value) if isinstance(value, tuple) else value for name, value in vars(block).items()}
    )
    return data


__all__ = [
    "Title",
    "Paragraph",
    "CodeBlock",
    "ListBlock",
    "Quote",
    "ContentBlock",
    "render_block",
    "block_to_dict",
]
