"""
Markdown-like reply parser.

Purpose
-------
Convert raw reply text into an ordered sequence of typed blocks in a single
pass over its lines. The parser is total: every input, including the empty
string and malformed markup, yields a :class:`ParsedResponse`; nothing here
raises.

Recognised constructs (detected on the line with surrounding whitespace
removed):

- ``#``..``######`` followed by whitespace and text: title. A marker with no
  text, ``#######`` or ``#word`` is paragraph text.
- ```` ``` ```` or ``~~~`` (three or more): opens a fenced code block. A
  backtick opener whose info string holds another backtick is inline code,
  not a fence. The first word after the fence is the language. The block closes on a line made
  only of the same fence character, at least as long as the opener; an
  unclosed fence runs to the end of the text. Interior lines are verbatim.
- ``-``/``*``/``+`` or ``1.``/``1)`` followed by whitespace: list item.
  Consecutive items of the same kind (ordered vs. unordered) form one list.
- ``>``: quote line; one optional space after the marker is dropped.
- Anything else: paragraph text, running until a blank line or another
  construct.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .content_block import CodeBlock, ContentBlock, ListBlock, Paragraph, Quote, Title
from .parsed_response import ParsedResponse

_TITLE_RE = re.compile(r"^(#{1,6})(?:\s+(.*))?$")
_FENCE_RE = re.compile(r"^(?:(`{3,})([^`]*)|(~{3,})(.*))$")
_UNORDERED_RE = re.compile(r"^[-*+]\s+(.*)$")
_ORDERED_RE = re.compile(r"^\d+[.)]\s+(.*)$")


def _list_item(line: str) -> Optional[Tuple[bool, str]]:
    """Return ``(ordered, item_text)`` when ``line`` is a list item."""
    m = _UNORDERED_RE.match(line)
    if m:
        return False, m.group(1).strip()
    m = _ORDERED_RE.match(line)
    if m:
        return True, m.group(1).strip()
    return None


def _is_closing_fence(line: str, char: str, length: int) -> bool:
    stripped = line.strip()
    return len(stripped) >= length and stripped == char * len(stripped)


def _read_fence(lines: List[str], start: int, opener: re.Match) -> Tuple[CodeBlock, int]:
    if opener.group(1):
        marker, info = opener.group(1), opener.group(2).strip()
    else:
        marker, info = opener.group(3), opener.group(4).strip()
    language = info.split()[0] if info else None
    body: List[str] = []
    i = start + 1
    while i < len(lines):
        if _is_closing_fence(lines[i], marker[0], len(marker)):
            i += 1
            break
        body.append(lines[i])
        i += 1
    return CodeBlock(language=language, code="\n".join(body)), i


def _read_list(lines: List[str], start: int, ordered: bool) -> Tuple[ListBlock, int]:
    items: List[str] = []
    i = start
    while i < len(lines):
        item = _list_item(lines[i].strip())
        if item is None or item[0] != ordered:
            break
        items.append(item[1])
        i += 1
    return ListBlock(ordered=ordered, items=tuple(items)), i


def _read_quote(lines: List[str], start: int) -> Tuple[Quote, int]:
    parts: List[str] = []
    i = start
    while i < len(lines):
        line = lines[i].strip()
        if not line.startswith(">"):
            break
        rest = line[1:]
        parts.append(rest[1:] if rest.startswith(" ") else rest)
        i += 1
    return Quote(text="\n".join(parts).strip()), i


def parse(text: str) -> ParsedResponse:
    """Parse ``text`` into a :class:`ParsedResponse`."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    blocks: List[ContentBlock] = []
    paragraph: List[str] = []

    def flush_paragraph() -> None:
        if paragraph:
            blocks.append(Paragraph(text="\n".join(paragraph).strip()))
            paragraph.clear()

    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if not line:
            flush_paragraph()
            i += 1
            continue

        fence = _FENCE_RE.match(line)
        if fence:
            flush_paragraph()
            block, i = _read_fence(lines, i, fence)
            blocks.append(block)
            continue

        title = _TITLE_RE.match(line)
        heading = (title.group(2) or "").strip() if title else ""
        if heading:
            flush_paragraph()
            blocks.append(Title(level=len(title.group(1)), text=heading))
            i += 1
            continue

        item = _list_item(line)
        if item is not None:
            flush_paragraph()
            block, i = _read_list(lines, i, item[0])
            blocks.append(block)
            continue

        if line.startswith(">"):
            flush_paragraph()
            block, i = _read_quote(lines, i)
            blocks.append(block)
            continue

        paragraph.append(lines[i])
        i += 1

    flush_paragraph()
    return ParsedResponse(blocks=tuple(blocks))


__all__ = ["parse"]
