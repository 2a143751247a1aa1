"""Parsed response container with read-only queries over its blocks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple, Type, TypeVar

from .content_block import (
    CodeBlock,
    ContentBlock,
    ListBlock,
    Paragraph,
    Quote,
    Title,
    block_to_dict,
    render_block,
)

_B = TypeVar("_B")


@dataclass(frozen=True)
class ParsedResponse:
    """Ordered blocks of one reply, in source order."""

    blocks: Tuple[ContentBlock, ...] = ()

    def __iter__(self) -> Iterator[ContentBlock]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> ContentBlock:
        return self.blocks[index]

    def _of_type(self, kind: Type[_B]) -> List[_B]:
        return [b for b in self.blocks if isinstance(b, kind)]

    def titles(self) -> List[Title]:
        return self._of_type(Title)

    def paragraphs(self) -> List[Paragraph]:
        return self._of_type(Paragraph)

    def code_blocks(self) -> List[CodeBlock]:
        return self._of_type(CodeBlock)

    def lists(self) -> List[ListBlock]:
        return self._of_type(ListBlock)

    def quotes(self) -> List[Quote]:
        return self._of_type(Quote)

    def to_markdown(self) -> str:
        """Render all blocks back to markdown, separated by blank lines."""
        return "\n\n".join(render_block(b) for b in self.blocks)

    def to_dict(self) -> Dict[str, Any]:
        return {"blocks": [block_to_dict(b) for b in self.blocks]}


__all__ = ["ParsedResponse"]
