"""Response parser: raw reply text to typed content blocks."""

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
from .markdown import parse
from .parsed_response import ParsedResponse

__all__ = [
    "parse",
    "ParsedResponse",
    "ContentBlock",
    "Title",
    "Paragraph",
    "CodeBlock",
    "ListBlock",
    "Quote",
    "render_block",
    "block_to_dict",
]
