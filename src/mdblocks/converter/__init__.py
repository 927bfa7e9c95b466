"""Markdown -> block conversion pipeline.

Public API:

- :class:`MarkdownToBlocksConverter` - Markdown -> :class:`~mdblocks.models.Block` list.
- :func:`markdown_to_blocks` / :func:`markdown_to_blocks_batched` - dict-level helpers.
- :func:`tokenize` - one line -> annotated rich-text segments.
- :func:`classify_line` - one line -> block kind and inline payload.
- :func:`scan_fence` - consume a fenced code region.
- :func:`split_rich_text` - split oversized rich-text segments.
"""

from mdblocks.converter.fence import scan_fence
from mdblocks.converter.inline import tokenize
from mdblocks.converter.line_classifier import classify_line
from mdblocks.converter.md_to_blocks import (
    MarkdownToBlocksConverter,
    format_content,
    markdown_to_blocks,
    markdown_to_blocks_batched,
)
from mdblocks.converter.rich_text import split_rich_text, split_segment

__all__ = [
    "MarkdownToBlocksConverter",
    "classify_line",
    "format_content",
    "markdown_to_blocks",
    "markdown_to_blocks_batched",
    "scan_fence",
    "split_rich_text",
    "split_segment",
    "tokenize",
]
