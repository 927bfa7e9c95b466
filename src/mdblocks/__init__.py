"""mdblocks - convert Markdown text to rich-document API block payloads.

Public re-exports
-----------------

* **Conversion:** :class:`MarkdownToBlocksConverter`,
  :func:`markdown_to_blocks`, :func:`markdown_to_blocks_batched`,
  :func:`format_content`
* **Configuration:** :class:`ConverterConfig` and the API limit constants
* **Errors:** :class:`MdBlocksError` and its subclasses, :class:`ErrorCode`
* **Models:** :class:`Block`, :class:`BlockKind`, :class:`RichTextSegment`,
  :class:`Annotations`

Usage::

    from mdblocks import markdown_to_blocks_batched

    for batch in markdown_to_blocks_batched("# Hello\\n\\nWorld"):
        client.append_children(page_id, batch)
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from mdblocks.config import (
    BLOCKS_PER_BATCH,
    DEFAULT_CODE_LANGUAGE,
    RICH_TEXT_MAX,
    ConverterConfig,
)

# ── Conversion ──────────────────────────────────────────────────────────
from mdblocks.converter import (
    MarkdownToBlocksConverter,
    format_content,
    markdown_to_blocks,
    markdown_to_blocks_batched,
)

# ── Errors ──────────────────────────────────────────────────────────────
from mdblocks.errors import (
    ErrorCode,
    MdBlocksError,
    MdBlocksTextOverflowError,
    MdBlocksValidationError,
)

# ── Models ──────────────────────────────────────────────────────────────
from mdblocks.models import Annotations, Block, BlockKind, RichTextSegment

__all__ = [
    # Conversion
    "MarkdownToBlocksConverter",
    "markdown_to_blocks",
    "markdown_to_blocks_batched",
    "format_content",
    # Configuration
    "ConverterConfig",
    "RICH_TEXT_MAX",
    "BLOCKS_PER_BATCH",
    "DEFAULT_CODE_LANGUAGE",
    # Errors
    "MdBlocksError",
    "ErrorCode",
    "MdBlocksValidationError",
    "MdBlocksTextOverflowError",
    # Models
    "Block",
    "BlockKind",
    "RichTextSegment",
    "Annotations",
]
