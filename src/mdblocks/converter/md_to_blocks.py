"""Markdown-to-blocks conversion driver.

:class:`MarkdownToBlocksConverter` makes one top-to-bottom pass over the
input:

1. **Normalize** - trim the whole text and split on ``\\n`` / ``\\r\\n``.
2. **Classify** - fenced regions go to :func:`~mdblocks.converter.fence.scan_fence`;
   every other line goes to :func:`~mdblocks.converter.line_classifier.classify_line`.
3. **Build** - textual payloads are tokenized, split to the segment limit,
   and wrapped in a :class:`~mdblocks.models.Block`.

Conversion is total: any string yields a (possibly empty) block list and
nothing is raised.  The module-level helpers return the serialised dict
shape consumed by the remote document client.
"""

from __future__ import annotations

import json
import re
import sys
import time
from collections import Counter
from typing import Any

from mdblocks.config import ConverterConfig
from mdblocks.converter.fence import FencedCode, match_fence_open, scan_fence
from mdblocks.converter.inline import tokenize
from mdblocks.converter.languages import normalize_language
from mdblocks.converter.line_classifier import LineMatch, classify_line
from mdblocks.converter.rich_text import plain_rich_text, split_rich_text
from mdblocks.models import Block, BlockKind
from mdblocks.observability import NoopMetricsHook, get_logger
from mdblocks.utils.chunk import batch_blocks

log = get_logger("mdblocks.converter")

_LINE_BREAK = re.compile(r"\r?\n")


class MarkdownToBlocksConverter:
    """Convert Markdown text to :class:`~mdblocks.models.Block` lists.

    Instances hold only configuration, so one converter can be shared.

    Parameters
    ----------
    config:
        Limits, code-language handling and observability hooks.  Defaults
        to ``ConverterConfig()``.

    Examples
    --------
    >>> converter = MarkdownToBlocksConverter()
    >>> [b.kind.value for b in converter.convert("# Title\\n\\nBody")]
    ['heading_1', 'paragraph']
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config or ConverterConfig()
        self._metrics = self._config.metrics or NoopMetricsHook()

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def convert(self, markdown: str) -> list[Block]:
        """Convert *markdown* to an ordered list of blocks.

        Parameters
        ----------
        markdown:
            Raw Markdown text.  Blank or whitespace-only input yields ``[]``.

        Returns
        -------
        list[Block]
            Blocks in source order.
        """
        started = time.perf_counter()
        trimmed = markdown.strip()
        lines = _LINE_BREAK.split(trimmed) if trimmed else []
        ctx = _BuildContext(self._config)

        i = 0
        while i < len(lines):
            if match_fence_open(lines[i]) is not None:
                fenced = scan_fence(lines, i)
                if not fenced.terminated:
                    log.warning(
                        "unterminated code fence runs to end of input",
                        extra={"extra_fields": {"op": "convert", "line": i + 1}},
                    )
                ctx.blocks.append(_build_code(fenced, ctx))
                i = fenced.next_index
                continue

            line_match = classify_line(lines[i])
            if line_match is not None:
                ctx.blocks.append(_build_block(line_match, ctx))
            i += 1

        self._emit_metrics(ctx, started)
        log.debug(
            "conversion complete",
            extra={"extra_fields": {
                "op": "convert",
                "lines": len(lines),
                "blocks": len(ctx.blocks),
            }},
        )

        if self._config.debug_dump_payload:
            print(
                "[mdblocks] blocks payload:",
                json.dumps([b.to_dict() for b in ctx.blocks], indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        return ctx.blocks

    def convert_batched(self, markdown: str) -> list[list[Block]]:
        """Convert *markdown* and group the blocks by ``config.batch_size``."""
        return batch_blocks(self.convert(markdown), self._config.batch_size)

    def _emit_metrics(self, ctx: _BuildContext, started: float) -> None:
        for kind, count in Counter(b.kind.value for b in ctx.blocks).items():
            self._metrics.increment(
                "mdblocks.blocks_created_total", count, tags={"kind": kind},
            )
        if ctx.segments_split:
            self._metrics.increment("mdblocks.segments_split_total", ctx.segments_split)
        self._metrics.timing(
            "mdblocks.conversion_duration_ms",
            (time.perf_counter() - started) * 1000,
        )


class _BuildContext:
    """Mutable accumulator for one conversion pass."""

    __slots__ = ("blocks", "config", "segments_split")

    def __init__(self, config: ConverterConfig) -> None:
        self.config = config
        self.blocks: list[Block] = []
        self.segments_split = 0


# ---------------------------------------------------------------------------
# Block builders
# ---------------------------------------------------------------------------

def _build_block(line_match: LineMatch, ctx: _BuildContext) -> Block:
    if line_match.kind is BlockKind.DIVIDER:
        return Block(BlockKind.DIVIDER)
    segments = tokenize(line_match.text)
    rich_text = split_rich_text(segments, ctx.config.rich_text_limit)
    ctx.segments_split += len(rich_text) - len(segments)
    return Block(line_match.kind, tuple(rich_text), checked=line_match.checked)


def _build_code(fenced: FencedCode, ctx: _BuildContext) -> Block:
    default = ctx.config.default_code_language
    if ctx.config.normalize_code_language:
        language = normalize_language(fenced.tag, default)
    else:
        language = fenced.tag or default
    rich_text = plain_rich_text(fenced.content, ctx.config.rich_text_limit)
    ctx.segments_split += len(rich_text) - 1
    return Block(BlockKind.CODE, tuple(rich_text), language=language)


# ---------------------------------------------------------------------------
# Dict-level API
# ---------------------------------------------------------------------------

def markdown_to_blocks(
    markdown: str,
    config: ConverterConfig | None = None,
) -> list[dict[str, Any]]:
    """Convert *markdown* to serialised block dicts, unbatched."""
    converter = MarkdownToBlocksConverter(config)
    return [block.to_dict() for block in converter.convert(markdown)]


def markdown_to_blocks_batched(
    markdown: str,
    config: ConverterConfig | None = None,
) -> list[list[dict[str, Any]]]:
    """Convert *markdown* to serialised block dicts grouped into batches.

    Each batch holds at most ``config.batch_size`` (default 100) blocks and
    can be sent as one append request.  Empty input yields ``[]``.
    """
    converter = MarkdownToBlocksConverter(config)
    return [
        [block.to_dict() for block in batch]
        for batch in converter.convert_batched(markdown)
    ]


def format_content(
    markdown: str,
    config: ConverterConfig | None = None,
) -> dict[str, Any]:
    """Preview payload: ``{"blocks": [...], "block_count": n}``."""
    blocks = markdown_to_blocks(markdown, config)
    return {"blocks": blocks, "block_count": len(blocks)}
