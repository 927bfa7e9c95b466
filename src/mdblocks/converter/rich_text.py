"""Enforce the per-segment content limit on rich-text arrays.

Splitting runs after tokenization and independently of it, so a paragraph
without any markup is split exactly like a bold span.  Each piece keeps the
annotations of the segment it came from.
"""

from __future__ import annotations

from collections.abc import Iterable

from mdblocks.config import RICH_TEXT_MAX
from mdblocks.models import RichTextSegment
from mdblocks.utils.text_split import split_string


def split_segment(
    segment: RichTextSegment,
    limit: int = RICH_TEXT_MAX,
) -> list[RichTextSegment]:
    """Split *segment* into pieces of at most *limit* characters.

    A segment already within the limit is returned unchanged as a
    single-element list.  Otherwise the result has
    ``ceil(len(content) / limit)`` pieces: all but the last hold exactly
    *limit* characters and every piece carries the original annotations.
    """
    if len(segment.content) <= limit:
        return [segment]
    return [segment.with_content(chunk) for chunk in split_string(segment.content, limit)]


def split_rich_text(
    segments: Iterable[RichTextSegment],
    limit: int = RICH_TEXT_MAX,
) -> list[RichTextSegment]:
    """Apply :func:`split_segment` to every segment, preserving order."""
    output: list[RichTextSegment] = []
    for segment in segments:
        output.extend(split_segment(segment, limit))
    return output


def plain_rich_text(content: str, limit: int = RICH_TEXT_MAX) -> list[RichTextSegment]:
    """Wrap *content* as unannotated rich text, split to *limit*.

    Empty *content* yields a single empty segment so the owning block still
    has a non-empty rich-text array.
    """
    return split_segment(RichTextSegment(content), limit)
