"""Tokenize one line of text into annotated rich-text segments.

Recognised markup, in precedence order:

============  ===============  ==================
Rule          Syntax           Annotation
============  ===============  ==================
bold          ``**text**``     ``bold``
strike        ``~~text~~``     ``strikethrough``
code          ```text```       ``code``
italic        ``*text*``       ``italic``
underscore    ``_text_``       ``italic``
============  ===============  ==================

The scan always takes the match that starts earliest in the remaining text.
When two rules match at the same position the one listed first wins, which
is what keeps ``**bold**`` from reading as two empty italics.  Spans are
non-greedy and never empty.  Nesting is not supported: markers inside a
recognised span stay in its content as literal characters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mdblocks.models import Annotations, RichTextSegment


@dataclass(frozen=True)
class InlineRule:
    """One entry of the tokenizer's precedence table."""

    name: str
    pattern: re.Pattern[str]
    annotations: Annotations


INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule("bold", re.compile(r"\*\*(.+?)\*\*"), Annotations(bold=True)),
    InlineRule("strikethrough", re.compile(r"~~(.+?)~~"), Annotations(strikethrough=True)),
    InlineRule("code", re.compile(r"`(.+?)`"), Annotations(code=True)),
    InlineRule("italic", re.compile(r"\*(.+?)\*"), Annotations(italic=True)),
    InlineRule("underscore_italic", re.compile(r"_(.+?)_"), Annotations(italic=True)),
)
"""Tokenizer rules, highest precedence first."""


def tokenize(
    text: str,
    rules: tuple[InlineRule, ...] = INLINE_RULES,
) -> list[RichTextSegment]:
    """Convert *text* into an ordered list of rich-text segments.

    Segments are not length-limited here; see
    :func:`mdblocks.converter.rich_text.split_rich_text`.

    Parameters
    ----------
    text:
        A single line with surrounding markup already removed.
    rules:
        Precedence-ordered rule table.  Defaults to :data:`INLINE_RULES`.

    Returns
    -------
    list[RichTextSegment]
        At least one segment.  Empty *text* gives one empty plain segment.

    Examples
    --------
    >>> [s.content for s in tokenize("Body **bold** text")]
    ['Body ', 'bold', ' text']
    """
    if not text:
        return [RichTextSegment("")]

    segments: list[RichTextSegment] = []
    pos = 0
    while pos < len(text):
        found = _next_span(text, pos, rules)
        if found is None:
            segments.append(RichTextSegment(text[pos:]))
            break

        rule, match = found
        if match.start() > pos:
            segments.append(RichTextSegment(text[pos : match.start()]))
        segments.append(RichTextSegment(match.group(1), rule.annotations))
        pos = match.end()

    return segments


def _next_span(
    text: str,
    pos: int,
    rules: tuple[InlineRule, ...],
) -> tuple[InlineRule, re.Match[str]] | None:
    """Return the earliest rule match at or after *pos*.

    Ties go to the rule listed first.
    """
    best: tuple[InlineRule, re.Match[str]] | None = None
    for rule in rules:
        match = rule.pattern.search(text, pos)
        if match is None:
            continue
        if best is None or match.start() < best[1].start():
            best = (rule, match)
    return best
