"""Decide which block type a single trimmed line produces.

Rules are tried in table order and the first match wins:

1. blank line      -> no block
2. ``---``         -> divider (exactly three hyphens)
3. ``# text``      -> heading_1..3 (levels 4-6 clamp to heading_3)
4. ``- [x] text``  -> to_do (checked for ``x``/``X``)
5. ``- text``      -> bulleted_list_item (``-`` or ``*``)
6. ``1. text``     -> numbered_list_item
7. ``> text``      -> quote
8. anything else   -> paragraph with the whole line as text

To-do comes before bulleted so a checkbox is never read as bullet text.
Markup that is not quite right (``#title``, ``>quote``) falls through to a
lower rule instead of failing.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from mdblocks.models import BlockKind


@dataclass(frozen=True)
class LineMatch:
    """Classification of one line.

    Attributes
    ----------
    kind:
        Block type to build.
    text:
        Inline payload still carrying inline markup; empty for dividers.
    checked:
        Check state for to-do items, ``None`` otherwise.
    """

    kind: BlockKind
    text: str = ""
    checked: bool | None = None


@dataclass(frozen=True)
class LineRule:
    """One entry of the classifier's precedence table."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], LineMatch]


def _heading(match: re.Match[str]) -> LineMatch:
    return LineMatch(BlockKind.heading(len(match.group(1))), match.group(2))


def _to_do(match: re.Match[str]) -> LineMatch:
    return LineMatch(BlockKind.TO_DO, match.group(2), checked=match.group(1) != " ")


LINE_RULES: tuple[LineRule, ...] = (
    LineRule(
        "divider",
        re.compile(r"---"),
        lambda m: LineMatch(BlockKind.DIVIDER),
    ),
    LineRule(
        "heading",
        re.compile(r"(#{1,6})\s+(.+)"),
        _heading,
    ),
    LineRule(
        "to_do",
        re.compile(r"[-*]\s+\[([ xX])\]\s+(.+)"),
        _to_do,
    ),
    LineRule(
        "bulleted_list_item",
        re.compile(r"[-*]\s+(.+)"),
        lambda m: LineMatch(BlockKind.BULLETED_LIST_ITEM, m.group(1)),
    ),
    LineRule(
        "numbered_list_item",
        re.compile(r"[0-9]+\.\s+(.+)"),
        lambda m: LineMatch(BlockKind.NUMBERED_LIST_ITEM, m.group(1)),
    ),
    LineRule(
        "quote",
        re.compile(r">\s+(.+)"),
        lambda m: LineMatch(BlockKind.QUOTE, m.group(1)),
    ),
)
"""Single-line rules, highest precedence first.  Patterns must match the
whole trimmed line."""


def classify_line(
    line: str,
    rules: tuple[LineRule, ...] = LINE_RULES,
) -> LineMatch | None:
    """Classify *line*, or return ``None`` for a blank line.

    Examples
    --------
    >>> classify_line("#### Deep").kind
    <BlockKind.HEADING_3: 'heading_3'>
    >>> classify_line("   ") is None
    True
    """
    stripped = line.strip()
    if not stripped:
        return None
    for rule in rules:
        match = rule.pattern.fullmatch(stripped)
        if match is not None:
            return rule.build(match)
    return LineMatch(BlockKind.PARAGRAPH, stripped)
