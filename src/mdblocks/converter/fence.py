"""Consume a fenced code region.

A fence opens on a raw (untrimmed) line of three backticks optionally
followed by a word-character tag, and closes on a line that is exactly three
backticks.  Lines in between are kept verbatim, blank ones included.  A
fence without a closer runs to the end of the input.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

FENCE_OPEN = re.compile(r"```([A-Za-z0-9_]*)")
FENCE_CLOSE = "```"


@dataclass(frozen=True)
class FencedCode:
    """Result of scanning one fence.

    Attributes
    ----------
    tag:
        The raw tag after the opening backticks (possibly empty).
    content:
        Body lines joined with ``"\\n"``.
    next_index:
        Index of the first line after the fence (past the closer, if any).
    terminated:
        ``False`` when the input ended before a closing fence.
    """

    tag: str
    content: str
    next_index: int
    terminated: bool


def match_fence_open(line: str) -> str | None:
    """Return the tag if *line* opens a fence, else ``None``."""
    match = FENCE_OPEN.fullmatch(line)
    return match.group(1) if match else None


def scan_fence(lines: Sequence[str], start: int) -> FencedCode:
    """Scan the fence whose opener is ``lines[start]``.

    The caller must have checked the opener with :func:`match_fence_open`.
    """
    tag = match_fence_open(lines[start]) or ""
    body: list[str] = []
    i = start + 1
    while i < len(lines):
        if lines[i] == FENCE_CLOSE:
            return FencedCode(tag, "\n".join(body), i + 1, terminated=True)
        body.append(lines[i])
        i += 1
    return FencedCode(tag, "\n".join(body), i, terminated=False)
