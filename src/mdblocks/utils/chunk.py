"""Batch a block sequence into groups of at most *size* items.

The remote ``append block children`` endpoint accepts at most 100 blocks per
request.  :func:`batch_blocks` slices an arbitrarily long conversion result
into compliant batches so callers can submit them one request at a time.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from mdblocks.config import BLOCKS_PER_BATCH

T = TypeVar("T")


def batch_blocks(blocks: Sequence[T], size: int = BLOCKS_PER_BATCH) -> list[list[T]]:
    """Split *blocks* into consecutive batches of at most *size*.

    Works on :class:`~mdblocks.models.Block` values and on their serialised
    dicts alike.

    Parameters
    ----------
    blocks:
        The full, ordered block sequence.
    size:
        Maximum number of blocks per batch.

    Returns
    -------
    list[list]
        Batches in source order.  Only the last may be shorter than *size*.
        An empty input returns an empty list (not ``[[]]``).

    Raises
    ------
    ValueError
        If *size* is less than 1.

    Examples
    --------
    >>> [len(b) for b in batch_blocks(list(range(250)))]
    [100, 100, 50]
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    if not blocks:
        return []

    return [list(blocks[i : i + size]) for i in range(0, len(blocks), size)]
