"""Code-point safe string splitting.

A rich-text segment's ``content`` is limited to 2 000 characters.
:func:`split_string` partitions a string into consecutive chunks of exactly
*limit* characters with a shorter final remainder.

Python ``str`` indexing is code-point based, so plain slicing never cuts a
multi-byte character in half and no byte-level handling is needed.
"""

from __future__ import annotations

from mdblocks.config import RICH_TEXT_MAX


def split_string(text: str, limit: int = RICH_TEXT_MAX) -> list[str]:
    """Split *text* into chunks of at most *limit* characters.

    Parameters
    ----------
    text:
        The input string to partition.
    limit:
        Maximum number of characters per chunk.

    Returns
    -------
    list[str]
        Non-empty chunks whose concatenation equals *text*.  Every chunk but
        the last has exactly *limit* characters.  An empty *text* gives an
        empty list.

    Raises
    ------
    ValueError
        If *limit* is less than 1.

    Examples
    --------
    >>> split_string("hello world", 5)
    ['hello', ' worl', 'd']

    >>> split_string("", 100)
    []
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    if not text:
        return []

    return [text[i : i + limit] for i in range(0, len(text), limit)]
