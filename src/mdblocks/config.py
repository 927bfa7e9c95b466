"""Converter configuration for mdblocks.

:class:`ConverterConfig` is a frozen dataclass that captures every tuneable
knob of the Markdown-to-blocks engine.  Instances are passed to
:class:`~mdblocks.converter.md_to_blocks.MarkdownToBlocksConverter` and to the
module-level helpers.

Three module-level constants define the remote API limits the engine
respects:

* :data:`RICH_TEXT_MAX` - maximum characters per rich-text segment.
* :data:`BLOCKS_PER_BATCH` - maximum blocks per append request.
* :data:`DEFAULT_CODE_LANGUAGE` - language used for untagged code fences.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# API limits
# ---------------------------------------------------------------------------

RICH_TEXT_MAX: int = 2000
"""Upper bound on ``rich_text[].text.content`` length."""

BLOCKS_PER_BATCH: int = 100
"""Upper bound on the number of children in one append request."""

DEFAULT_CODE_LANGUAGE: str = "plain text"
"""Language assigned to a code fence opened without a tag."""


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConverterConfig:
    """Complete configuration for a Markdown-to-blocks conversion.

    Every parameter has a default, so ``ConverterConfig()`` reproduces the
    remote API limits exactly.

    Parameters
    ----------
    rich_text_limit:
        Maximum characters per rich-text segment.  Longer segments are
        split.  Must be between 1 and :data:`RICH_TEXT_MAX`.
    batch_size:
        Maximum blocks per batch.  Must be between 1 and
        :data:`BLOCKS_PER_BATCH`.
    default_code_language:
        Language assigned to code fences with an empty tag.
    normalize_code_language:
        Map fence tags onto the identifiers the remote API accepts
        (``py`` -> ``python``).  Unknown tags become
        *default_code_language*.  When ``False`` the tag is kept verbatim.
    metrics:
        Optional :class:`~mdblocks.observability.MetricsHook` backend.
    debug_dump_payload:
        Write the serialised blocks to *stderr* after each conversion.
    """

    rich_text_limit: int = RICH_TEXT_MAX

    batch_size: int = BLOCKS_PER_BATCH

    default_code_language: str = DEFAULT_CODE_LANGUAGE

    normalize_code_language: bool = False

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not 1 <= self.rich_text_limit <= RICH_TEXT_MAX:
            raise ValueError(
                f"rich_text_limit must be between 1 and {RICH_TEXT_MAX}, "
                f"got {self.rich_text_limit}"
            )
        if not 1 <= self.batch_size <= BLOCKS_PER_BATCH:
            raise ValueError(
                f"batch_size must be between 1 and {BLOCKS_PER_BATCH}, "
                f"got {self.batch_size}"
            )
        if not self.default_code_language:
            raise ValueError("default_code_language must be a non-empty string")
