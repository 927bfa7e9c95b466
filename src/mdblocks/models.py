"""Public data models for the mdblocks package.

A converted document is a list of :class:`Block` values.  Each block is a
tagged union: :attr:`Block.kind` names the block type and the remaining
fields hold the payload that kind allows.  All types are frozen dataclasses
so a block cannot change after the conversion pass that produced it.

:meth:`Block.to_dict` produces the JSON-ready shape the remote block API
accepts::

    {
        "object": "block",
        "type": "to_do",
        "to_do": {
            "rich_text": [{"type": "text", "text": {"content": "Ship it"}}],
            "checked": true
        }
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mdblocks.config import RICH_TEXT_MAX
from mdblocks.errors import MdBlocksTextOverflowError, MdBlocksValidationError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class BlockKind(str, Enum):
    """Block types the converter can emit."""

    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    QUOTE = "quote"
    DIVIDER = "divider"
    CODE = "code"

    @classmethod
    def heading(cls, level: int) -> BlockKind:
        """Return the heading kind for *level*, clamped to ``1..3``."""
        return cls(f"heading_{min(max(level, 1), 3)}")


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Annotations:
    """Style flags attached to a rich-text segment."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    code: bool = False

    @property
    def is_default(self) -> bool:
        return not (self.bold or self.italic or self.strikethrough or self.code)

    def to_dict(self) -> dict[str, bool]:
        return {
            "bold": self.bold,
            "italic": self.italic,
            "strikethrough": self.strikethrough,
            "code": self.code,
        }


PLAIN = Annotations()
"""The all-false annotation set."""


@dataclass(frozen=True)
class RichTextSegment:
    """A run of text sharing one annotation set.

    Attributes
    ----------
    content:
        The literal text, markup characters already removed.
    annotations:
        Style flags.  Defaults to :data:`PLAIN`.
    """

    content: str
    annotations: Annotations = PLAIN

    def with_content(self, content: str) -> RichTextSegment:
        """Return a copy carrying *content* and the same annotations."""
        return RichTextSegment(content, self.annotations)

    def to_dict(self) -> dict[str, Any]:
        seg: dict[str, Any] = {
            "type": "text",
            "text": {"content": self.content},
        }
        # Only include annotations if any flag is set
        if not self.annotations.is_default:
            seg["annotations"] = self.annotations.to_dict()
        return seg


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """One structured content unit of the output document.

    Attributes
    ----------
    kind:
        The block type.
    rich_text:
        Ordered segments of the block's text.  Empty for
        :attr:`BlockKind.DIVIDER`, non-empty for every other kind.
    checked:
        Check state; set for :attr:`BlockKind.TO_DO` only.
    language:
        Code language; set for :attr:`BlockKind.CODE` only.

    Raises
    ------
    MdBlocksValidationError
        If the payload does not fit the kind.
    MdBlocksTextOverflowError
        If a segment holds more than :data:`~mdblocks.config.RICH_TEXT_MAX`
        characters.
    """

    kind: BlockKind
    rich_text: tuple[RichTextSegment, ...] = field(default_factory=tuple)
    checked: bool | None = None
    language: str | None = None

    def __post_init__(self) -> None:
        kind = BlockKind(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "rich_text", tuple(self.rich_text))

        if kind is BlockKind.DIVIDER:
            if self.rich_text:
                raise MdBlocksValidationError(
                    "divider blocks carry no rich text",
                    context={"kind": kind.value, "field": "rich_text"},
                )
        elif not self.rich_text:
            raise MdBlocksValidationError(
                f"{kind.value} blocks need at least one rich-text segment",
                context={"kind": kind.value, "field": "rich_text"},
            )

        if (kind is BlockKind.TO_DO) != isinstance(self.checked, bool):
            raise MdBlocksValidationError(
                "'checked' is required for to_do blocks and forbidden otherwise",
                context={"kind": kind.value, "field": "checked"},
            )
        if (kind is BlockKind.CODE) != isinstance(self.language, str):
            raise MdBlocksValidationError(
                "'language' is required for code blocks and forbidden otherwise",
                context={"kind": kind.value, "field": "language"},
            )

        for seg in self.rich_text:
            if len(seg.content) > RICH_TEXT_MAX:
                raise MdBlocksTextOverflowError(
                    f"rich-text segment of {len(seg.content)} characters "
                    f"exceeds the {RICH_TEXT_MAX}-character limit",
                    context={
                        "kind": kind.value,
                        "content_length": len(seg.content),
                        "limit": RICH_TEXT_MAX,
                    },
                )

    @property
    def plain_text(self) -> str:
        """Concatenated segment content with annotations dropped."""
        return "".join(seg.content for seg in self.rich_text)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the remote block API shape."""
        payload: dict[str, Any] = {}
        if self.kind is not BlockKind.DIVIDER:
            payload["rich_text"] = [seg.to_dict() for seg in self.rich_text]
        if self.checked is not None:
            payload["checked"] = self.checked
        if self.language is not None:
            payload["language"] = self.language
        return {
            "object": "block",
            "type": self.kind.value,
            self.kind.value: payload,
        }
