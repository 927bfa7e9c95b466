"""Property-based tests for mdblocks using Hypothesis.

These tests verify invariant properties of the splitter, batcher, tokenizer
and converter over a wide range of generated inputs.
"""

from __future__ import annotations

import math

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from mdblocks.config import ConverterConfig
from mdblocks.converter.inline import tokenize
from mdblocks.converter.md_to_blocks import MarkdownToBlocksConverter
from mdblocks.converter.rich_text import split_segment
from mdblocks.models import Annotations, Block, BlockKind, RichTextSegment
from mdblocks.utils.chunk import batch_blocks

# ---------------------------------------------------------------------------
# Reusable strategies
# ---------------------------------------------------------------------------

_annotations_st = st.builds(
    Annotations,
    bold=st.booleans(),
    italic=st.booleans(),
    strikethrough=st.booleans(),
    code=st.booleans(),
)

_block_st = st.builds(
    Block,
    kind=st.just(BlockKind.PARAGRAPH),
    rich_text=st.tuples(st.builds(RichTextSegment, st.text(min_size=1, max_size=20))),
)

# Words without markup characters, joined by spaces.
_word_st = st.text(
    alphabet=st.characters(whitelist_categories=("L", "N"), max_codepoint=0x2FF),
    min_size=1,
    max_size=8,
)


def _markup(word: str, marker: str) -> str:
    return f"{marker}{word}{marker}"


_span_st = st.one_of(
    _word_st,
    _word_st.map(lambda w: _markup(w, "**")),
    _word_st.map(lambda w: _markup(w, "~~")),
    _word_st.map(lambda w: _markup(w, "`")),
    _word_st.map(lambda w: _markup(w, "*")),
    _word_st.map(lambda w: _markup(w, "_")),
)

_STRIP_MARKERS = ("**", "~~", "`", "*", "_")


def _strip_markup(text: str) -> str:
    for marker in _STRIP_MARKERS:
        text = text.replace(marker, "")
    return text


# ---------------------------------------------------------------------------
# 1. Segment splitter
# ---------------------------------------------------------------------------


class TestSplitSegmentProperties:
    @given(
        text=st.text(min_size=1, max_size=3000),
        limit=st.integers(min_value=1, max_value=500),
        annotations=_annotations_st,
    )
    def test_split_invariants(self, text: str, limit: int, annotations: Annotations) -> None:
        parts = split_segment(RichTextSegment(text, annotations), limit)
        assert len(parts) == math.ceil(len(text) / limit)
        assert "".join(p.content for p in parts) == text
        assert all(len(p.content) <= limit for p in parts)
        assert all(p.annotations == annotations for p in parts)
        assert all(len(p.content) == limit for p in parts[:-1])


# ---------------------------------------------------------------------------
# 2. Batcher
# ---------------------------------------------------------------------------


class TestBatchBlocksProperties:
    @given(
        blocks=st.lists(_block_st, min_size=1, max_size=250),
        size=st.integers(min_value=1, max_value=100),
    )
    @settings(max_examples=50, suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large])
    def test_batches_reconstruct_input(self, blocks: list[Block], size: int) -> None:
        batches = batch_blocks(blocks, size)
        assert [b for batch in batches for b in batch] == blocks
        assert all(len(batch) <= size for batch in batches)
        assert all(len(batch) == size for batch in batches[:-1])
        assert 1 <= len(batches[-1]) <= size


# ---------------------------------------------------------------------------
# 3. Tokenizer
# ---------------------------------------------------------------------------


class TestTokenizeProperties:
    @given(spans=st.lists(_span_st, min_size=1, max_size=10))
    def test_content_equals_text_without_markers(self, spans: list[str]) -> None:
        line = " ".join(spans)
        segments = tokenize(line)
        assert "".join(s.content for s in segments) == _strip_markup(line)

    @given(text=st.text(max_size=200))
    def test_always_returns_segments(self, text: str) -> None:
        segments = tokenize(text)
        assert len(segments) >= 1
        for seg in segments:
            assert sum(seg.annotations.to_dict().values()) <= 1


# ---------------------------------------------------------------------------
# 4. Converter
# ---------------------------------------------------------------------------


class TestConverterProperties:
    @given(text=st.text(max_size=500))
    def test_total_and_within_limits(self, text: str) -> None:
        config = ConverterConfig(rich_text_limit=16)
        blocks = MarkdownToBlocksConverter(config).convert(text)
        for block in blocks:
            if block.kind is BlockKind.DIVIDER:
                assert block.rich_text == ()
            else:
                assert block.rich_text
            assert all(len(s.content) <= 16 for s in block.rich_text)

    @given(lines=st.lists(_word_st, min_size=1, max_size=250))
    @settings(max_examples=25, suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large])
    def test_plain_lines_map_one_to_one(self, lines: list[str]) -> None:
        converter = MarkdownToBlocksConverter()
        batches = converter.convert_batched("\n".join(lines))
        flat = [b for batch in batches for b in batch]
        assert [b.plain_text for b in flat] == lines
        assert all(len(batch) <= 100 for batch in batches)
