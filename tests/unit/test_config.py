"""Tests for ConverterConfig validation."""

import dataclasses

import pytest

from mdblocks.config import BLOCKS_PER_BATCH, DEFAULT_CODE_LANGUAGE, RICH_TEXT_MAX, ConverterConfig


class TestDefaults:
    def test_api_limits(self):
        config = ConverterConfig()
        assert config.rich_text_limit == RICH_TEXT_MAX == 2000
        assert config.batch_size == BLOCKS_PER_BATCH == 100
        assert config.default_code_language == DEFAULT_CODE_LANGUAGE == "plain text"
        assert config.normalize_code_language is False
        assert config.metrics is None

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ConverterConfig().batch_size = 5


class TestValidation:
    @pytest.mark.parametrize("value", [0, -1, 2001])
    def test_rich_text_limit_bounds(self, value):
        with pytest.raises(ValueError, match="rich_text_limit"):
            ConverterConfig(rich_text_limit=value)

    @pytest.mark.parametrize("value", [0, 101])
    def test_batch_size_bounds(self, value):
        with pytest.raises(ValueError, match="batch_size"):
            ConverterConfig(batch_size=value)

    def test_boundaries_accepted(self):
        ConverterConfig(rich_text_limit=1, batch_size=1)
        ConverterConfig(rich_text_limit=2000, batch_size=100)

    def test_empty_default_language(self):
        with pytest.raises(ValueError, match="default_code_language"):
            ConverterConfig(default_code_language="")
