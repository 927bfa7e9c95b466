"""Shared test fixtures for the mdblocks test suite."""

from __future__ import annotations

import pytest

from mdblocks.config import ConverterConfig
from mdblocks.converter.md_to_blocks import MarkdownToBlocksConverter


class RecordingMetricsHook:
    """Metrics backend that keeps every data point for assertions."""

    def __init__(self) -> None:
        self.counters: list[tuple[str, int, dict | None]] = []
        self.timings: list[tuple[str, float, dict | None]] = []

    def increment(self, name, value=1, tags=None):
        self.counters.append((name, value, tags))

    def timing(self, name, ms, tags=None):
        self.timings.append((name, ms, tags))


@pytest.fixture
def config() -> ConverterConfig:
    """Default configuration."""
    return ConverterConfig()


@pytest.fixture
def converter(config: ConverterConfig) -> MarkdownToBlocksConverter:
    """Converter using the default configuration."""
    return MarkdownToBlocksConverter(config)


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()
