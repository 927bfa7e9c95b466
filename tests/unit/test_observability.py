"""Tests for observability/logger.py and observability/metrics.py"""
import io
import json
import logging
from pathlib import Path

import pytest

from mdblocks.observability import MetricsHook, NoopMetricsHook, StructuredFormatter, get_logger


class TestStructuredFormatter:
    def _get_record(self, msg, level=logging.INFO, extra_fields=None):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=None,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        return record

    def test_basic_format(self):
        result = json.loads(StructuredFormatter().format(self._get_record("hello world")))
        assert result["message"] == "hello world"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        record = self._get_record("msg", extra_fields={"op": "convert", "blocks": 5})
        result = json.loads(StructuredFormatter().format(record))
        assert result["op"] == "convert"
        assert result["blocks"] == 5

    def test_non_json_values_fall_back_to_str(self):
        record = self._get_record("msg", extra_fields={"path": Path("doc.md")})
        result = json.loads(StructuredFormatter().format(record))
        assert result["path"] == "doc.md"


class TestGetLogger:
    def test_writes_json_to_stream(self):
        stream = io.StringIO()
        log = get_logger("mdblocks.test.stream", level="DEBUG", stream=stream)
        log.debug("hi", extra={"extra_fields": {"lines": 3}})
        entry = json.loads(stream.getvalue())
        assert entry["message"] == "hi"
        assert entry["lines"] == 3

    def test_idempotent(self):
        first = get_logger("mdblocks.test.idem", stream=io.StringIO())
        second = get_logger("mdblocks.test.idem", stream=io.StringIO())
        assert first is second
        assert len(first.handlers) == 1

    def test_default_level_is_warning(self):
        assert get_logger("mdblocks.test.level", stream=io.StringIO()).level == logging.WARNING

    def test_unknown_level_name(self):
        with pytest.raises(ValueError, match="log level"):
            get_logger("mdblocks.test.bad", level="LOUD")


class TestMetricsHook:
    def test_noop_satisfies_protocol(self):
        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_noop_discards(self):
        hook = NoopMetricsHook()
        assert hook.increment("x") is None
        assert hook.timing("y", 1.0, tags={"a": "b"}) is None

    def test_recording_hook_satisfies_protocol(self, metrics):
        assert isinstance(metrics, MetricsHook)
