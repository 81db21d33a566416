"""
Unit tests for core.logger module.

Tests:
- Logger initialization
- Structured key=value message formatting
- StructuredFormatter output for plain and structured records
"""

import logging

import pytest

from relayinfo.core.logger import Logger, StructuredFormatter, format_kv_pairs


class TestInit:
    """Logger initialization."""

    def test_name(self):
        logger = Logger("cli")
        assert logger._logger.name == "cli"

    def test_default_max_value_length(self):
        assert Logger("test")._max_value_length == 1000


class TestFormatKvPairs:
    """Key-value pair formatting and escaping."""

    def test_empty(self):
        assert format_kv_pairs({}) == ""

    def test_simple(self):
        assert format_kv_pairs({"nips": 12}) == " nips=12"
        assert format_kv_pairs({"url": "wss://relay.example/"}) == " url=wss://relay.example/"

    def test_quoting(self):
        assert format_kv_pairs({"key": "hello world"}) == ' key="hello world"'
        assert format_kv_pairs({"key": "a=b"}) == ' key="a=b"'
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_escapes_quotes(self):
        assert format_kv_pairs({"key": 'say "hi"'}) == ' key="say \\"hi\\""'

    def test_truncation(self):
        result = format_kv_pairs({"key": "x" * 20}, max_value_length=5)
        assert result == ' key="xxxxx...<truncated 15 chars>"'

    def test_prefix(self):
        assert format_kv_pairs({"a": 1, "b": 2}, prefix="") == "a=1 b=2"


class TestLogging:
    """Records emitted through Logger."""

    def test_structured_extra(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="test_kv"):
            Logger("test_kv").info("document_built", nips=12)
        record = caplog.records[-1]
        assert record.getMessage() == "document_built"
        assert record.structured_kv == {"nips": 12}

    def test_extra_truncated(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="test_trunc"):
            Logger("test_trunc", max_value_length=3).info("msg", value="abcdef")
        assert caplog.records[-1].structured_kv["value"].startswith("abc...")

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_levels(self, caplog: pytest.LogCaptureFixture, method: str, level: int):
        with caplog.at_level(logging.DEBUG, logger="test_levels"):
            getattr(Logger("test_levels"), method)("event")
        assert caplog.records[-1].levelno == level


class TestStructuredFormatter:
    """StructuredFormatter output."""

    def _record(self, msg: str, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("relayinfo.test", logging.INFO, __file__, 1, msg, (), None)
        for k, v in extra.items():
            setattr(record, k, v)
        return record

    def test_plain_record(self):
        assert StructuredFormatter().format(self._record("hello")) == "info relayinfo.test hello"

    def test_structured_record(self):
        record = self._record("built", structured_kv={"nips": 12, "name": "my relay"})
        assert (
            StructuredFormatter().format(record)
            == 'info relayinfo.test built nips=12 name="my relay"'
        )
