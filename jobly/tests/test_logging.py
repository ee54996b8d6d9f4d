"""Tests for structured logging."""

import json
import logging
import sys
from unittest.mock import patch

from jobly.core.config import settings
from jobly.core.logging import ConsoleFormatter, JSONFormatter, build_formatter, get_logger


def _record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/jobly/test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_log_format(self):
        parsed = json.loads(JSONFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test.logger"
        assert parsed["message"] == "Test message"
        assert parsed["line"] == 42
        assert "timestamp" in parsed
        assert "extra" not in parsed

    def test_extra_fields(self):
        record = _record("Company search")
        record.username = "u1"
        record.filters = {"name": "net"}

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["extra"] == {"username": "u1", "filters": {"name": "net"}}

    def test_extra_fields_disabled(self):
        record = _record()
        record.username = "u1"

        parsed = json.loads(JSONFormatter(include_extra=False).format(record))

        assert "extra" not in parsed

    def test_unserializable_extra_becomes_string(self):
        record = _record()
        record.thing = object()

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["extra"]["thing"].startswith("<object object")

    def test_exception_info(self):
        try:
            raise ValueError("bad filter")
        except ValueError:
            exc_info = sys.exc_info()

        parsed = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "bad filter"
        assert any("ValueError" in line for line in parsed["exception"]["traceback"])


class TestConsoleFormatter:
    def test_contains_level_and_message(self):
        output = ConsoleFormatter().format(_record(level=logging.WARNING))

        assert "WARNING" in output
        assert "test.logger" in output
        assert output.endswith("Test message")
        assert ConsoleFormatter.COLORS["WARNING"] in output


class TestLoggerSetup:
    def test_log_format_override(self):
        with patch.object(settings, "log_format", "json"):
            assert isinstance(build_formatter(), JSONFormatter)
        with patch.object(settings, "log_format", "console"):
            assert isinstance(build_formatter(), ConsoleFormatter)

    def test_production_defaults_to_json(self):
        with patch.object(settings, "log_format", None), patch.object(
            settings, "environment", "production"
        ):
            assert isinstance(build_formatter(), JSONFormatter)

    def test_get_logger_returns_named_logger(self):
        assert get_logger("jobly.services").name == "jobly.services"
