"""Tests for faults.logger module.

Covers fault descriptions, the failure() helper used at HTTP boundaries,
the text and JSON renderings of fault records, and settings-driven loggers.
"""

import json
import logging
import os
import tempfile
from typing import Any, List, Tuple
from unittest import mock

import pytest

import faults
from faults import FieldViolation, QuotaViolation
from faults.config import LogSettings
from faults.logger import (
    LEVELS,
    JsonFormatter,
    Logger,
    StructuredLogger,
    TextFormatter,
    describe,
    get_logger,
)


class RecordingLogger(Logger):
    """In-memory Logger used to observe calls."""

    def __init__(self):
        self.calls: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.calls.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("critical", message, **kwargs)

    def get_request_id(self) -> str:
        return "not a level"


def _record(fault=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord("test", logging.WARNING, __file__, 1, "request failed", None, None)
    if fault is not None:
        record.fault = fault
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestDescribe:
    """Tests for the fault description attached to log entries."""

    def test_chain_and_outermost_details(self):
        err = faults.with_bad(faults.not_found(), FieldViolation("email", "Invalid"))

        assert describe(err) == {
            "code": "BAD_REQUEST",
            "chain": ["BAD_REQUEST", "NOT_FOUND"],
            "details": {"violations": [{"field": "email", "description": "Invalid"}]},
            "error": "Invalid: resource not found",
        }

    def test_retry_delay_details(self):
        assert describe(faults.unavailable(2))["details"] == {"retry_delay_seconds": 2.0}

    def test_uncategorized(self):
        assert describe(ValueError("boom")) == {
            "code": None,
            "chain": [],
            "details": {},
            "error": "boom",
        }

    def test_none(self):
        assert describe(None)["error"] is None


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        """Test that Logger cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    def test_failure_fields(self):
        """Test that failure() attaches the chain as a fault field."""
        logger = RecordingLogger()
        err = faults.with_aborted(faults.NOT_FOUND)

        logger.failure("lookup failed", err, request_id="abc")

        level, message, fields = logger.calls[0]
        assert level == "error"
        assert message == "lookup failed"
        assert fields["fault"]["code"] == "ABORTED"
        assert fields["fault"]["chain"] == ["ABORTED", "NOT_FOUND"]
        assert fields["fault"]["error"] == "conflict: resource not found"
        assert fields["request_id"] == "abc"

    @pytest.mark.parametrize("level", LEVELS)
    def test_failure_custom_level(self, level):
        logger = RecordingLogger()
        logger.failure("bad input", faults.bad(), level=level)
        assert logger.calls[0][0] == level

    @pytest.mark.parametrize("level", ["get_request_id", "verbose", "WARNING", "_record"])
    def test_failure_rejects_unknown_level(self, level):
        """Test that only the five level names are accepted."""
        logger = RecordingLogger()

        with pytest.raises(ValueError, match="level must be one of"):
            logger.failure("bad input", faults.bad(), level=level)

        assert logger.calls == []


class TestFormatters:
    """Tests for rendering fault records."""

    def test_text_renders_chain_and_violations(self):
        fault = describe(faults.with_bad(faults.not_found(), FieldViolation("email", "Invalid")))

        line = TextFormatter().format(_record(fault, status=400))

        assert "request failed [BAD_REQUEST<-NOT_FOUND]" in line
        assert 'violation="email - Invalid"' in line
        assert 'error="Invalid: resource not found"' in line
        assert line.endswith("status=400")

    def test_text_renders_retry_delay(self):
        line = TextFormatter().format(_record(describe(faults.unavailable(90))))
        assert "[UNAVAILABLE] retry_in=1m30s" in line

    def test_text_renders_uncategorized(self):
        line = TextFormatter().format(_record(describe(ValueError("boom"))))
        assert "[uncategorized] error=boom" in line

    def test_text_without_fault(self):
        line = TextFormatter().format(_record(path="/ok"))
        assert line.endswith("request failed path=/ok")
        assert "[uncategorized]" not in line

    def test_json_nests_fault(self):
        fault = describe(faults.resource_exhausted(QuotaViolation("user:1", "Too many requests")))

        entry = json.loads(JsonFormatter().format(_record(fault, status=429)))

        assert entry["level"] == "WARNING"
        assert entry["fault"]["code"] == "RESOURCE_EXHAUSTED"
        assert entry["fault"]["details"]["violations"][0]["subject"] == "user:1"
        assert entry["status"] == 429
        assert "fault_code" not in entry

    def test_json_without_fault(self):
        entry = json.loads(JsonFormatter().format(_record()))
        assert "fault" not in entry


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_structured_logger_text_format(self, capsys):
        """Test that StructuredLogger outputs text format by default."""
        logger = StructuredLogger(name="test-text")
        logger.info("Test message")

        captured = capsys.readouterr()
        assert "INFO" in captured.out
        assert "Test message" in captured.out
        assert "test-text" in captured.out

    def test_structured_logger_json_format(self, capsys):
        """Test that StructuredLogger can output JSON format."""
        logger = StructuredLogger(name="test-json", settings=LogSettings(format="json"))
        logger.info("Test message")

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "Test message"
        assert log_entry["logger"] == "test-json"

    def test_json_failure_entry(self, capsys):
        """Test that failure() serializes into a nested fault object."""
        logger = StructuredLogger(name="test-json-failure", settings=LogSettings(format="json"))
        err = faults.with_bad(ValueError("nan"), FieldViolation("age", "Must be a number"))

        logger.failure("request failed", err, level="warning", status=400)

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["level"] == "WARNING"
        assert log_entry["fault"] == {
            "code": "BAD_REQUEST",
            "chain": ["BAD_REQUEST"],
            "details": {"violations": [{"field": "age", "description": "Must be a number"}]},
            "error": "Must be a number: nan",
        }
        assert log_entry["status"] == 400

    def test_text_failure_entry(self, capsys):
        logger = StructuredLogger(name="test-text-failure")
        logger.failure("lookup failed", faults.not_found(), level="warning")

        captured = capsys.readouterr()
        assert "[WARNING]" in captured.out
        assert 'lookup failed [NOT_FOUND] error="resource not found"' in captured.out

    def test_respects_level(self, capsys):
        logger = StructuredLogger(name="test-level", settings=LogSettings(level="WARNING"))
        logger.info("Should not appear")
        logger.failure("Should appear", faults.bad(), level="warning")

        captured = capsys.readouterr()
        assert "Should not appear" not in captured.out
        assert "Should appear" in captured.out

    def test_structured_logger_file_output(self):
        """Test that StructuredLogger can write to a file."""
        with tempfile.NamedTemporaryFile(mode="w", delete=False, suffix=".log") as f:
            log_file = f.name

        try:
            logger = StructuredLogger(name="test-file", settings=LogSettings(file=log_file))
            logger.failure("File test message", faults.aborted())

            for handler in logger._logger.handlers:
                handler.flush()

            with open(log_file, "r") as f:
                content = f.read()

            assert "File test message [ABORTED]" in content
        finally:
            os.unlink(log_file)

    def test_structured_logger_handles_reserved_kwargs(self, capsys):
        """Test that reserved kwargs are prefixed to avoid conflicts."""
        logger = StructuredLogger(name="test-reserved", settings=LogSettings(format="json"))
        logger.info("Test", name="should be prefixed")

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert "_name" in log_entry


class TestGetLogger:
    """Tests for the get_logger factory function."""

    def test_returns_logger(self):
        assert isinstance(get_logger("test-factory"), Logger)

    def test_explicit_settings(self, capsys):
        logger = get_logger("test-explicit", LogSettings(level="ERROR"))
        logger.warning("Should not appear")
        logger.error("Should appear")

        captured = capsys.readouterr()
        assert "Should not appear" not in captured.out
        assert "Should appear" in captured.out

    def test_reads_env_level(self, capsys):
        """Test that get_logger reads log level from environment."""
        with mock.patch.dict(os.environ, {"TEST_PROJECT_LOG_LEVEL": "WARNING"}):
            logger = get_logger("test-project")
            logger.info("Should not appear")
            logger.warning("Should appear")

        captured = capsys.readouterr()
        assert "Should not appear" not in captured.out
        assert "Should appear" in captured.out

    def test_reads_env_format(self, capsys):
        """Test that get_logger reads the output format from environment."""
        with mock.patch.dict(os.environ, {"TEST_JSON_ENV_LOG_FORMAT": "json"}):
            logger = get_logger("test-json-env")
            logger.failure("JSON env test", faults.not_found(), level="info")

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["message"] == "JSON env test"
        assert log_entry["fault"]["code"] == "NOT_FOUND"

    def test_env_prefix_conversion(self):
        """Test that logger names are correctly converted to env prefixes."""
        with mock.patch.dict(os.environ, {"BILLING_API_LOG_LEVEL": "DEBUG"}):
            logger = get_logger("billing-api")
            assert logger._logger.level == logging.DEBUG
