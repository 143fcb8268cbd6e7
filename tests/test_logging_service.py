"""Tests for the logging service."""

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from io import StringIO
from pathlib import Path
from typing import Any
from unittest.mock import patch

import structlog
from hypothesis import given, settings, strategies as st

from igdb import LoggingService, setup_logging


@contextmanager
def captured_logging(**kwargs: Any) -> Iterator[tuple[LoggingService, StringIO]]:
    """Configure logging into a buffer and restore the defaults afterwards."""
    stream = StringIO()
    service = LoggingService(stream=stream, **kwargs)
    service.configure()
    try:
        yield service, stream
    finally:
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        root_logger.setLevel(logging.WARNING)
        structlog.reset_defaults()


def json_lines(output: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


context_keys = st.text(alphabet="abcdefghijklmnop", min_size=1, max_size=10).map(lambda k: f"ctx_{k}")
context_values = st.one_of(
    st.text(max_size=50),
    st.integers(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.booleans(),
)


class TestLoggingService:
    """Test cases for LoggingService."""

    def test_development_logging_format(self) -> None:
        """Development logging renders readable console lines."""
        with captured_logging(environment="development") as (service, stream):
            service.get_logger("test").info("test message", key="value")
            output = stream.getvalue()

        assert "test message" in output
        assert "key" in output
        assert not output.strip().startswith("{")

    def test_production_logging_format(self) -> None:
        """Production logging renders one JSON object per event."""
        with captured_logging(environment="production") as (service, stream):
            service.get_logger("test").info("test message", key="value")
            (parsed,) = json_lines(stream.getvalue())

        assert parsed["event"] == "test message"
        assert parsed["key"] == "value"
        assert parsed["level"] == "info"
        assert parsed["logger"] == "test"
        assert "timestamp" in parsed

    def test_environment_variable_selects_renderer(self) -> None:
        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            service = LoggingService()
        assert not service.is_development

    def test_level_filtering(self) -> None:
        with captured_logging(log_level="WARNING", environment="production") as (service, stream):
            logger = service.get_logger("test")
            logger.info("dropped")
            logger.warning("kept")
            events = [line["event"] for line in json_lines(stream.getvalue())]

        assert events == ["kept"]

    def test_file_logging_setup(self) -> None:
        """File logging writes JSON lines to rotating files."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_dir = Path(temp_dir) / "logs"
            with captured_logging(log_dir=log_dir, environment="development") as (service, _):
                service.get_logger("test").info("test file message", data="test")

                app_log = log_dir / "igdb.log"
                assert app_log.exists()
                assert (log_dir / "error.log").exists()

                parsed = json.loads(app_log.read_text(encoding="utf-8").strip())
                assert parsed["event"] == "test file message"
                assert parsed["data"] == "test"

    def test_error_file_logging(self) -> None:
        """Only errors reach the error log."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_dir = Path(temp_dir)
            with captured_logging(log_level="DEBUG", log_dir=log_dir, environment="production") as (service, _):
                logger = service.get_logger("test")
                logger.info("routine")
                logger.error("test error message", error_code=500)

                (parsed,) = json_lines((log_dir / "error.log").read_text(encoding="utf-8"))

        assert parsed["event"] == "test error message"
        assert parsed["error_code"] == 500
        assert parsed["level"] == "error"


class TestStructuredLoggingProperties:
    """Property-based tests for structured logging consistency."""

    @given(
        log_level=st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
        logger_name=st.text(alphabet="abcdefghijklmnopqrstuvwxyz_.", min_size=1, max_size=30),
        message=st.text(min_size=1, max_size=200),
        context_data=st.dictionaries(keys=context_keys, values=context_values, max_size=5),
    )
    @settings(deadline=None)
    def test_structured_logging_consistency(
        self,
        log_level: str,
        logger_name: str,
        message: str,
        context_data: dict[str, str | int | float | bool],
    ) -> None:
        """**Property: structured logging consistency**

        For any event, the JSON output carries the message, level, logger name
        and every key/value pair bound to the event.
        """
        with captured_logging(log_level="DEBUG", environment="production") as (service, stream):
            logger = service.get_logger(logger_name)
            getattr(logger, log_level.lower())(message, **context_data)
            (parsed,) = json_lines(stream.getvalue())

        assert parsed["event"] == message
        assert parsed["level"] == log_level.lower()
        assert parsed["logger"] == logger_name
        assert "T" in parsed["timestamp"]
        for key, value in context_data.items():
            assert parsed[key] == value

    @given(
        error_message=st.text(alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd")), min_size=1, max_size=50),
        exception_type=st.sampled_from([ValueError, RuntimeError, TypeError, OSError]),
    )
    @settings(deadline=None)
    def test_error_logging_completeness(self, error_message: str, exception_type: type[Exception]) -> None:
        """**Property: error logging completeness**

        For any logged exception, the JSON output includes the rendered
        traceback with the exception type and message.
        """
        with captured_logging(environment="production") as (service, stream):
            logger = service.get_logger("test")
            try:
                raise exception_type(error_message)
            except exception_type:
                logger.error("Request failed", exc_info=True, error_type=exception_type.__name__)
            (parsed,) = json_lines(stream.getvalue())

        assert parsed["level"] == "error"
        assert parsed["error_type"] == exception_type.__name__
        assert "Traceback" in parsed["exception"]
        assert exception_type.__name__ in parsed["exception"]
        assert error_message in parsed["exception"]


def test_setup_logging_function() -> None:
    """Test the setup_logging convenience function."""
    stream = StringIO()
    service = setup_logging(log_level="DEBUG", environment="production", stream=stream)
    try:
        assert isinstance(service, LoggingService)
        assert service.environment == "production"

        service.get_logger("test_setup").info("setup test", component="test")
        (parsed,) = json_lines(stream.getvalue())
        assert parsed["event"] == "setup test"
        assert parsed["component"] == "test"
    finally:
        for handler in logging.getLogger().handlers[:]:
            handler.close()
            logging.getLogger().removeHandler(handler)
        structlog.reset_defaults()
