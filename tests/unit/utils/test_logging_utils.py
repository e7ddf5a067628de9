"""Tests for structured logging utilities."""

import json
import logging

import pytest

from timesheet_builder.config.logging_config import (
    LoggingConfig,
    configure_logging,
    reset_logging,
)
from timesheet_builder.utils.logging_utils import (
    LogContext,
    get_log_context,
    log_function_call,
)


@pytest.fixture
def json_log_file(tmp_path):
    """Configure JSON logging into a temporary file."""
    log_file = tmp_path / "test.log"
    configure_logging(
        LoggingConfig(
            log_level="DEBUG",
            log_format="json",
            log_file=str(log_file),
            enable_console=False,
        )
    )
    yield log_file
    reset_logging()


def read_records(log_file):
    for handler in logging.getLogger().handlers:
        handler.flush()
    return [
        json.loads(line)
        for line in log_file.read_text(encoding="utf-8").splitlines()
        if line
    ]


class TestLogContext:
    """Test LogContext context manager."""

    def test_context_adds_fields_to_logs(self, json_log_file):
        """Test context manager adds fields to log records."""
        logger = logging.getLogger("test_module")

        with LogContext(engineer="Jane Doe", week=5):
            logger.info("Test message")

        record = read_records(json_log_file)[0]
        assert record["engineer"] == "Jane Doe"
        assert record["week"] == 5

    def test_context_nesting(self):
        """Test nested contexts merge and restore fields."""
        with LogContext(engineer="Jane Doe"):
            with LogContext(week=5):
                assert get_log_context() == {"engineer": "Jane Doe", "week": 5}
            assert get_log_context() == {"engineer": "Jane Doe"}
        assert get_log_context() == {}

    def test_empty_values_are_not_bound(self):
        """Test that an unset engineer or week adds no fields."""
        with LogContext(engineer="", week=None, command="list"):
            assert get_log_context() == {"command": "list"}

    def test_context_restored_after_exception(self):
        """Test that fields are removed even when the block raises."""
        with pytest.raises(RuntimeError):
            with LogContext(week=7):
                raise RuntimeError("fail")
        assert get_log_context() == {}

    def test_fields_absent_outside_context(self, json_log_file):
        """Test records logged outside a context carry no context fields."""
        logging.getLogger("test_module").info("Plain message")

        record = read_records(json_log_file)[0]
        assert "engineer" not in record


class TestLogFunctionCall:
    """Test log_function_call decorator."""

    def test_logs_entry_and_exit(self, json_log_file):
        """Test the decorator logs entering and exiting."""

        @log_function_call
        def add(a, b):
            return a + b

        assert add(2, 3) == 5

        messages = [r["message"] for r in read_records(json_log_file)]
        assert messages[0] == "Entering add"
        assert messages[1].startswith("Exiting add (")
        assert messages[1].endswith(" ms)")

    def test_include_args(self, json_log_file):
        """Test arguments are logged when requested."""

        @log_function_call(include_args=True, level="INFO")
        def greet(name, punctuation="!"):
            return f"Hello {name}{punctuation}"

        greet("Jane", punctuation="?")

        records = read_records(json_log_file)
        assert records[0]["message"] == (
            "Entering greet with args: 'Jane', punctuation='?'"
        )
        assert records[0]["level"] == "INFO"

    def test_exception_logged_and_reraised(self, json_log_file):
        """Test exceptions are logged with traceback and propagate."""

        @log_function_call
        def fail():
            raise ValueError("broken")

        with pytest.raises(ValueError, match="broken"):
            fail()

        error = [r for r in read_records(json_log_file) if r["level"] == "ERROR"][0]
        assert "Exception in fail: ValueError: broken" == error["message"]
        assert "exception" in error

    def test_expected_exception_has_no_traceback(self, json_log_file):
        """Test that expected exceptions are logged quietly and re-raised."""

        @log_function_call(expected=(KeyError,))
        def lookup():
            raise KeyError("missing")

        with pytest.raises(KeyError):
            lookup()

        records = read_records(json_log_file)
        assert [r["level"] for r in records] == ["DEBUG", "DEBUG"]
        assert records[1]["message"] == "lookup failed: 'missing'"
        assert "exception" not in records[1]

    def test_preserves_metadata(self):
        """Test functools.wraps keeps the wrapped name and docstring."""

        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
