"""Centralized logging configuration for the timesheet builder."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from timesheet_builder.config.settings import TimesheetConfig

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_FORMATS = ("standard", "json")

# LogRecord attributes that are not user-supplied context
_RESERVED_RECORD_FIELDS = set(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields added through ``extra={...}`` or an active ``LogContext``."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_RECORD_FIELDS and not key.startswith("_")
    }


class ContextFormatter(logging.Formatter):
    """Plain text lines with the structured fields appended.

    Example output:
        2026-01-26 09:00:00 - INFO - timesheet_builder.cli.commands.export -
        Exported 2 entries [engineer=Jane Doe week=5]
    """

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        fields = extra_fields(record)
        if fields:
            line += " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"
        return line


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON, structured fields included.

        Args:
            record: Log record to format

        Returns:
            JSON string representation of log record
        """
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(extra_fields(record))
        return json.dumps(log_data, default=str)


@dataclass
class LoggingConfig:
    """
    Where log records go and how they look.

    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (any case)
        log_format: ``standard`` text lines or one ``json`` object per line
        log_file: Path to a log file, or None for console only
        enable_console: Write records to stderr
    """

    log_level: str = "WARNING"
    log_format: str = "standard"
    log_file: Optional[str] = None
    enable_console: bool = True

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Must be one of {', '.join(_LEVELS)}"
            )
        if self.log_format not in _FORMATS:
            raise ValueError(
                f"Invalid log format: {self.log_format}. "
                f"Must be one of {', '.join(_FORMATS)}"
            )

    @classmethod
    def from_env(cls, log_level: Optional[str] = None) -> "LoggingConfig":
        """
        Create configuration from environment variables.

        Environment Variables:
            LOG_LEVEL: Log level (default: WARNING), unless ``log_level`` is given
            LOG_FORMAT: ``standard`` or ``json`` (default: standard)
            LOG_FILE: Log file path (default: none)
            LOG_CONSOLE: Write to stderr (default: true)
        """
        return cls(
            log_level=log_level or os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=os.getenv("LOG_FILE") or None,
            enable_console=os.getenv("LOG_CONSOLE", "true").lower() == "true",
        )

    @classmethod
    def from_settings(
        cls, settings: "TimesheetConfig", log_level: Optional[str] = None
    ) -> "LoggingConfig":
        """Use the settings' level unless the command line gave one.

        Format, file and console output still come from the environment.
        """
        return cls.from_env(log_level=log_level or settings.log_level)


def _clear_root_handlers(root_logger: logging.Logger) -> None:
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if config.enable_console:
        handlers.append(logging.StreamHandler())
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger according to ``config``.

    Existing root handlers are removed first, so each CLI invocation ends up
    with exactly one handler per destination.

    Args:
        config: LoggingConfig instance
    """
    from timesheet_builder.utils.logging_utils import ContextFilter

    root_logger = logging.getLogger()
    _clear_root_handlers(root_logger)

    level = getattr(logging, config.log_level)
    root_logger.setLevel(level)

    formatter: logging.Formatter = (
        JSONFormatter() if config.log_format == "json" else ContextFormatter()
    )
    context_filter = ContextFilter()
    for handler in _build_handlers(config):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def reset_logging() -> None:
    """Remove all root handlers and restore the default WARNING level."""
    root_logger = logging.getLogger()
    _clear_root_handlers(root_logger)
    root_logger.setLevel(logging.WARNING)
