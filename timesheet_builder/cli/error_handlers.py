"""Error types and exit codes shared by the CLI commands."""

import logging
import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from timesheet_builder.cli.utils.formatters import format_error, format_warning

logger = logging.getLogger(__name__)

EXIT_ABORTED = 130
EXIT_UNEXPECTED = 255


class CLIError(Exception):
    """User-facing failure; ``label`` and ``exit_code`` are set per subclass."""

    label = "Error"
    exit_code = 1

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Args:
            message: Error message to display
            recovery_hint: Command or action that gets the user unstuck
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to settings, the session file or the catalog file."""

    label = "Configuration Error"
    exit_code = 1


class DataValidationError(CLIError):
    """Error related to entry values or a missing engineer/week selection."""

    label = "Data Validation Error"
    exit_code = 3


class ProcessingError(CLIError):
    """Error related to writing export artifacts."""

    label = "Processing Error"
    exit_code = 4


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic ValidationError as ``field: message`` pairs."""
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "value"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def _report_unexpected(error: Exception, debug: bool) -> None:
    logger.exception("Unexpected error in CLI command")
    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
    click.echo(str(error), err=True)

    if not debug:
        click.echo(
            format_warning("\nRun with --debug flag for full stack trace"), err=True
        )
        return

    click.echo("\nFull stack trace:", err=True)
    trace = traceback.format_exception(type(error), error, error.__traceback__)
    click.echo("".join(trace), err=True)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Print ``error`` for the user and return the process exit code.

    Returns:
        The error's ``exit_code`` for CLIError subclasses (1 configuration,
        3 data, 4 processing), 130 for a cancelled prompt and 255 otherwise.
    """
    if isinstance(error, CLIError):
        click.echo(format_error(f"{error.label}: {error.message}"), err=True)
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"), err=True)
        return error.exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return EXIT_ABORTED

    _report_unexpected(error, debug)
    return EXIT_UNEXPECTED


class _ErrorHandler:
    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self) -> "_ErrorHandler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # click's own exits and usage errors keep their exit codes
        if exc_val is None or isinstance(
            exc_val, (click.exceptions.Exit, click.ClickException)
        ):
            return False
        if not isinstance(exc_val, Exception):
            return False
        sys.exit(handle_cli_error(exc_val, self.show_debug))


def with_error_handling(debug: bool = False) -> _ErrorHandler:
    """
    Turn exceptions raised inside the block into a message and exit code.

    Example:
        @click.command()
        @pass_state
        def status(state):
            with with_error_handling(state.debug):
                session = state.store.load()
    """
    return _ErrorHandler(debug)
