"""CLI utility functions."""

from timesheet_builder.cli.utils.formatters import (
    format_error,
    format_field_errors,
    format_info,
    format_key_values,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_error",
    "format_field_errors",
    "format_info",
    "format_key_values",
    "format_success",
    "format_table",
    "format_warning",
]
