"""Output formatting utilities for CLI."""

from typing import Dict, List, Sequence, Tuple

import click


def format_success(message: str) -> str:
    """Format a success message with green color.

    Args:
        message: The success message to format

    Returns:
        Formatted success message with color
    """
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_field_errors(errors: Dict[str, str]) -> str:
    """Render an entry's error map as ``field: message`` pairs.

    Args:
        errors: Mapping of field name to error message

    Returns:
        Semicolon separated pairs, or an empty string when there are no errors
    """
    return "; ".join(f"{field}: {message}" for field, message in errors.items())


def format_key_values(pairs: Sequence[Tuple[str, str]]) -> str:
    """Format labelled values as aligned summary lines.

    Example:
        >>> print(format_key_values([("Entries", "3"), ("Total", "5.50")]))
        Entries:  3
        Total:    5.50
    """
    if not pairs:
        return ""
    # label, colon and two spaces
    width = max(len(label) for label, _ in pairs) + 3
    return "\n".join(f"{label + ':':<{width}}{value}" for label, value in pairs)


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 40) -> str:
    """Format data as a table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column (default: 40)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(col_widths):
                col_widths[i] = max(col_widths[i], len(str(cell)))

    col_widths = [min(w, max_width) for w in col_widths]

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    def render_row(cells: Sequence[str]) -> str:
        formatted = []
        for i, width in enumerate(col_widths):
            cell = str(cells[i]) if i < len(cells) else ""
            formatted.append(f" {cell[:width]:<{width}} ")
        return "|" + "|".join(formatted) + "|"

    table_lines = [separator, render_row(headers), separator]
    if rows:
        table_lines.extend(render_row(row) for row in rows)
        table_lines.append(separator)

    return "\n".join(table_lines)
