"""Writers for CSV and email exports of a week's timesheet."""

from timesheet_builder.writers.csv_writer import (
    CSV_HEADERS,
    CSV_MIME_TYPE,
    build_csv_filename,
    render_csv,
    write_csv_file,
)
from timesheet_builder.writers.email_writer import (
    EmailDraft,
    build_clipboard_text,
    build_email_template,
    build_mailto_url,
)

__all__ = [
    "CSV_HEADERS",
    "CSV_MIME_TYPE",
    "EmailDraft",
    "build_clipboard_text",
    "build_csv_filename",
    "build_email_template",
    "build_mailto_url",
    "render_csv",
    "write_csv_file",
]
