"""CLI commands."""

from timesheet_builder.cli.commands.entries import (
    add_entry,
    delete_entry,
    duplicate_entry,
    reset_entries,
    update_entry,
)
from timesheet_builder.cli.commands.export import email_draft, export_csv
from timesheet_builder.cli.commands.report import list_entries, show_summary
from timesheet_builder.cli.commands.session import (
    change_week,
    list_weeks,
    show_status,
    start_timesheet,
)
from timesheet_builder.cli.commands.validate import validate_week

__all__ = [
    "add_entry",
    "change_week",
    "delete_entry",
    "duplicate_entry",
    "email_draft",
    "export_csv",
    "list_entries",
    "list_weeks",
    "reset_entries",
    "show_status",
    "show_summary",
    "start_timesheet",
    "update_entry",
    "validate_week",
]
