"""Timesheet Builder: weekly engineer timesheets with CSV and email export."""

__version__ = "1.0.0"
