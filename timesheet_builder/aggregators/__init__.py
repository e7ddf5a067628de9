"""Aggregator modules for weekly timesheet totals."""

from timesheet_builder.aggregators.weekly_aggregator import (
    WeeklyTotals,
    aggregate_entries,
    build_daily_hours_table,
    daily_hours_by_date,
)

__all__ = [
    "WeeklyTotals",
    "aggregate_entries",
    "build_daily_hours_table",
    "daily_hours_by_date",
]
