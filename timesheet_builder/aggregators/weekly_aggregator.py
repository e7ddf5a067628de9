"""Weekly aggregation of timesheet entries.

This module sums the derived hours of the entries of a selected week and
breaks worked hours down by day for the summary view and the daily-hours
advisories. Totals are always recomputed from the entries passed in; nothing
is cached between calls.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List

import pandas as pd

from timesheet_builder.calculators.entry_calculator import (
    calculate_duration,
    calculate_total,
    parse_travel_time,
)
from timesheet_builder.models.entry import TimesheetEntry

logger = logging.getLogger(__name__)

TOTAL_COLUMN = "Total"
NO_PROJECT_LABEL = "(no project)"


@dataclass
class WeeklyTotals:
    """Aggregated hours of the entries of one week.

    Attributes:
        hours_sum: Sum of worked hours (end - start) over all entries
        travel_sum: Sum of travel time over all entries
        total_sum: Sum of worked hours plus travel time
        projects: Distinct non-empty project codes, in first-seen order
        entry_count: Number of entries aggregated

    Example:
        >>> totals = WeeklyTotals(
        ...     hours_sum=Decimal("5.00"),
        ...     travel_sum=Decimal("0.5"),
        ...     total_sum=Decimal("5.50"),
        ...     projects=["PRJ-1001"],
        ...     entry_count=2,
        ... )
        >>> totals.project_count
        1
    """

    hours_sum: Decimal = Decimal("0")
    travel_sum: Decimal = Decimal("0")
    total_sum: Decimal = Decimal("0")
    projects: List[str] = field(default_factory=list)
    entry_count: int = 0

    @property
    def project_count(self) -> int:
        return len(self.projects)


def aggregate_entries(entries: Iterable[TimesheetEntry]) -> WeeklyTotals:
    """Aggregate durations, travel and totals of a week's entries.

    Args:
        entries: Filtered entries of the selected week

    Returns:
        WeeklyTotals for the entries
    """
    totals = WeeklyTotals()

    for entry in entries:
        totals.hours_sum += calculate_duration(entry)
        totals.travel_sum += parse_travel_time(entry.travel_time)
        totals.total_sum += calculate_total(entry)
        if entry.project and entry.project not in totals.projects:
            totals.projects.append(entry.project)
        totals.entry_count += 1

    logger.debug(
        f"Aggregated {totals.entry_count} entries: "
        f"{totals.total_sum} total hours across {totals.project_count} project(s)"
    )
    return totals


def daily_hours_by_date(entries: Iterable[TimesheetEntry]) -> Dict[str, Decimal]:
    """Sum worked hours per calendar date.

    Entries without a date are not attributed to any day.

    Returns:
        Mapping of ISO date to worked hours, in ascending date order
    """
    by_date: Dict[str, Decimal] = defaultdict(Decimal)
    for entry in entries:
        if entry.date:
            by_date[entry.date] += calculate_duration(entry)
    return dict(sorted(by_date.items()))


def build_daily_hours_table(entries: Iterable[TimesheetEntry]) -> pd.DataFrame:
    """Build a date-by-project matrix of worked hours.

    Rows are dates, columns are project codes plus a trailing ``Total``
    column. Cells without bookings are 0.

    Example:
        >>> table = build_daily_hours_table(entries)
        >>> table.loc["2026-01-26", "Total"]
        8.0
    """
    records = [
        {
            "date": entry.date,
            "project": entry.project or NO_PROJECT_LABEL,
            "hours": float(calculate_duration(entry)),
        }
        for entry in entries
        if entry.date
    ]

    if not records:
        logger.debug("No dated entries, returning empty daily hours table")
        return pd.DataFrame()

    df = pd.DataFrame.from_records(records)
    table = df.pivot_table(
        index="date",
        columns="project",
        values="hours",
        aggfunc="sum",
        fill_value=0.0,
    ).sort_index()
    table.columns.name = None
    table.index.name = "Date"
    table[TOTAL_COLUMN] = table.sum(axis=1)

    logger.debug(f"Built daily hours table with {len(table)} day(s)")
    return table
