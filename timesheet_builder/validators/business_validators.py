"""Business rule validators for timesheet entries.

These rules look beyond a single field: overlap between entries booked on
the same day, and advisories for unusually long days.
"""

from typing import Iterable

from timesheet_builder.aggregators.weekly_aggregator import daily_hours_by_date
from timesheet_builder.calculators.entry_calculator import (
    DailyHoursAdvisory,
    calculate_duration,
    classify_daily_hours,
    is_unreadable_travel_time,
)
from timesheet_builder.calculators.time_utils import time_to_index
from timesheet_builder.models.entry import TimesheetEntry
from timesheet_builder.validators.validation_report import ValidationReport


class BusinessRuleValidators:
    """Collection of cross-entry business rule checks."""

    @staticmethod
    def has_overlap(
        entry: TimesheetEntry, siblings: Iterable[TimesheetEntry]
    ) -> bool:
        """Check whether another entry on the same date overlaps this one.

        Intervals are half-open, so ``[09:00, 10:00)`` and ``[10:00, 11:00)``
        touch but do not overlap. Unset times take part in the comparison as
        slot -1, exactly like set ones.

        Args:
            entry: Entry to check
            siblings: Entries of the same week; ``entry`` itself may be included

        Returns:
            True if any sibling with a different id and the same date overlaps
        """
        if not entry.date:
            return False

        start_index = time_to_index(entry.start_time)
        end_index = time_to_index(entry.end_time)

        for other in siblings:
            if other.id == entry.id or other.date != entry.date:
                continue
            other_start = time_to_index(other.start_time)
            other_end = time_to_index(other.end_time)
            if start_index < other_end and end_index > other_start:
                return True

        return False

    @staticmethod
    def validate_entry_hours(entry: TimesheetEntry, report: ValidationReport) -> None:
        """Warn when a single entry books more than a normal day."""
        hours = calculate_duration(entry)
        advisory = classify_daily_hours(hours)
        if advisory is not DailyHoursAdvisory.NONE:
            report.add_warning(
                "hours",
                advisory.message,
                hours,
                entry_id=entry.id,
                date=entry.date or None,
            )

    @staticmethod
    def validate_daily_hours(
        entries: Iterable[TimesheetEntry], report: ValidationReport
    ) -> None:
        """Warn for every date whose summed worked hours exceed the thresholds."""
        for date, hours in daily_hours_by_date(entries).items():
            advisory = classify_daily_hours(hours)
            if advisory is not DailyHoursAdvisory.NONE:
                report.add_warning("daily_hours", advisory.message, hours, date=date)

    @staticmethod
    def validate_travel_time_text(
        entry: TimesheetEntry, report: ValidationReport
    ) -> None:
        """Note travel time text that is not a number and therefore counts as 0."""
        if is_unreadable_travel_time(entry.travel_time):
            report.add_info(
                "travel_time",
                "Not a number; counted as 0 hours",
                entry.travel_time,
                entry_id=entry.id,
                date=entry.date or None,
            )
