"""Main validator orchestrator for timesheet validation.

This module combines the field checks and the business rules into the
per-entry error map shown next to each entry, and into a week-wide
ValidationReport.
"""

import logging
from typing import Dict, List, Optional, Sequence

from timesheet_builder.models.entry import TimesheetEntry
from timesheet_builder.validators.business_validators import BusinessRuleValidators
from timesheet_builder.validators.field_validators import (
    OVERLAP_MESSAGE,
    validate_entry_fields,
)
from timesheet_builder.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


def validate_entry(
    entry: TimesheetEntry, week_number: Optional[int]
) -> Dict[str, str]:
    """Return the field errors of ``entry`` within ``week_number``."""
    return validate_entry_fields(entry, week_number)


def has_overlap(entry: TimesheetEntry, siblings: Sequence[TimesheetEntry]) -> bool:
    """Return True if ``entry`` overlaps another entry of the same date."""
    return BusinessRuleValidators.has_overlap(entry, siblings)


def entry_errors(
    entry: TimesheetEntry,
    week_number: Optional[int],
    siblings: Sequence[TimesheetEntry],
) -> Dict[str, str]:
    """Merge field errors and the overlap check for one entry.

    An overlap always puts ``"Overlapping entry"`` on ``start_time``,
    replacing any other message for that field.

    Args:
        entry: Entry to check
        week_number: Selected ISO week
        siblings: Filtered entries of the selected week

    Returns:
        Mapping of field name to error message
    """
    errors = validate_entry(entry, week_number)
    if has_overlap(entry, siblings):
        errors["start_time"] = OVERLAP_MESSAGE
    return errors


class TimesheetValidator:
    """Validates the entries of a selected week.

    Example:
        >>> validator = TimesheetValidator()
        >>> report = validator.validate_week(entries, week_number=5)
        >>> if not report.is_valid():
        ...     print(report.summary())
    """

    def validate_entries(
        self,
        entries: Sequence[TimesheetEntry],
        week_number: Optional[int],
    ) -> Dict[str, Dict[str, str]]:
        """Compute the error map of every entry.

        Returns:
            Mapping of entry id to its field errors; valid entries map to {}
        """
        return {
            entry.id: entry_errors(entry, week_number, entries) for entry in entries
        }

    def validate_week(
        self,
        entries: Sequence[TimesheetEntry],
        week_number: Optional[int],
        check_advisories: bool = True,
    ) -> ValidationReport:
        """Validate a week of entries into a single report.

        Field errors become ERROR issues. Daily-hours advisories become
        WARNING issues and unreadable travel times INFO issues; neither makes
        the report invalid.

        Args:
            entries: Filtered entries of the selected week
            week_number: Selected ISO week
            check_advisories: Whether to add the warnings and info notes

        Returns:
            ValidationReport with all issues found
        """
        report = ValidationReport()
        per_entry = self.validate_entries(entries, week_number)

        for row, entry in enumerate(entries, start=1):
            report.add_entry_errors(entry, per_entry[entry.id], row=row)
            if check_advisories:
                BusinessRuleValidators.validate_entry_hours(entry, report)
                BusinessRuleValidators.validate_travel_time_text(entry, report)

        if check_advisories:
            BusinessRuleValidators.validate_daily_hours(entries, report)

        logger.info(f"Validated {len(entries)} entries: {report.summary()}")
        return report

    def invalid_entry_ids(
        self,
        entries: Sequence[TimesheetEntry],
        week_number: Optional[int],
    ) -> List[str]:
        """Return the ids of entries carrying at least one field error."""
        report = self.validate_week(entries, week_number, check_advisories=False)
        return report.invalid_entry_ids()
