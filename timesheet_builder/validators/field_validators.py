"""Field-level validators for timesheet entries.

Each check writes into a mapping of field name to message. The checks run
in a fixed order and a later check overwrites an earlier message for the
same field, so every field carries at most one message:

    required -> time order -> travel time -> week containment
"""

from typing import Dict, Optional

from timesheet_builder.calculators.entry_calculator import parse_travel_time
from timesheet_builder.calculators.time_utils import time_to_index
from timesheet_builder.calculators.week_utils import is_date_in_week
from timesheet_builder.models.entry import TimesheetEntry

REQUIRED_MESSAGE = "Required"
END_BEFORE_START_MESSAGE = "End must be after start"
NEGATIVE_TRAVEL_MESSAGE = "Must be >= 0"
DATE_OUTSIDE_WEEK_MESSAGE = "Date must be inside the week"
OVERLAP_MESSAGE = "Overlapping entry"

REQUIRED_FIELDS = (
    "date",
    "project",
    "scope",
    "service_category",
    "service_type",
    "start_time",
    "end_time",
)


class FieldValidators:
    """Collection of field-level validation methods for a single entry."""

    @staticmethod
    def validate_required(entry: TimesheetEntry, errors: Dict[str, str]) -> None:
        """Flag every required field that is still empty."""
        for field in REQUIRED_FIELDS:
            if not getattr(entry, field):
                errors[field] = REQUIRED_MESSAGE

    @staticmethod
    def validate_time_order(entry: TimesheetEntry, errors: Dict[str, str]) -> None:
        """Flag an end time that is not after the start time.

        Only applies when both times are set.
        """
        start_index = time_to_index(entry.start_time)
        end_index = time_to_index(entry.end_time)
        if start_index >= 0 and end_index >= 0 and end_index <= start_index:
            errors["end_time"] = END_BEFORE_START_MESSAGE

    @staticmethod
    def validate_travel_time(entry: TimesheetEntry, errors: Dict[str, str]) -> None:
        """Flag a negative travel time. Non-numeric text counts as zero."""
        if entry.travel_time and parse_travel_time(entry.travel_time) < 0:
            errors["travel_time"] = NEGATIVE_TRAVEL_MESSAGE

    @staticmethod
    def validate_week_containment(
        entry: TimesheetEntry,
        week_number: Optional[int],
        errors: Dict[str, str],
    ) -> None:
        """Flag a date outside the selected week."""
        if entry.date and week_number and not is_date_in_week(entry.date, week_number):
            errors["date"] = DATE_OUTSIDE_WEEK_MESSAGE


def validate_entry_fields(
    entry: TimesheetEntry, week_number: Optional[int]
) -> Dict[str, str]:
    """Run all field checks on an entry.

    Args:
        entry: Entry to validate
        week_number: Selected ISO week, or None when no week is selected

    Returns:
        Mapping of field name to error message; empty when the entry is valid

    Example:
        >>> validate_entry_fields(TimesheetEntry(week=5), 5)["date"]
        'Required'
    """
    errors: Dict[str, str] = {}
    FieldValidators.validate_required(entry, errors)
    FieldValidators.validate_time_order(entry, errors)
    FieldValidators.validate_travel_time(entry, errors)
    FieldValidators.validate_week_containment(entry, week_number, errors)
    return errors
