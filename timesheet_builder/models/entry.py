"""Timesheet entry model.

This module defines the TimesheetEntry model which represents one logged
work item of an engineer inside a selected ISO week. Values are kept the way
the entry form holds them (strings, empty meaning "not filled in yet"), so a
half-completed entry is still a valid model; completeness is the job of the
validators.
"""

import datetime as dt
import uuid
from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from timesheet_builder.calculators.time_utils import is_valid_time_option
from timesheet_builder.models.base import BaseDataModel

# Fields a user fills in on the entry form, in form order
EDITABLE_FIELDS = (
    "date",
    "project",
    "scope",
    "service_category",
    "service_type",
    "start_time",
    "end_time",
    "travel_time",
    "comments",
)


def new_entry_id() -> str:
    """Generate an opaque unique entry identifier."""
    return uuid.uuid4().hex


class TimesheetEntry(BaseDataModel):
    """Represents a single timesheet entry.

    Attributes:
        id: Opaque unique identifier, immutable after creation
        week: ISO week number (1-52) the entry was created in
        date: Work date as ``YYYY-MM-DD`` or empty
        project: Project code or empty
        scope: Scope of the project, the ``"-"`` sentinel, or empty
        service_category: Service category name or empty
        service_type: Service type of the category or empty
        start_time: ``HH:MM`` on the 15-minute grid or empty
        end_time: ``HH:MM`` on the 15-minute grid or empty
        travel_time: Travel hours as entered (decimal text) or empty
        comments: Free text

    Example:
        >>> entry = TimesheetEntry(week=5, date="2026-01-27", start_time="09:00")
        >>> entry.end_time
        ''
    """

    id: str = Field(default_factory=new_entry_id, frozen=True, min_length=1)
    week: int = Field(..., ge=1, le=52, description="ISO week number")
    date: str = Field("", description="Work date (YYYY-MM-DD)")
    project: str = Field("", description="Project code")
    scope: str = Field("", description="Project scope")
    service_category: str = Field("", description="Service category")
    service_type: str = Field("", description="Service type")
    start_time: str = Field("", description="Start time (HH:MM)")
    end_time: str = Field("", description="End time (HH:MM)")
    travel_time: str = Field("", description="Travel time in decimal hours")
    comments: str = Field("", description="Free text comments")

    @field_validator(
        "project",
        "scope",
        "service_category",
        "service_type",
        "comments",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat ``None`` as an unfilled form field."""
        return "" if v is None else v

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        """Store dates as ``YYYY-MM-DD`` text.

        ``datetime.date`` objects and strings such as ``2026-1-26`` are
        normalized; compact (``20260126``) and week-date forms are rejected.

        Raises:
            ValueError: If a non-empty value is not a calendar date
        """
        if v is None:
            return ""
        if isinstance(v, dt.datetime):
            return v.date().isoformat()
        if isinstance(v, dt.date):
            return v.isoformat()
        if not isinstance(v, str):
            raise ValueError(f"date must be a string or date, got {type(v).__name__}")
        v = v.strip()
        if not v:
            return v
        try:
            parsed = dt.datetime.strptime(v, "%Y-%m-%d").date()
        except ValueError:
            raise ValueError(f"date must use YYYY-MM-DD format, got {v!r}")
        # one spelling per day; overlap and daily totals compare the text
        return parsed.isoformat()

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_time_slot(cls, v: Any, info) -> str:
        """Ensure clock values sit on the 15-minute grid.

        Raises:
            ValueError: If a non-empty value is not one of the 96 time slots
        """
        if v is None:
            return ""
        if isinstance(v, dt.time):
            v = v.strftime("%H:%M")
        if not isinstance(v, str):
            raise ValueError(
                f"{info.field_name} must be a string, got {type(v).__name__}"
            )
        v = v.strip()
        if v and not is_valid_time_option(v):
            raise ValueError(
                f"{info.field_name} must be a 15-minute slot between "
                f"00:00 and 23:45, got {v!r}"
            )
        return v

    @field_validator("travel_time", mode="before")
    @classmethod
    def stringify_travel_time(cls, v: Any) -> str:
        """Keep travel time as entered; numbers are stored in text form.

        Malformed text is kept as-is and counts as zero in calculations.
        """
        if v is None:
            return ""
        if isinstance(v, bool):
            raise ValueError("travel_time must be a number or text")
        if isinstance(v, (int, float, Decimal)):
            return str(v)
        return v

    def copy_with_new_id(self) -> "TimesheetEntry":
        """Return a field-for-field copy carrying a fresh identifier."""
        data = self.model_dump()
        data["id"] = new_entry_id()
        return TimesheetEntry.model_validate(data)
