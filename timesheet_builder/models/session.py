"""Persisted session state of the timesheet builder.

The session is what the entry form remembers between runs: the selected
engineer and week, whether the user got past the landing step, and all
entries of every week.
"""

from typing import List, Optional

from pydantic import Field, model_validator

from timesheet_builder.models.base import BaseDataModel
from timesheet_builder.models.entry import TimesheetEntry

SESSION_VERSION = 1


class Session(BaseDataModel):
    """Snapshot of the entry form state.

    Attributes:
        version: Document format version
        engineer: Selected engineer, empty when none is selected
        selected_week: Selected ISO week, None when no week is selected
        has_started: Whether the user has started a timesheet
        entries: Entries of every week, in insertion order
    """

    version: int = Field(SESSION_VERSION, ge=1)
    engineer: str = ""
    selected_week: Optional[int] = Field(None, ge=1, le=52)
    has_started: bool = False
    entries: List[TimesheetEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "Session":
        """Entry ids must be unique across the whole session.

        Raises:
            ValueError: If two entries share an id
        """
        seen = set()
        for entry in self.entries:
            if entry.id in seen:
                raise ValueError(f"Duplicate entry id: {entry.id}")
            seen.add(entry.id)
        return self

    def clear(self) -> None:
        """Forget the selection and every entry (the "reset all" action)."""
        self.engineer = ""
        self.selected_week = None
        self.entries = []
