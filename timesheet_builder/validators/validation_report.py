"""Week-wide validation report.

Field errors of each entry are ERROR issues, long-day advisories are
WARNING issues and notes about values that were silently counted as zero are
INFO issues. Only errors make a week invalid.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

if TYPE_CHECKING:
    from timesheet_builder.models.entry import TimesheetEntry


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """A single problem found in a week.

    Attributes:
        severity: The severity level of the issue
        field: Entry field, or ``daily_hours`` for a per-date advisory
        message: The message shown next to the field
        value: The offending value
        entry_id: Entry the issue belongs to, None for per-date issues
        date: Work date the issue refers to
        row: 1-based position of the entry in the week
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any = None
    entry_id: Optional[str] = None
    date: Optional[str] = None
    row: Optional[int] = None

    @property
    def location(self) -> str:
        """Where the issue was found, e.g. ``row 2, 2026-01-27, entry 3f2a9c1d``."""
        parts = []
        if self.row is not None:
            parts.append(f"row {self.row}")
        if self.date:
            parts.append(self.date)
        if self.entry_id:
            parts.append(f"entry {self.entry_id[:8]}")
        return ", ".join(parts)

    def __str__(self) -> str:
        location = f" ({self.location})" if self.location else ""
        return f"[{self.severity.name}] {self.field}: {self.message}{location}"


class ValidationReport:
    """Collects the issues of one week of entries.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("end_time", "End must be after start", "09:00")
        >>> report.add_warning("daily_hours", "Long day: more than 10 hours", 11)
        >>> report.summary()
        '1 error(s), 1 warning(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def count(self, severity: ValidationSeverity) -> int:
        return Counter(issue.severity for issue in self.issues)[severity]

    @property
    def error_count(self) -> int:
        return self.count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self.count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self.count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        return self.error_count == 0

    def has_errors(self) -> bool:
        return not self.is_valid()

    def add(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any = None,
        **location: Any,
    ) -> None:
        """Record an issue; ``location`` takes ``entry_id``, ``date`` and ``row``."""
        self.issues.append(ValidationIssue(severity, field, message, value, **location))

    def add_error(self, field: str, message: str, value: Any = None, **location):
        self.add(ValidationSeverity.ERROR, field, message, value, **location)

    def add_warning(self, field: str, message: str, value: Any = None, **location):
        self.add(ValidationSeverity.WARNING, field, message, value, **location)

    def add_info(self, field: str, message: str, value: Any = None, **location):
        self.add(ValidationSeverity.INFO, field, message, value, **location)

    def add_entry_errors(
        self,
        entry: "TimesheetEntry",
        errors: Mapping[str, str],
        row: Optional[int] = None,
    ) -> None:
        """Add one ERROR issue per field of an entry's error map.

        Args:
            entry: The entry the errors were computed for
            errors: Field name to message, as produced by ``entry_errors``
            row: Position of the entry in the week
        """
        for field, message in errors.items():
            self.add_error(
                field,
                message,
                getattr(entry, field, None),
                entry_id=entry.id,
                date=entry.date or None,
                row=row,
            )

    def filter(
        self, min_severity: ValidationSeverity, exact: bool = False
    ) -> List[ValidationIssue]:
        """Return issues at ``min_severity`` (or above, unless ``exact``)."""
        if exact:
            return [i for i in self.issues if i.severity == min_severity]
        return [i for i in self.issues if i.severity >= min_severity]

    def get_errors(self) -> List[ValidationIssue]:
        return self.filter(ValidationSeverity.ERROR, exact=True)

    def get_warnings(self) -> List[ValidationIssue]:
        return self.filter(ValidationSeverity.WARNING, exact=True)

    def invalid_entry_ids(self) -> List[str]:
        """Ids of entries with at least one error, in the order first reported."""
        ids: List[str] = []
        for issue in self.get_errors():
            if issue.entry_id and issue.entry_id not in ids:
                ids.append(issue.entry_id)
        return ids

    def summary(self) -> str:
        """Counts of errors, warnings and info messages, e.g. ``2 error(s)``."""
        parts = []
        if self.error_count:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count:
            parts.append(f"{self.info_count} info message(s)")
        return ", ".join(parts) or "No issues found"
