"""Validation layer for timesheet entries."""

from timesheet_builder.validators.business_validators import BusinessRuleValidators
from timesheet_builder.validators.field_validators import (
    FieldValidators,
    validate_entry_fields,
)
from timesheet_builder.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)
from timesheet_builder.validators.validator import (
    TimesheetValidator,
    entry_errors,
    has_overlap,
    validate_entry,
)

__all__ = [
    "TimesheetValidator",
    "ValidationReport",
    "ValidationIssue",
    "ValidationSeverity",
    "FieldValidators",
    "BusinessRuleValidators",
    "entry_errors",
    "has_overlap",
    "validate_entry",
    "validate_entry_fields",
]
