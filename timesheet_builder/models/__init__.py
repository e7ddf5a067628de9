"""Data models for the timesheet builder.

This package contains Pydantic models for all business entities:
- BaseDataModel: Base class with common configuration
- TimesheetEntry: One logged work item inside a week
- Project / Catalog: Selectable projects, scopes and service categories
"""

from timesheet_builder.models.base import BaseDataModel
from timesheet_builder.models.catalog import NO_SCOPE, Catalog, Project, default_catalog
from timesheet_builder.models.entry import EDITABLE_FIELDS, TimesheetEntry
from timesheet_builder.models.session import Session

__all__ = [
    "BaseDataModel",
    "Catalog",
    "EDITABLE_FIELDS",
    "NO_SCOPE",
    "Project",
    "Session",
    "TimesheetEntry",
    "default_catalog",
]
