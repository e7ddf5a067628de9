"""Catalog models for the selectable values of the entry form.

The catalog holds the engineers that can submit timesheets, the projects
(each with its own scopes) and the service categories (each with its own
service types). Scope and service type choices depend on the selected
project and category respectively.
"""

from typing import Dict, List, Optional

from pydantic import Field, field_validator, model_validator

from timesheet_builder.models.base import BaseDataModel
from timesheet_builder.models.entry import TimesheetEntry

# Scope value that is valid for every project
NO_SCOPE = "-"


class Project(BaseDataModel):
    """Represents a project engineers can book time against.

    Attributes:
        code: Unique project code (e.g., "PRJ-1001")
        name: Human readable project name
        scopes: Scopes time can be booked to within the project
    """

    code: str = Field(..., min_length=1, description="Unique project code")
    name: str = Field(..., min_length=1, description="Project name")
    scopes: List[str] = Field(default_factory=list, description="Project scopes")

    @field_validator("code", "name")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Validate that string fields are not empty or whitespace only.

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()

    @property
    def scope_options(self) -> List[str]:
        """Scopes offered for this project, including the ``"-"`` sentinel."""
        return [s for s in self.scopes if s != NO_SCOPE] + [NO_SCOPE]


class Catalog(BaseDataModel):
    """The fixed set of choices offered by the entry form.

    Example:
        >>> catalog = Catalog(
        ...     engineers=["Jane Doe"],
        ...     projects=[Project(code="P1", name="Pilot", scopes=["Design"])],
        ...     service_categories={"Engineering": ["Modelling"]},
        ... )
        >>> catalog.scopes_for("P1")
        ['Design', '-']
    """

    engineers: List[str] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    service_categories: Dict[str, List[str]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_unique_project_codes(self) -> "Catalog":
        """Project codes identify projects, so they must be unique.

        Raises:
            ValueError: If two projects share a code
        """
        seen = set()
        for project in self.projects:
            if project.code in seen:
                raise ValueError(f"Duplicate project code: {project.code}")
            seen.add(project.code)
        return self

    @property
    def project_codes(self) -> List[str]:
        return [p.code for p in self.projects]

    def find_project(self, code: str) -> Optional[Project]:
        for project in self.projects:
            if project.code == code:
                return project
        return None

    def scopes_for(self, project_code: str) -> List[str]:
        """Scopes selectable for ``project_code``.

        An unknown project offers no scopes at all.
        """
        project = self.find_project(project_code)
        if project is None:
            return []
        return project.scope_options

    def service_types_for(self, category: str) -> List[str]:
        return list(self.service_categories.get(category, []))

    def engineer_label(self, name: str) -> str:
        """Display label used by the engineer selector, e.g. ``Jane Doe (ENG_001)``.

        Raises:
            ValueError: If the engineer is not part of the catalog
        """
        index = self.engineers.index(name)
        return f"{name} (ENG_{index + 1:03d})"

    def membership_errors(self, entry: TimesheetEntry) -> Dict[str, str]:
        """Report filled-in entry values that the catalog does not offer.

        Empty values are skipped; the required-field check reports them.

        Args:
            entry: Entry to check

        Returns:
            Mapping of field name to error message
        """
        errors: Dict[str, str] = {}

        if entry.project and self.find_project(entry.project) is None:
            errors["project"] = f"Unknown project: {entry.project}"
        if entry.scope and entry.scope not in self.scopes_for(entry.project):
            errors["scope"] = f"Scope not available for project: {entry.scope}"
        if (
            entry.service_category
            and entry.service_category not in self.service_categories
        ):
            errors["service_category"] = (
                f"Unknown service category: {entry.service_category}"
            )
        if entry.service_type and entry.service_type not in self.service_types_for(
            entry.service_category
        ):
            errors["service_type"] = (
                f"Service type not available for category: {entry.service_type}"
            )

        return errors


def default_catalog() -> Catalog:
    """Return the built-in catalog used when no catalog file is configured."""
    return Catalog(
        engineers=[
            "Jane Doe",
            "John Smith",
            "Maria Silva",
            "Carlos Pereira",
            "Ana Costa",
        ],
        projects=[
            Project(
                code="PRJ-1001",
                name="Offshore Platform Retrofit",
                scopes=["Structural", "Piping", "Electrical"],
            ),
            Project(
                code="PRJ-1002",
                name="Substation Upgrade",
                scopes=["Protection", "Commissioning"],
            ),
            Project(
                code="PRJ-1003",
                name="Pipeline Integrity Study",
                scopes=["Inspection", "Reporting"],
            ),
            Project(code="INT-0001", name="Internal / Overhead", scopes=[]),
        ],
        service_categories={
            "Engineering": ["Design", "Calculation", "Drafting", "Review"],
            "Field Services": ["Inspection", "Commissioning", "Site Survey"],
            "Project Management": ["Meetings", "Planning", "Reporting"],
            "Administrative": ["Training", "Internal Tasks"],
        },
    )
