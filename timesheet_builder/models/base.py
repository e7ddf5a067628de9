"""Base model for all data models in the timesheet builder.

This module provides a base Pydantic model with the common configuration
shared by entries, catalog items and the persisted session.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation on assignment, so form edits are checked as they happen
    - Rejection of unknown fields
    - Serialization to/from dictionaries via ``model_dump``/``model_validate``

    Example:
        >>> class Engineer(BaseDataModel):
        ...     name: str
        >>> Engineer(name="Jane Doe").model_dump()
        {'name': 'Jane Doe'}
    """

    model_config = ConfigDict(
        validate_assignment=True,
        strict=False,
        extra="forbid",
        frozen=False,
    )
