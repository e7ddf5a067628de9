"""Catalog reader for loading engineers, projects and service categories.

The expected file structure (JSON):

```
{
  "engineers": ["Jane Doe", "John Smith"],
  "projects": [
    {"code": "PRJ-1001", "name": "Offshore Platform Retrofit",
     "scopes": ["Structural", "Piping"]}
  ],
  "service_categories": {"Engineering": ["Design", "Review"]}
}
```
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from timesheet_builder.models.catalog import Catalog, default_catalog
from timesheet_builder.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file is missing or malformed."""


class CatalogReader:
    """Reader for the catalog of selectable values.

    Without a path the built-in catalog is returned. A parsed file is kept
    in memory until its modification time changes.

    Attributes:
        path: Catalog file, or None for the built-in catalog

    Example:
        >>> reader = CatalogReader()
        >>> reader.read().project_codes[0]
        'PRJ-1001'
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path).expanduser() if path else None
        self._cache: Optional[Catalog] = None
        self._cache_mtime: Optional[float] = None

    @log_function_call(expected=(CatalogError,))
    def read(self) -> Catalog:
        """Read the catalog.

        Returns:
            Parsed catalog

        Raises:
            CatalogError: If the file is missing, not JSON or not a valid catalog
        """
        if self.path is None:
            logger.debug("No catalog file configured, using built-in catalog")
            return default_catalog()

        try:
            mtime = self.path.stat().st_mtime
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {self.path}") from e

        if self._cache is not None and self._cache_mtime == mtime:
            logger.debug(f"Using cached catalog for {self.path}")
            return self._cache

        logger.info(f"Loading catalog from {self.path}")
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CatalogError(f"Cannot read catalog file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(
                f"Catalog file {self.path} is not valid JSON: "
                f"{e.msg} at line {e.lineno}"
            ) from e

        if not isinstance(data, dict):
            raise CatalogError(f"Catalog file {self.path} must contain a JSON object")

        try:
            catalog = Catalog.model_validate(data)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise CatalogError(f"Invalid catalog in {self.path}: {details}") from e

        logger.info(
            f"Loaded catalog with {len(catalog.engineers)} engineers, "
            f"{len(catalog.projects)} projects and "
            f"{len(catalog.service_categories)} service categories"
        )
        self._cache = catalog
        self._cache_mtime = mtime
        return catalog

    def invalidate_cache(self) -> None:
        """Forget the cached catalog, forcing a re-read on next access."""
        self._cache = None
        self._cache_mtime = None
