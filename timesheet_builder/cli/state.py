"""Shared state handed to every CLI command.

Each invocation does one load, mutate, save cycle against the session file.
"""

import logging
from typing import Optional

import click

from timesheet_builder.cli.error_handlers import ConfigurationError
from timesheet_builder.config.settings import TimesheetConfig
from timesheet_builder.models.catalog import Catalog
from timesheet_builder.models.session import Session
from timesheet_builder.readers.catalog_reader import CatalogError, CatalogReader
from timesheet_builder.services.session_store import SessionStore, SessionStoreError

logger = logging.getLogger(__name__)


class CLIState:
    """Settings, session store and catalog reader of one CLI invocation.

    Attributes:
        settings: Loaded application settings
        store: Session file store
        catalog_reader: Reader for the selectable values
        debug: Whether to show full stack traces
    """

    def __init__(
        self,
        settings: TimesheetConfig,
        store_path: Optional[str] = None,
        catalog_file: Optional[str] = None,
        debug: bool = False,
    ):
        self.settings = settings
        self.store = SessionStore(store_path or settings.store_path)
        self.catalog_reader = CatalogReader(catalog_file or settings.catalog_file)
        self.debug = debug or settings.debug

    def load_session(self) -> Session:
        """Load the session file.

        Raises:
            ConfigurationError: If the session file is corrupt
        """
        try:
            return self.store.load()
        except SessionStoreError as e:
            raise ConfigurationError(
                str(e),
                recovery_hint="Fix or remove the session file, or pass --store",
            ) from e

    def save_session(self, session: Session) -> None:
        """Persist the session.

        Raises:
            ConfigurationError: If the session file cannot be written
        """
        try:
            self.store.save(session)
        except SessionStoreError as e:
            raise ConfigurationError(
                str(e), recovery_hint="Check that the session directory is writable"
            ) from e

    def load_catalog(self) -> Catalog:
        """Read the catalog of selectable values.

        Raises:
            ConfigurationError: If the catalog file is missing or invalid
        """
        try:
            return self.catalog_reader.read()
        except CatalogError as e:
            raise ConfigurationError(
                str(e),
                recovery_hint="Check TIMESHEET_CATALOG_FILE or the --catalog option",
            ) from e


pass_state = click.make_pass_decorator(CLIState)
