"""JSON file persistence for the timesheet session.

The store is the persistence port of the presentation layer: the command
line loads the session at start and saves it after every change. The core
calculators and validators never read or write it.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from timesheet_builder.models.session import Session
from timesheet_builder.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)


class SessionStoreError(Exception):
    """Raised when the session file cannot be read or written."""

    def __init__(self, message: str, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class SessionStore:
    """Loads and saves a Session as a JSON document.

    Attributes:
        path: Location of the session file

    Example:
        >>> store = SessionStore("session.json")
        >>> session = store.load()
        >>> session.engineer = "Jane Doe"
        >>> store.save(session)
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.is_file()

    @log_function_call(expected=(SessionStoreError,))
    def load(self) -> Session:
        """Load the session, or return an empty one when no file exists yet.

        Raises:
            SessionStoreError: If the file is unreadable or not a valid session
        """
        if not self.exists():
            logger.debug(f"No session file at {self.path}, starting empty")
            return Session()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise SessionStoreError(
                f"Cannot read session file ({e})", self.path
            ) from e

        try:
            session = Session.model_validate(json.loads(raw))
        except json.JSONDecodeError as e:
            raise SessionStoreError(
                f"Session file is not valid JSON ({e.msg} at line {e.lineno})",
                self.path,
            ) from e
        except ValidationError as e:
            raise SessionStoreError(
                f"Session file has invalid content ({e.error_count()} error(s))",
                self.path,
            ) from e

        logger.info(
            f"Loaded session with {len(session.entries)} entries from {self.path}"
        )
        return session

    @log_function_call(expected=(SessionStoreError,))
    def save(self, session: Session) -> None:
        """Write the session atomically (temporary file, then rename).

        Raises:
            SessionStoreError: If the file cannot be written
        """
        payload = json.dumps(session.model_dump(mode="json"), indent=2)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.write("\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise SessionStoreError(
                f"Cannot write session file ({e})", self.path
            ) from e

        logger.info(f"Saved session with {len(session.entries)} entries to {self.path}")

    def clear(self) -> None:
        """Delete the session file if present."""
        self.path.unlink(missing_ok=True)
        logger.info(f"Removed session file {self.path}")
