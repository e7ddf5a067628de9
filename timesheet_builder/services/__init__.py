"""Services owning the entry collection and its persistence."""

from timesheet_builder.services.entry_collection import EntryCollection
from timesheet_builder.services.session_store import SessionStore, SessionStoreError

__all__ = [
    "EntryCollection",
    "SessionStore",
    "SessionStoreError",
]
