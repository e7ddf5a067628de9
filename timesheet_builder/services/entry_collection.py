"""In-memory collection of timesheet entries.

The collection holds the entries of every week in insertion order. The week
selection only filters which entries are shown; switching weeks never drops
entries of other weeks.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional

from timesheet_builder.models.entry import EDITABLE_FIELDS, TimesheetEntry

logger = logging.getLogger(__name__)


class EntryCollection:
    """Owns the entries of a session and their lifecycle.

    Example:
        >>> collection = EntryCollection()
        >>> entry = collection.add(week=5)
        >>> _ = collection.update(entry.id, date="2026-01-26", start_time="09:00")
        >>> len(collection.for_week(5))
        1
    """

    def __init__(self, entries: Optional[Iterable[TimesheetEntry]] = None):
        """Initialize the collection.

        Args:
            entries: Existing entries, e.g. loaded from the session store

        Raises:
            ValueError: If two entries share an id
        """
        self._entries: List[TimesheetEntry] = []
        for entry in entries or []:
            if self._find_index(entry.id) is not None:
                raise ValueError(f"Duplicate entry id: {entry.id}")
            self._entries.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TimesheetEntry]:
        return iter(list(self._entries))

    @property
    def entries(self) -> List[TimesheetEntry]:
        """All entries of every week, in insertion order."""
        return list(self._entries)

    def _find_index(self, entry_id: str) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None

    def _index_of(self, entry_id: str) -> int:
        index = self._find_index(entry_id)
        if index is None:
            raise KeyError(f"No entry with id {entry_id!r}")
        return index

    def get(self, entry_id: str) -> TimesheetEntry:
        """Return the entry with ``entry_id``.

        Raises:
            KeyError: If no such entry exists
        """
        return self._entries[self._index_of(entry_id)]

    def add(self, week: Optional[int]) -> TimesheetEntry:
        """Append a blank entry to ``week``.

        Raises:
            ValueError: If no week is selected
        """
        if not week:
            raise ValueError("Select a week before adding entries")
        entry = TimesheetEntry(week=week)
        self._entries.append(entry)
        logger.debug(f"Added entry {entry.id} to week {week}")
        return entry

    def update(self, entry_id: str, **changes: Any) -> TimesheetEntry:
        """Change editable fields of an entry.

        All changes are validated together; on failure the entry is left
        untouched.

        Raises:
            KeyError: If no such entry exists
            ValueError: If a change targets a field that cannot be edited
            pydantic.ValidationError: If a new value is invalid
        """
        index = self._index_of(entry_id)
        not_editable = sorted(set(changes) - set(EDITABLE_FIELDS) - {"week"})
        if not_editable:
            raise ValueError(f"Fields cannot be edited: {', '.join(not_editable)}")

        data = self._entries[index].model_dump()
        data.update(changes)
        updated = TimesheetEntry.model_validate(data)
        self._entries[index] = updated
        logger.debug(f"Updated entry {entry_id}: {sorted(changes)}")
        return updated

    def duplicate(self, entry_id: str) -> TimesheetEntry:
        """Append a copy of an entry with a fresh id.

        The copy keeps ``date`` and ``week`` verbatim, even when the source
        date lies outside its week.

        Raises:
            KeyError: If no such entry exists
        """
        copy = self.get(entry_id).copy_with_new_id()
        self._entries.append(copy)
        logger.debug(f"Duplicated entry {entry_id} as {copy.id}")
        return copy

    def delete(self, entry_id: str) -> TimesheetEntry:
        """Remove an entry and return it.

        Raises:
            KeyError: If no such entry exists
        """
        removed = self._entries.pop(self._index_of(entry_id))
        logger.debug(f"Deleted entry {entry_id}")
        return removed

    def reset(self) -> int:
        """Remove every entry of every week.

        Returns:
            Number of removed entries
        """
        count = len(self._entries)
        self._entries.clear()
        logger.info(f"Reset collection, removed {count} entries")
        return count

    def for_week(self, week: Optional[int]) -> List[TimesheetEntry]:
        """Return the entries of ``week`` in insertion order.

        No selected week means no visible entries.
        """
        if not week:
            return []
        return [entry for entry in self._entries if entry.week == week]

    def find_by_prefix(self, prefix: str) -> TimesheetEntry:
        """Resolve a (possibly shortened) entry id.

        Raises:
            KeyError: If no entry or more than one entry matches
        """
        matches = [entry for entry in self._entries if entry.id.startswith(prefix)]
        if not prefix or not matches:
            raise KeyError(f"No entry with id {prefix!r}")
        if len(matches) > 1:
            raise KeyError(f"Entry id {prefix!r} is ambiguous")
        return matches[0]
