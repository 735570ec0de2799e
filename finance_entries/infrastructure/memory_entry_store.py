"""In-memory entry store used for local development and tests."""

from dataclasses import replace
from decimal import Decimal
from itertools import count

from finance_entries.application.ports.entry_store import EntryStorePort
from finance_entries.domain.models.entries import (
    Entry,
    EntryFilter,
    EntryStatus,
    EntryType,
)


class InMemoryEntryStore(EntryStorePort):
    """Simple dictionary-backed store with the same semantics as the SQL one.

    Entries are copied on the way in and out so callers never share state
    with the store.
    """

    def __init__(self) -> None:
        self._entries: dict[int, Entry] = {}
        self._ids = count(1)

    def save(self, entry: Entry) -> Entry:
        entry_id = entry.id if entry.id is not None else next(self._ids)
        self._entries[entry_id] = replace(entry, id=entry_id)
        return replace(entry, id=entry_id)

    def delete(self, entry: Entry) -> None:
        self._entries.pop(entry.id, None)

    def find_by_id(self, entry_id: int) -> Entry | None:
        stored = self._entries.get(entry_id)
        return replace(stored) if stored is not None else None

    def find_all_by_example(self, entry_filter: EntryFilter) -> list[Entry]:
        return [
            replace(entry)
            for entry in self._entries.values()
            if entry_filter.matches(entry)
        ]

    def sum_by_type_user_status(
        self,
        user_id: int,
        entry_type: EntryType,
        status: EntryStatus,
    ) -> Decimal | None:
        values = [
            entry.value
            for entry in self._entries.values()
            if entry.user_id == user_id
            and entry.type == entry_type
            and entry.status == status
        ]
        if not values:
            return None
        return sum(values, Decimal("0"))


__all__ = ["InMemoryEntryStore"]
