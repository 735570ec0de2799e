"""Port for entry persistence and aggregate queries."""

from decimal import Decimal
from typing import Protocol

from finance_entries.domain.models.entries import (
    Entry,
    EntryFilter,
    EntryStatus,
    EntryType,
)


class EntryStorePort(Protocol):
    """Port owning persisted entries.

    Each write runs as a single transaction: it either fully commits or
    leaves the stored entry unmodified. Failures are raised synchronously.
    """

    def save(self, entry: Entry) -> Entry:
        """Insert the entry when it has no id, otherwise overwrite it."""

    def delete(self, entry: Entry) -> None:
        """Remove the stored entry with the same id."""

    def find_by_id(self, entry_id: int) -> Entry | None:
        """Return the entry with this id, or None."""

    def find_all_by_example(self, entry_filter: EntryFilter) -> list[Entry]:
        """Return entries matching every populated filter field."""

    def sum_by_type_user_status(
        self,
        user_id: int,
        entry_type: EntryType,
        status: EntryStatus,
    ) -> Decimal | None:
        """Return the summed value of matching entries, None when none match."""


__all__ = ["EntryStorePort"]
