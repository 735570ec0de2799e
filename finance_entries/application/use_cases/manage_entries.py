"""Use case orchestrating the lifecycle of financial entries.

Every write goes through the domain validator before reaching the store:

* ``create`` forces the PENDING status and stamps the registration date;
* ``update`` and ``delete`` require an entry that was already saved;
* ``change_status`` is a full update with a new status.
"""

from datetime import date

from finance_entries.application.ports.entry_store import EntryStorePort
from finance_entries.domain.exceptions import (
    BusinessRuleError,
    MissingEntryIdError,
)
from finance_entries.domain.models.entries import (
    Entry,
    EntryFilter,
    EntryStatus,
)
from finance_entries.domain.services.validation import validate_entry
from finance_entries.infrastructure.logging.logger import get_app_logger


class EntryLifecycleService:
    """Create, update, delete and query entries through the store port."""

    def __init__(self, entry_store: EntryStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            entry_store: Port owning persisted entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._entry_store = entry_store
        self._logger = logger or get_app_logger()

    def create(self, entry: Entry) -> Entry:
        """Validate and persist a new entry in PENDING status.

        Args:
            entry: Entry to record; any caller-supplied status is replaced.

        Returns:
            Entry: The saved entry, carrying its store-assigned id.

        Raises:
            BusinessRuleError: When a field check fails. Nothing is saved.
        """
        self._validate(entry)
        entry.status = EntryStatus.PENDING
        if entry.registration_date is None:
            entry.registration_date = date.today()
        saved = self._entry_store.save(entry)
        self._logger.info(
            f"Created entry {saved.id} for user {saved.user_id}"
        )
        return saved

    def update(self, entry: Entry) -> Entry:
        """Validate and overwrite a saved entry, status included.

        Raises:
            MissingEntryIdError: When the entry was never saved.
            BusinessRuleError: When a field check fails.
        """
        self._require_id(entry, "update")
        self._validate(entry)
        saved = self._entry_store.save(entry)
        self._logger.info(
            f"Updated entry {saved.id} (status={saved.status})"
        )
        return saved

    def delete(self, entry: Entry) -> None:
        """Remove a saved entry.

        Raises:
            MissingEntryIdError: When the entry was never saved.
        """
        self._require_id(entry, "delete")
        self._entry_store.delete(entry)
        self._logger.info(f"Deleted entry {entry.id}")

    def change_status(self, entry: Entry, status: EntryStatus) -> Entry:
        """Move the entry to a new status through a full update."""
        entry.status = status
        return self.update(entry)

    def search(self, entry_filter: EntryFilter | Entry) -> list[Entry]:
        """Return stored entries matching the filter.

        Args:
            entry_filter: Filter, or an example entry whose populated fields
                become the criteria. It is never validated.

        Returns:
            list[Entry]: Matching entries in store order.
        """
        if isinstance(entry_filter, Entry):
            entry_filter = EntryFilter.from_entry(entry_filter)
        return self._entry_store.find_all_by_example(entry_filter)

    def get_by_id(self, entry_id: int) -> Entry | None:
        """Return the entry with this id, or None when it does not exist."""
        return self._entry_store.find_by_id(entry_id)

    def _validate(self, entry: Entry) -> None:
        try:
            validate_entry(entry)
        except BusinessRuleError as exc:
            self._logger.warning(
                f"Rejected entry {entry.id}: {exc.reason}"
            )
            raise

    @staticmethod
    def _require_id(entry: Entry, operation: str) -> None:
        if entry.id is None:
            raise MissingEntryIdError(
                f"Cannot {operation} an entry that has not been saved"
            )


__all__ = ["EntryLifecycleService"]
