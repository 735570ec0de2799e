"""Use case to compute a user's realized balance."""

from decimal import Decimal

from finance_entries.application.ports.entry_store import EntryStorePort
from finance_entries.domain.models.entries import EntryStatus, EntryType
from finance_entries.domain.services.balance import compute_balance
from finance_entries.infrastructure.logging.logger import get_app_logger


class GetUserBalanceUseCase:
    """Compute settled income minus settled expense for a user."""

    def __init__(self, entry_store: EntryStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            entry_store: Port providing the aggregate sums.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._entry_store = entry_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int) -> Decimal:
        """Return the balance of the user.

        Pending and cancelled entries are ignored.

        Args:
            user_id: Identifier of the entries' owner.

        Returns:
            Decimal: Settled income minus settled expense.
        """
        income = self._entry_store.sum_by_type_user_status(
            user_id,
            EntryType.INCOME,
            EntryStatus.SETTLED,
        )
        expense = self._entry_store.sum_by_type_user_status(
            user_id,
            EntryType.EXPENSE,
            EntryStatus.SETTLED,
        )
        balance = compute_balance(income, expense)
        self._logger.info(f"Computed balance {balance} for user {user_id}")
        return balance


__all__ = ["GetUserBalanceUseCase"]
