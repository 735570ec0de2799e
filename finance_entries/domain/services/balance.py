"""Domain service computing a user's realized balance."""

from decimal import Decimal

from finance_entries.utils.decimal_utils import coerce_decimal


def compute_balance(
    income_total: Decimal | None,
    expense_total: Decimal | None,
) -> Decimal:
    """Return settled income minus settled expense.

    A missing aggregate means the user has no settled entry of that type and
    counts as zero.
    """
    return coerce_decimal(income_total) - coerce_decimal(expense_total)


__all__ = ["compute_balance"]
