"""Domain validation for entries about to be persisted."""

from decimal import Decimal

from finance_entries.domain.constants import (
    INVALID_DESCRIPTION,
    INVALID_MONTH,
    INVALID_VALUE,
    INVALID_YEAR,
    MAX_MONTH,
    MIN_MONTH,
    MISSING_ENTRY_TYPE,
    MISSING_USER,
    VALUE_SCALE,
    YEAR_DIGITS,
)
from finance_entries.domain.exceptions import BusinessRuleError
from finance_entries.domain.models.entries import Entry


def find_entry_violation(entry: Entry) -> str | None:
    """Return the reason of the first rule the entry breaks.

    Rules are checked in a fixed order (description, month, year, owner,
    value, type) and only the first failure is reported.

    Args:
        entry: Candidate entry.

    Returns:
        str | None: Rejection reason, or None when the entry is valid.
    """
    if entry.description is None or not entry.description.strip():
        return INVALID_DESCRIPTION
    if entry.month is None or not MIN_MONTH <= entry.month <= MAX_MONTH:
        return INVALID_MONTH
    if entry.year is None or not _has_year_digits(entry.year):
        return INVALID_YEAR
    if entry.owner is None or entry.owner.id is None:
        return MISSING_USER
    if entry.value is None or not _is_valid_amount(entry.value):
        return INVALID_VALUE
    if entry.type is None:
        return MISSING_ENTRY_TYPE
    return None


def validate_entry(entry: Entry) -> None:
    """Raise when the entry cannot be persisted.

    Args:
        entry: Candidate entry.

    Raises:
        BusinessRuleError: With the reason of the first broken rule.
    """
    reason = find_entry_violation(entry)
    if reason is not None:
        raise BusinessRuleError(reason)


def _is_valid_amount(value: Decimal) -> bool:
    # NaN and infinities cannot be compared or stored
    if not value.is_finite() or value <= 0:
        return False
    return value.normalize().as_tuple().exponent >= -VALUE_SCALE


def _has_year_digits(year: int) -> bool:
    # negative years never qualify, "-100" is four characters
    return 10 ** (YEAR_DIGITS - 1) <= year < 10**YEAR_DIGITS


__all__ = ["find_entry_violation", "validate_entry"]
