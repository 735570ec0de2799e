"""Tests for the entry validation rules."""

from datetime import date
from decimal import Decimal

import pytest

from finance_entries.domain.exceptions import BusinessRuleError
from finance_entries.domain.models.entries import (
    Entry,
    EntryStatus,
    EntryType,
    User,
)
from finance_entries.domain.services.validation import (
    find_entry_violation,
    validate_entry,
)


def _build_entry(**overrides) -> Entry:
    fields = dict(
        description="Salary",
        month=1,
        year=2024,
        value=Decimal("10"),
        type=EntryType.INCOME,
        status=EntryStatus.PENDING,
        owner=User(id=1),
        registration_date=date(2024, 1, 5),
    )
    fields.update(overrides)
    return Entry(**fields)


def _reason(entry: Entry) -> str:
    with pytest.raises(BusinessRuleError) as exc_info:
        validate_entry(entry)
    return exc_info.value.reason


def test_rules_are_reported_one_at_a_time_in_order() -> None:
    """Fixing each rule should reveal the next one, never skipping ahead."""
    entry = Entry()
    assert _reason(entry) == "invalid description"

    entry.description = ""
    assert _reason(entry) == "invalid description"

    entry.description = "   "
    assert _reason(entry) == "invalid description"

    entry.description = "Salary"
    assert _reason(entry) == "invalid month"

    entry.month = 0
    assert _reason(entry) == "invalid month"

    entry.month = 13
    assert _reason(entry) == "invalid month"

    entry.month = 1
    assert _reason(entry) == "invalid year"

    entry.year = 202
    assert _reason(entry) == "invalid year"

    entry.year = 2020
    assert _reason(entry) == "missing user"

    entry.owner = User(id=None)
    assert _reason(entry) == "missing user"

    entry.owner = User(id=1)
    assert _reason(entry) == "invalid value"

    entry.value = Decimal("0")
    assert _reason(entry) == "invalid value"

    entry.value = Decimal("1")
    assert _reason(entry) == "missing entry type"

    entry.type = EntryType.EXPENSE
    validate_entry(entry)


def test_rejection_is_a_value_error_carrying_the_reason() -> None:
    """BusinessRuleError should expose the reason as its message too."""
    with pytest.raises(ValueError, match="invalid month"):
        validate_entry(_build_entry(month=None))


def test_valid_entry_has_no_violation() -> None:
    """A fully populated entry should pass every rule."""
    assert find_entry_violation(_build_entry()) is None


def test_earliest_rule_wins_when_several_fail() -> None:
    """Only the first failing rule should be reported."""
    entry = _build_entry(year=10000, owner=None, value=Decimal("-1"), type=None)

    assert find_entry_violation(entry) == "invalid year"


@pytest.mark.parametrize("month", [1, 12])
def test_month_bounds_are_accepted(month: int) -> None:
    """January and December should both be valid months."""
    assert find_entry_violation(_build_entry(month=month)) is None


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_out_of_range_is_rejected(month: int) -> None:
    """Months outside 1-12 should be rejected."""
    assert find_entry_violation(_build_entry(month=month)) == "invalid month"


@pytest.mark.parametrize("year", [999, 10000, -1000, 0])
def test_year_without_four_digits_is_rejected(year: int) -> None:
    """Years outside 1000-9999 should be rejected."""
    assert find_entry_violation(_build_entry(year=year)) == "invalid year"


@pytest.mark.parametrize("year", [1000, 2024, 9999])
def test_four_digit_year_is_accepted(year: int) -> None:
    """Any four-digit year should be accepted."""
    assert find_entry_violation(_build_entry(year=year)) is None


def test_value_boundaries() -> None:
    """Zero is rejected while the smallest positive cent is accepted."""
    assert find_entry_violation(_build_entry(value=Decimal("0"))) == (
        "invalid value"
    )
    assert find_entry_violation(_build_entry(value=Decimal("0.01"))) is None


def test_status_and_registration_date_are_not_validated() -> None:
    """Informational fields should not block validation."""
    entry = _build_entry(status=None, registration_date=None)

    assert find_entry_violation(entry) is None


@pytest.mark.parametrize(
    "value",
    [
        Decimal("NaN"),
        Decimal("sNaN"),
        Decimal("Infinity"),
        Decimal("-Infinity"),
        Decimal("0.001"),
        Decimal("10.005"),
    ],
)
def test_unstorable_values_are_rejected(value: Decimal) -> None:
    """Non-finite amounts and sub-cent fractions should be invalid values."""
    assert find_entry_violation(_build_entry(value=value)) == "invalid value"


@pytest.mark.parametrize(
    "value", [Decimal("1.000"), Decimal("0.01"), Decimal("1E+3")]
)
def test_amounts_with_at_most_two_decimals_are_accepted(
    value: Decimal,
) -> None:
    """Trailing zeros should not count against the two decimal places."""
    assert find_entry_violation(_build_entry(value=value)) is None
