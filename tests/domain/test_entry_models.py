"""Tests for the entry domain models."""

from datetime import date
from decimal import Decimal

from finance_entries.domain.models.entries import (
    Entry,
    EntryFilter,
    EntryStatus,
    EntryType,
    User,
)


def test_users_compare_by_id_only() -> None:
    """User references should be equal when their ids are."""
    assert User(id=1, name="Ana") == User(id=1)
    assert User(id=1) != User(id=2)


def test_filter_from_entry_keeps_populated_fields() -> None:
    """Only the example entry's populated fields should become criteria."""
    entry = Entry(
        description="rent",
        year=2024,
        type=EntryType.EXPENSE,
        owner=User(id=3),
    )

    entry_filter = EntryFilter.from_entry(entry)

    assert entry_filter == EntryFilter(
        description="rent",
        year=2024,
        type=EntryType.EXPENSE,
        user_id=3,
    )


def test_filter_matches_description_case_insensitively() -> None:
    """Description criteria should match substrings in any case."""
    entry_filter = EntryFilter(description="rent")

    assert entry_filter.matches(Entry(description="Monthly RENT payment"))
    assert entry_filter.matches(Entry(description="Parents gift"))
    assert not entry_filter.matches(Entry(description="Groceries"))
    assert not entry_filter.matches(Entry())


def test_filter_matches_other_fields_by_equality() -> None:
    """Non-text criteria should require exact equality."""
    entry = Entry(
        id=4,
        description="Salary",
        month=2,
        year=2024,
        value=Decimal("10.00"),
        type=EntryType.INCOME,
        status=EntryStatus.SETTLED,
        owner=User(id=1),
    )

    assert EntryFilter().matches(entry)
    assert EntryFilter(month=2, user_id=1, value=Decimal("10")).matches(entry)
    assert not EntryFilter(status=EntryStatus.PENDING).matches(entry)
    assert not EntryFilter(user_id=2).matches(entry)


def test_filter_uses_registration_date() -> None:
    """A registration date on the example should narrow the matches."""
    entry = Entry(description="rent", registration_date=date(2020, 1, 1))

    entry_filter = EntryFilter.from_entry(entry)

    assert entry_filter == EntryFilter(
        description="rent", registration_date=date(2020, 1, 1)
    )
    assert entry_filter.matches(entry)
    assert not entry_filter.matches(
        Entry(description="rent", registration_date=date(2021, 1, 1))
    )
