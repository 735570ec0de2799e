"""Domain models for financial entries."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class EntryType(str, Enum):
    """Direction of the money movement."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class EntryStatus(str, Enum):
    """Lifecycle status of an entry."""

    PENDING = "PENDING"
    SETTLED = "SETTLED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class User:
    """Reference to the user owning an entry.

    Two references are equal when they point to the same user id.
    """

    id: int | None
    name: str | None = field(default=None, compare=False)
    email: str | None = field(default=None, compare=False)


@dataclass
class Entry:
    """Income or expense recorded for a user in a given month.

    Attributes:
        id: Store-assigned identifier, None until first saved.
        description: Free text describing the movement.
        month: Month of the period (1-12).
        year: Four-digit year of the period.
        value: Positive amount.
        type: Income or expense.
        status: Lifecycle status, forced to PENDING on creation.
        owner: User the entry belongs to.
        registration_date: Day the entry was recorded.
    """

    id: int | None = None
    description: str | None = None
    month: int | None = None
    year: int | None = None
    value: Decimal | None = None
    type: EntryType | None = None
    status: EntryStatus | None = None
    owner: User | None = None
    registration_date: date | None = None

    @property
    def user_id(self) -> int | None:
        """Return the owner's id, if any."""
        return self.owner.id if self.owner is not None else None


@dataclass(frozen=True)
class EntryFilter:
    """Search criteria where every non-null field constrains the result.

    ``description`` matches as a case-insensitive substring, every other
    field matches by equality.
    """

    id: int | None = None
    description: str | None = None
    month: int | None = None
    year: int | None = None
    value: Decimal | None = None
    type: EntryType | None = None
    status: EntryStatus | None = None
    user_id: int | None = None
    registration_date: date | None = None

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryFilter":
        """Build a filter from the populated fields of an example entry."""
        return cls(
            id=entry.id,
            description=entry.description,
            month=entry.month,
            year=entry.year,
            value=entry.value,
            type=entry.type,
            status=entry.status,
            user_id=entry.user_id,
            registration_date=entry.registration_date,
        )

    def matches(self, entry: Entry) -> bool:
        """Return True when the entry satisfies every populated criterion."""
        if self.description is not None:
            text = entry.description or ""
            if self.description.lower() not in text.lower():
                return False
        equalities = (
            (self.id, entry.id),
            (self.month, entry.month),
            (self.year, entry.year),
            (self.value, entry.value),
            (self.type, entry.type),
            (self.status, entry.status),
            (self.user_id, entry.user_id),
            (self.registration_date, entry.registration_date),
        )
        return all(
            expected is None or expected == actual
            for expected, actual in equalities
        )


__all__ = ["EntryType", "EntryStatus", "User", "Entry", "EntryFilter"]
