"""Domain models package."""

from .entries import Entry, EntryFilter, EntryStatus, EntryType, User

__all__ = [
    "Entry",
    "EntryFilter",
    "EntryStatus",
    "EntryType",
    "User",
]
