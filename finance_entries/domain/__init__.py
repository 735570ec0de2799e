"""Domain package for entry rules and core models."""

from .exceptions import BusinessRuleError, MissingEntryIdError
from .models import Entry, EntryFilter, EntryStatus, EntryType, User
from .services import compute_balance, find_entry_violation, validate_entry

__all__ = [
    "BusinessRuleError",
    "MissingEntryIdError",
    "Entry",
    "EntryFilter",
    "EntryStatus",
    "EntryType",
    "User",
    "compute_balance",
    "find_entry_violation",
    "validate_entry",
]
