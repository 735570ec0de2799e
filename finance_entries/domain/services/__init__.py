"""Domain services package."""

from .balance import compute_balance
from .validation import find_entry_violation, validate_entry

__all__ = [
    "compute_balance",
    "find_entry_violation",
    "validate_entry",
]
