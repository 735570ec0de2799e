"""Domain constants for financial entries."""

INVALID_DESCRIPTION = "invalid description"
INVALID_MONTH = "invalid month"
INVALID_YEAR = "invalid year"
MISSING_USER = "missing user"
INVALID_VALUE = "invalid value"
MISSING_ENTRY_TYPE = "missing entry type"

MIN_MONTH = 1
MAX_MONTH = 12
YEAR_DIGITS = 4
VALUE_SCALE = 2


__all__ = [
    "INVALID_DESCRIPTION",
    "INVALID_MONTH",
    "INVALID_YEAR",
    "MISSING_USER",
    "INVALID_VALUE",
    "MISSING_ENTRY_TYPE",
    "MIN_MONTH",
    "MAX_MONTH",
    "YEAR_DIGITS",
    "VALUE_SCALE",
]
