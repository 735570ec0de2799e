"""Helpers for Decimal normalization."""

from decimal import Decimal

ZERO = Decimal("0")


def coerce_decimal(value, default: Decimal = ZERO) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, adapters or an empty aggregate.
        default: Value returned when ``value`` is None.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return default
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


__all__ = ["coerce_decimal", "ZERO"]
