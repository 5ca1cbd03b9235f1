"""Helpers for Decimal normalization."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from src.domain.errors import DataIntegrityError


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from the store or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        DataIntegrityError: If the value is not numeric, or is NaN or
            infinite.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise DataIntegrityError(f"Boolean is not a valid amount: {value}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise DataIntegrityError(f"Invalid amount: {value!r}") from exc
    if not result.is_finite():
        raise DataIntegrityError(f"Amount must be finite: {value!r}")
    return result


def sum_decimals(values: Iterable) -> Decimal:
    """Return the Decimal sum of raw numeric values."""
    return sum((coerce_decimal(value) for value in values), Decimal("0"))


__all__ = ["coerce_decimal", "sum_decimals"]
