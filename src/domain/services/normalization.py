"""Domain normalization helpers.

Date fields reach the domain as ``datetime`` objects, ``date`` objects,
epoch timestamps or ISO-8601 strings depending on where the record came
from. They are normalized once, at the store boundary, into naive local
``datetime`` values.
"""

from datetime import date, datetime, time

from src.domain.constants import SUPPORTED_CURRENCIES
from src.domain.errors import DataIntegrityError

_MILLISECONDS_THRESHOLD = 100_000_000_000


def normalize_datetime(value, field_name: str = "date") -> datetime:
    """Normalize a raw date value into a naive datetime.

    Args:
        value: Raw value read from the store or supplied by a caller.
        field_name: Field name used in error messages.

    Returns:
        datetime: Naive datetime in local time.

    Raises:
        DataIntegrityError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = float(value)
        if abs(seconds) >= _MILLISECONDS_THRESHOLD:
            seconds /= 1000
        try:
            return datetime.fromtimestamp(seconds)
        except (OverflowError, OSError, ValueError) as exc:
            raise DataIntegrityError(
                f"Timestamp out of range for {field_name}: {value!r}"
            ) from exc
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned.endswith("Z"):
            cleaned = cleaned[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(cleaned)
        except ValueError as exc:
            raise DataIntegrityError(
                f"Unparsable {field_name}: {value!r}"
            ) from exc
        return normalize_datetime(parsed, field_name)
    raise DataIntegrityError(f"Unparsable {field_name}: {value!r}")


def normalize_optional_datetime(
    value,
    field_name: str = "date",
) -> datetime | None:
    """Normalize a date value that may legitimately be missing."""
    if value is None or value == "":
        return None
    return normalize_datetime(value, field_name)


def normalize_currency_code(code: str | None) -> str | None:
    """Normalize a currency code, rejecting unsupported values.

    Args:
        code: Raw currency code.

    Returns:
        str | None: Upper-cased supported code, or None when empty.
    """
    if not code:
        return None
    cleaned = code.strip().upper()
    if not cleaned:
        return None
    if cleaned not in SUPPORTED_CURRENCIES:
        raise DataIntegrityError(f"Unsupported currency: {code!r}")
    return cleaned


__all__ = [
    "normalize_datetime",
    "normalize_optional_datetime",
    "normalize_currency_code",
]
