"""Calendar period helpers shared by the aggregators."""

import calendar
from datetime import datetime


def period_key(value: datetime) -> tuple[int, int]:
    """Return the (year, month) pair a datetime belongs to."""
    return value.year, value.month


def is_same_period(value: datetime, reference: datetime) -> bool:
    """Return True when both datetimes fall in the same calendar month."""
    return period_key(value) == period_key(reference)


def is_before_period(value: datetime, reference: datetime) -> bool:
    """Return True when value falls in a calendar month before reference."""
    return period_key(value) < period_key(reference)


def add_months(value: datetime, months: int) -> datetime:
    """Shift a datetime by whole months, clamping to the month end.

    Args:
        value: Datetime to shift.
        months: Number of months, possibly negative.

    Returns:
        datetime: Shifted datetime with the same time of day.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


__all__ = ["period_key", "is_same_period", "is_before_period", "add_months"]
