"""Profile and period filters applied to transaction lists."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from src.domain.constants import ALL_PROFILES
from src.domain.models import Transaction
from src.domain.policies import matches_profile


@dataclass(frozen=True)
class PeriodFilter:
    """Dashboard filter selecting a profile and a slice of one year.

    Attributes:
        year: Calendar year.
        month: Month 1-12, or None for a quarter or the whole year.
        quarter: Quarter 1-4, or None.
        profile: Profile name or ``ALL_PROFILES``.
    """

    year: int
    month: int | None = None
    quarter: int | None = None
    profile: str = ALL_PROFILES

    def __post_init__(self) -> None:
        if self.month is not None and self.quarter is not None:
            raise ValueError("Select either a month or a quarter, not both")
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")
        if self.quarter is not None and not 1 <= self.quarter <= 4:
            raise ValueError(f"Quarter out of range: {self.quarter}")

    @classmethod
    def current_month(
        cls,
        now: datetime | None = None,
        profile: str = ALL_PROFILES,
    ) -> "PeriodFilter":
        """Return the filter for the month containing ``now``."""
        resolved = now or datetime.now()
        return cls(year=resolved.year, month=resolved.month, profile=profile)

    def contains(self, value: datetime) -> bool:
        """Return True when the datetime falls inside the selected slice."""
        if value.year != self.year:
            return False
        if self.month is not None:
            return value.month == self.month
        if self.quarter is not None:
            return (value.month - 1) // 3 + 1 == self.quarter
        return True


def filter_transactions(
    transactions: Iterable[Transaction],
    period: PeriodFilter,
) -> list[Transaction]:
    """Return transactions matching the period's profile and date slice."""
    return [
        transaction
        for transaction in transactions
        if matches_profile(transaction, period.profile)
        and period.contains(transaction.date)
    ]


def available_years(
    transactions: Iterable[Transaction],
    today: datetime | None = None,
) -> list[int]:
    """Return transaction years plus the current year, newest first."""
    years = {transaction.date.year for transaction in transactions}
    years.add((today or datetime.now()).year)
    return sorted(years, reverse=True)


__all__ = ["PeriodFilter", "filter_transactions", "available_years"]
