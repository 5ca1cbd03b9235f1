"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.domain.models.records import Subscription


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Balances, investment values and tangible asset values.
        liability_total: Credit card usage plus remaining debt.
        net_worth: Assets minus liabilities, possibly negative.
        profile: Profile filter the figures were computed for.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    profile: str


@dataclass(frozen=True)
class FinancialSummary:
    """Dashboard breakdown of where assets and liabilities sit."""

    net_worth: NetWorthSummary
    main_balance: Decimal
    savings_balance: Decimal
    invested_total: Decimal
    saved_in_instruments: Decimal
    saved_in_goals: Decimal
    credit_card_used: Decimal
    remaining_debt: Decimal
    tangible_assets_total: Decimal


@dataclass(frozen=True)
class SubscriptionBuckets:
    """Disjoint partition of subscriptions for a reference period."""

    overdue: list[Subscription]
    due_this_period: list[Subscription]
    upcoming: list[Subscription]
    cancelled: list[Subscription]

    def all(self) -> list[Subscription]:
        """Return every classified subscription."""
        return [
            *self.overdue,
            *self.due_this_period,
            *self.upcoming,
            *self.cancelled,
        ]


@dataclass(frozen=True)
class SubscriptionSummary:
    """Headline figures for active subscriptions."""

    active_count: int
    monthly_cost: Decimal
    expense_participation: Decimal


@dataclass(frozen=True)
class BudgetVarianceRow:
    """Planned versus actual spend for one category.

    Attributes:
        planned_percentage: Share of income planned for the category.
        planned_amount: Income times the planned percentage.
        spent_amount: Sum of expenses booked to the category.
        difference: Planned minus spent; negative when over budget.
    """

    category: str
    planned_percentage: Decimal
    planned_amount: Decimal
    spent_amount: Decimal
    difference: Decimal

    @property
    def is_over_budget(self) -> bool:
        return self.difference < 0


@dataclass(frozen=True)
class BalanceEffect:
    """Delta applied to one numeric field of an account or card."""

    collection: str
    record_id: str
    field: str
    delta: Decimal


@dataclass(frozen=True)
class AppNotification:
    id: str
    title: str
    description: str
    date: datetime
    type: str
    link: str | None = None
    read: bool = False


__all__ = [
    "NetWorthSummary",
    "FinancialSummary",
    "SubscriptionBuckets",
    "SubscriptionSummary",
    "BudgetVarianceRow",
    "BalanceEffect",
    "AppNotification",
]
