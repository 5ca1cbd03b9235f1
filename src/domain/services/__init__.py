"""Domain services package."""

from .budget import compute_budget_variance
from .dates import add_months, is_before_period, is_same_period, period_key
from .filters import PeriodFilter, available_years, filter_transactions
from .finance import compute_financial_summary, compute_net_worth_summary
from .ledger import compute_balance_effects, prepare_transaction
from .normalization import (
    normalize_currency_code,
    normalize_datetime,
    normalize_optional_datetime,
)
from .notifications import build_notifications, reached_goals
from .subscriptions import (
    classify_subscriptions,
    is_paid_for_period,
    mark_subscription_paid,
    stale_paid_subscriptions,
    summarize_subscriptions,
)
from .validation import validate_transaction_shape

__all__ = [
    "compute_budget_variance",
    "add_months",
    "is_before_period",
    "is_same_period",
    "period_key",
    "PeriodFilter",
    "available_years",
    "filter_transactions",
    "compute_financial_summary",
    "compute_net_worth_summary",
    "compute_balance_effects",
    "prepare_transaction",
    "normalize_currency_code",
    "normalize_datetime",
    "normalize_optional_datetime",
    "build_notifications",
    "reached_goals",
    "classify_subscriptions",
    "is_paid_for_period",
    "mark_subscription_paid",
    "stale_paid_subscriptions",
    "summarize_subscriptions",
    "validate_transaction_shape",
]
