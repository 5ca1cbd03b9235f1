"""Classification and bookkeeping rules for recurring subscriptions."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from src.domain.constants import (
    SUBSCRIPTION_ACTIVE,
    SUBSCRIPTION_CANCELLED,
    TRANSACTION_EXPENSE,
)
from src.domain.errors import DataIntegrityError
from src.domain.models import (
    Subscription,
    SubscriptionBuckets,
    SubscriptionSummary,
    Transaction,
)
from src.domain.services.dates import (
    add_months,
    is_before_period,
    is_same_period,
)
from src.domain.services.normalization import normalize_datetime
from src.utils.decimal_utils import sum_decimals


def classify_subscriptions(
    subscriptions: Iterable[Subscription],
    reference_date: datetime | None = None,
) -> SubscriptionBuckets:
    """Partition subscriptions into overdue, current, upcoming and cancelled.

    Active subscriptions are compared by calendar month against the
    reference date:

    * due in an earlier month: overdue, even if only a day has elapsed;
    * due in the reference month, or already paid for the reference
      period: due this period;
    * anything else is due after the reference month: upcoming.

    Args:
        subscriptions: Subscriptions to classify.
        reference_date: Date defining the current period. Defaults to now.

    Returns:
        SubscriptionBuckets: Disjoint buckets preserving input order.

    Raises:
        DataIntegrityError: If a status is unknown or a due date is not a
            normalized datetime.
    """
    reference = (
        normalize_datetime(reference_date, "reference_date")
        if reference_date is not None
        else datetime.now()
    )
    overdue: list[Subscription] = []
    due_this_period: list[Subscription] = []
    upcoming: list[Subscription] = []
    cancelled: list[Subscription] = []

    for subscription in subscriptions:
        if subscription.status == SUBSCRIPTION_CANCELLED:
            cancelled.append(subscription)
            continue
        if subscription.status != SUBSCRIPTION_ACTIVE:
            raise DataIntegrityError(
                f"Unknown status {subscription.status!r} "
                f"for subscription {subscription.id}"
            )
        due_date = _require_due_date(subscription)
        if is_before_period(due_date, reference):
            overdue.append(subscription)
        elif is_same_period(due_date, reference) or is_paid_for_period(
            subscription,
            reference,
        ):
            due_this_period.append(subscription)
        else:
            upcoming.append(subscription)

    return SubscriptionBuckets(
        overdue=overdue,
        due_this_period=due_this_period,
        upcoming=upcoming,
        cancelled=cancelled,
    )


def is_paid_for_period(
    subscription: Subscription,
    reference: datetime,
) -> bool:
    """Return True when the last payment belongs to the reference month."""
    return (
        subscription.paid_this_period
        and subscription.last_payment_month == reference.month
        and subscription.last_payment_year == reference.year
    )


def summarize_subscriptions(
    subscriptions: Iterable[Subscription],
    transactions: Iterable[Transaction],
) -> SubscriptionSummary:
    """Return active count, monthly cost and share of period expenses.

    Args:
        subscriptions: Subscriptions of the selected profile.
        transactions: Transactions of the selected period.

    Returns:
        SubscriptionSummary: Participation is 0 when there are no expenses.
    """
    active = [
        subscription
        for subscription in subscriptions
        if subscription.status == SUBSCRIPTION_ACTIVE
    ]
    monthly_cost = sum_decimals(subscription.amount for subscription in active)
    total_expenses = sum_decimals(
        transaction.amount
        for transaction in transactions
        if transaction.type == TRANSACTION_EXPENSE
    )
    participation = (
        monthly_cost / total_expenses * Decimal("100")
        if total_expenses > 0
        else Decimal("0")
    )
    return SubscriptionSummary(
        active_count=len(active),
        monthly_cost=monthly_cost,
        expense_participation=participation,
    )


def mark_subscription_paid(
    subscription: Subscription,
    paid_at: datetime,
) -> Subscription:
    """Return the subscription advanced to its next due date."""
    return replace(
        subscription,
        due_date=add_months(_require_due_date(subscription), 1),
        last_payment_month=paid_at.month,
        last_payment_year=paid_at.year,
        paid_this_period=True,
    )


def stale_paid_subscriptions(
    subscriptions: Iterable[Subscription],
    now: datetime | None = None,
) -> list[Subscription]:
    """Return subscriptions whose paid flag belongs to a past period."""
    reference = now or datetime.now()
    return [
        subscription
        for subscription in subscriptions
        if subscription.paid_this_period
        and not is_paid_for_period(subscription, reference)
    ]


def _require_due_date(subscription: Subscription) -> datetime:
    if not isinstance(subscription.due_date, datetime):
        raise DataIntegrityError(
            f"Subscription {subscription.id} has an invalid due date: "
            f"{subscription.due_date!r}"
        )
    return subscription.due_date


__all__ = [
    "classify_subscriptions",
    "is_paid_for_period",
    "summarize_subscriptions",
    "mark_subscription_paid",
    "stale_paid_subscriptions",
]
