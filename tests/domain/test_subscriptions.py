"""Tests for subscription classification and lifecycle rules."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.errors import DataIntegrityError
from src.domain.models import Subscription, Transaction
from src.domain.services.subscriptions import (
    classify_subscriptions,
    mark_subscription_paid,
    stale_paid_subscriptions,
    summarize_subscriptions,
)


def _sub(
    sub_id: str,
    due_date: datetime,
    status: str = "active",
    amount: str = "10000",
    **kwargs,
) -> Subscription:
    return Subscription(
        id=sub_id,
        name=f"Sub {sub_id}",
        amount=Decimal(amount),
        due_date=due_date,
        card_id="card-1",
        profile="Personal",
        status=status,
        **kwargs,
    )


def _expense(amount: str, category: str = "Supermercado") -> Transaction:
    return Transaction(
        id=f"tx-{amount}",
        type="expense",
        amount=Decimal(amount),
        category=category,
        profile="Personal",
        date=datetime(2024, 2, 10),
        account_id="acc-1",
    )


def test_classify_partitions_every_subscription_once() -> None:
    """Buckets should be disjoint and cover the input."""
    reference = datetime(2024, 2, 15)
    subscriptions = [
        _sub("late", datetime(2024, 1, 20)),
        _sub("now", datetime(2024, 2, 28)),
        _sub("later", datetime(2024, 4, 1)),
        _sub("gone", datetime(2023, 12, 1), status="cancelled"),
        _sub(
            "paid",
            datetime(2024, 3, 15),
            paid_this_period=True,
            last_payment_month=2,
            last_payment_year=2024,
        ),
    ]

    buckets = classify_subscriptions(subscriptions, reference)

    assert [s.id for s in buckets.overdue] == ["late"]
    assert [s.id for s in buckets.due_this_period] == ["now", "paid"]
    assert [s.id for s in buckets.upcoming] == ["later"]
    assert [s.id for s in buckets.cancelled] == ["gone"]
    ids = [s.id for s in buckets.all()]
    assert sorted(ids) == sorted(s.id for s in subscriptions)
    assert len(ids) == len(set(ids))


def test_due_date_equal_to_reference_is_due_this_period() -> None:
    """The same instant should never count as overdue or upcoming."""
    reference = datetime(2024, 2, 15, 9, 30)

    buckets = classify_subscriptions([_sub("same", reference)], reference)

    assert [s.id for s in buckets.due_this_period] == ["same"]
    assert buckets.overdue == []
    assert buckets.upcoming == []


def test_month_boundary_counts_as_overdue() -> None:
    """Jan 31 is overdue on Feb 1 even though only a day has elapsed."""
    buckets = classify_subscriptions(
        [_sub("jan", datetime(2024, 1, 31))],
        datetime(2024, 2, 1),
    )

    assert [s.id for s in buckets.overdue] == ["jan"]


def test_later_day_in_earlier_month_is_overdue() -> None:
    """Comparison is by calendar month, not by day of month."""
    buckets = classify_subscriptions(
        [_sub("dec", datetime(2023, 12, 31))],
        datetime(2024, 1, 5),
    )

    assert [s.id for s in buckets.overdue] == ["dec"]


def test_stale_paid_flag_does_not_hide_upcoming() -> None:
    """A paid flag from an earlier month should not count as paid now."""
    stale = _sub(
        "stale",
        datetime(2024, 3, 10),
        paid_this_period=True,
        last_payment_month=1,
        last_payment_year=2024,
    )

    buckets = classify_subscriptions([stale], datetime(2024, 2, 15))

    assert [s.id for s in buckets.upcoming] == ["stale"]


def test_classify_accepts_string_reference_date() -> None:
    buckets = classify_subscriptions(
        [_sub("a", datetime(2024, 2, 1))],
        "2024-02-20T10:00:00",
    )

    assert [s.id for s in buckets.due_this_period] == ["a"]


def test_classify_rejects_unknown_status() -> None:
    with pytest.raises(DataIntegrityError):
        classify_subscriptions(
            [_sub("x", datetime(2024, 2, 1), status="paused")],
            datetime(2024, 2, 1),
        )


def test_classify_rejects_unnormalized_due_date() -> None:
    """Raw timestamps must be normalized before classification."""
    with pytest.raises(DataIntegrityError):
        classify_subscriptions(
            [_sub("raw", 1706745600000)],
            datetime(2024, 2, 1),
        )


def test_classify_empty_input_returns_empty_buckets() -> None:
    buckets = classify_subscriptions([], datetime(2024, 2, 1))

    assert buckets.all() == []


def test_summarize_reports_cost_and_expense_share() -> None:
    """Only active subscriptions count toward cost and participation."""
    subscriptions = [
        _sub("a", datetime(2024, 2, 1), amount="10000"),
        _sub("b", datetime(2024, 2, 1), amount="5000"),
        _sub("c", datetime(2024, 2, 1), amount="9000", status="cancelled"),
    ]
    transactions = [_expense("50000"), _expense("10000")]

    summary = summarize_subscriptions(subscriptions, transactions)

    assert summary.active_count == 2
    assert summary.monthly_cost == Decimal("15000")
    assert summary.expense_participation == Decimal("25")


def test_summarize_without_expenses_has_zero_participation() -> None:
    summary = summarize_subscriptions(
        [_sub("a", datetime(2024, 2, 1))],
        [],
    )

    assert summary.expense_participation == Decimal("0")


def test_mark_paid_advances_due_date_and_stamps_period() -> None:
    """Paying should move the due date one month, clamped to month end."""
    subscription = _sub("a", datetime(2024, 1, 31))

    paid = mark_subscription_paid(subscription, datetime(2024, 2, 3))

    assert paid.due_date == datetime(2024, 2, 29)
    assert paid.last_payment_month == 2
    assert paid.last_payment_year == 2024
    assert paid.paid_this_period is True
    assert subscription.paid_this_period is False


def test_stale_paid_subscriptions_compares_month_and_year() -> None:
    """Same month of a different year is still a stale flag."""
    fresh = _sub(
        "fresh",
        datetime(2024, 3, 1),
        paid_this_period=True,
        last_payment_month=2,
        last_payment_year=2024,
    )
    last_year = _sub(
        "last-year",
        datetime(2024, 3, 1),
        paid_this_period=True,
        last_payment_month=2,
        last_payment_year=2023,
    )
    unpaid = _sub("unpaid", datetime(2024, 3, 1))

    stale = stale_paid_subscriptions(
        [fresh, last_year, unpaid],
        datetime(2024, 2, 20),
    )

    assert [s.id for s in stale] == ["last-year"]


def test_stale_paid_flag_due_in_reference_month_is_due_this_period() -> None:
    """A stale paid flag leaves a same-month subscription due, not upcoming."""
    stale = _sub(
        "stale",
        datetime(2024, 2, 20),
        paid_this_period=True,
        last_payment_month=1,
        last_payment_year=2024,
    )

    buckets = classify_subscriptions([stale], datetime(2024, 2, 5))

    assert [s.id for s in buckets.due_this_period] == ["stale"]
    assert buckets.overdue == []
    assert buckets.upcoming == []
