"""Tests for notification rules."""

from datetime import datetime
from decimal import Decimal

from src.domain.models import Debt, SavingsGoal, Subscription
from src.domain.services.notifications import (
    build_notifications,
    reached_goals,
)

NOW = datetime(2024, 2, 15, 12, 0)


def _debt(debt_id: str, due_date: datetime, paid: str = "0") -> Debt:
    return Debt(
        id=debt_id,
        name=f"Debt {debt_id}",
        profile="Personal",
        total_amount=Decimal("1000"),
        paid_amount=Decimal(paid),
        due_date=due_date,
        account_id="acc-1",
    )


def _goal(goal_id: str, current: str, notified: bool = False) -> SavingsGoal:
    return SavingsGoal(
        id=goal_id,
        name=f"Goal {goal_id}",
        profile="Personal",
        target_amount=Decimal("500"),
        current_amount=Decimal(current),
        completion_notified=notified,
    )


def test_overdue_and_upcoming_debts() -> None:
    debts = [
        _debt("late", datetime(2024, 2, 1)),
        _debt("soon", datetime(2024, 3, 1)),
        _debt("far", datetime(2024, 6, 1)),
        _debt("paid", datetime(2024, 1, 1), paid="1000"),
    ]

    notifications = build_notifications(debts, [], [], NOW)

    assert [(n.id, n.type) for n in notifications] == [
        ("debt-late", "error"),
        ("debt-due-soon", "warning"),
    ]
    assert notifications[0].link == "/debts/late"


def test_unpaid_past_due_subscription_is_reported() -> None:
    subscriptions = [
        Subscription(
            id="netflix",
            name="Netflix",
            amount=Decimal("9000"),
            due_date=datetime(2024, 2, 1),
            card_id="visa",
            profile="Personal",
        ),
        Subscription(
            id="spotify",
            name="Spotify",
            amount=Decimal("5000"),
            due_date=datetime(2024, 2, 1),
            card_id="visa",
            profile="Personal",
            paid_this_period=True,
            last_payment_month=2,
            last_payment_year=2024,
        ),
        Subscription(
            id="old",
            name="Old",
            amount=Decimal("1000"),
            due_date=datetime(2023, 1, 1),
            card_id="visa",
            profile="Personal",
            status="cancelled",
        ),
    ]

    notifications = build_notifications([], subscriptions, [], NOW)

    assert [n.id for n in notifications] == ["sub-overdue-netflix"]
    assert notifications[0].link == "/subscriptions"


def test_reached_goals_are_reported_once() -> None:
    goals = [
        _goal("done", "500"),
        _goal("announced", "600", notified=True),
        _goal("pending", "100"),
    ]

    notifications = build_notifications([], [], goals, NOW)

    assert [(n.id, n.type) for n in notifications] == [
        ("goal-done", "success")
    ]
    assert [g.id for g in reached_goals(goals)] == ["done"]
