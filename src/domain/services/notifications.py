"""Notifications derived from debts, subscriptions and goals."""

from collections.abc import Iterable
from datetime import datetime, timedelta

from src.domain.constants import SUBSCRIPTION_ACTIVE
from src.domain.models import AppNotification, Debt, SavingsGoal, Subscription
from src.domain.services.dates import add_months
from src.domain.services.subscriptions import is_paid_for_period


def build_notifications(
    debts: Iterable[Debt],
    subscriptions: Iterable[Subscription],
    goals: Iterable[SavingsGoal],
    now: datetime | None = None,
) -> list[AppNotification]:
    """Return the notifications to show for the current state.

    Args:
        debts: Debts to check for overdue or upcoming payments.
        subscriptions: Subscriptions to check for overdue payments.
        goals: Goals to check for completion.
        now: Reference instant. Defaults to now.

    Returns:
        list[AppNotification]: Debt, subscription and goal notifications,
        in that order.
    """
    current = now or datetime.now()
    notifications: list[AppNotification] = []

    for debt in debts:
        if debt.paid_amount >= debt.total_amount:
            continue
        if debt.due_date < current:
            notifications.append(
                AppNotification(
                    id=f"debt-{debt.id}",
                    title="Overdue debt",
                    description=f'The payment of "{debt.name}" is overdue.',
                    date=current,
                    type="error",
                    link=f"/debts/{debt.id}",
                )
            )
        elif debt.due_date <= add_months(current, 1) and (
            debt.due_date >= current - timedelta(days=debt.due_notification_days)
        ):
            notifications.append(
                AppNotification(
                    id=f"debt-due-{debt.id}",
                    title="Debt payment due soon",
                    description=f'"{debt.name}" is due soon.',
                    date=current,
                    type="warning",
                    link=f"/debts/{debt.id}",
                )
            )

    for subscription in subscriptions:
        if subscription.status != SUBSCRIPTION_ACTIVE:
            continue
        if is_paid_for_period(subscription, current):
            continue
        if subscription.due_date < current:
            notifications.append(
                AppNotification(
                    id=f"sub-overdue-{subscription.id}",
                    title="Overdue subscription",
                    description=(
                        f'The payment of "{subscription.name}" is pending.'
                    ),
                    date=current,
                    type="error",
                    link="/subscriptions",
                )
            )

    for goal in reached_goals(goals):
        notifications.append(
            AppNotification(
                id=f"goal-{goal.id}",
                title="Goal reached",
                description=f'You completed the goal "{goal.name}".',
                date=current,
                type="success",
                link="/goals",
            )
        )
    return notifications


def reached_goals(goals: Iterable[SavingsGoal]) -> list[SavingsGoal]:
    """Return goals that reached their target and were not notified yet."""
    return [
        goal
        for goal in goals
        if goal.current_amount >= goal.target_amount
        and not goal.completion_notified
    ]


__all__ = ["build_notifications", "reached_goals"]
