"""Use cases that change the lifecycle of a subscription."""

from dataclasses import replace
from datetime import datetime

from src.application.ports.finance_store import FinanceStorePort
from src.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from src.domain.constants import (
    SUBSCRIPTION_CANCELLED,
    SUBSCRIPTIONS_CATEGORY,
    TRANSACTION_EXPENSE,
)
from src.domain.errors import DataIntegrityError, RecordNotFoundError
from src.domain.models import Subscription, Transaction
from src.domain.services.subscriptions import (
    mark_subscription_paid,
    stale_paid_subscriptions,
)
from src.infrastructure.logging.logger import get_app_logger


def _find_subscription(
    store: FinanceStorePort,
    subscription_id: str,
) -> Subscription:
    for subscription in store.list_subscriptions():
        if subscription.id == subscription_id:
            return subscription
    raise RecordNotFoundError("subscriptions", subscription_id)


class PaySubscriptionUseCase:
    """Record a subscription payment and move it to its next due date."""

    def __init__(
        self,
        store: FinanceStorePort,
        logger=None,
        record_transaction: RecordTransactionUseCase | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing the finance records.
            logger: Optional logger compatible with logging.Logger-like API.
            record_transaction: Use case recording the payment expense.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._record_transaction = record_transaction or (
            RecordTransactionUseCase(store, logger=self._logger)
        )

    def execute(
        self,
        subscription_id: str,
        account_id: str | None = None,
        card_id: str | None = None,
        paid_at: datetime | None = None,
    ) -> Subscription:
        """Pay the subscription.

        The payment debits the account linked to the subscription card
        unless an explicit account or card is given.

        Args:
            subscription_id: Subscription to pay.
            account_id: Optional account overriding the card's account.
            card_id: Optional card charged instead of the account.
            paid_at: Payment instant; defaults to now.

        Returns:
            Subscription: The updated subscription.

        Raises:
            DataIntegrityError: If no paying account can be resolved.
        """
        subscription = _find_subscription(self._store, subscription_id)
        if subscription.status == SUBSCRIPTION_CANCELLED:
            raise DataIntegrityError(
                f"Subscription {subscription.id} is cancelled"
            )
        when = paid_at or datetime.now()
        cards = {card.id: card for card in self._store.list_bank_cards()}
        linked_card = cards.get(subscription.card_id)
        resolved_account = account_id or (
            linked_card.account_id if linked_card else None
        )
        if not resolved_account:
            raise DataIntegrityError(
                f"No payment account for subscription {subscription.id}"
            )

        updated = mark_subscription_paid(subscription, when)
        self._record_transaction.execute(
            Transaction(
                id="",
                type=TRANSACTION_EXPENSE,
                amount=subscription.amount,
                description=f"Payment {subscription.name}",
                category=SUBSCRIPTIONS_CATEGORY,
                profile=subscription.profile,
                date=when,
                account_id=resolved_account,
                card_id=card_id,
            ),
            updates=[updated],
        )
        self._logger.info(
            f"Subscription {subscription.name!r} paid, next due "
            f"{updated.due_date:%Y-%m-%d}"
        )
        return updated


class CancelSubscriptionUseCase:
    """Mark a subscription as cancelled."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        subscription_id: str,
        cancelled_at: datetime | None = None,
    ) -> Subscription:
        """Cancel the subscription and stamp the cancellation date."""
        subscription = _find_subscription(self._store, subscription_id)
        updated = self._store.update(
            replace(
                subscription,
                status=SUBSCRIPTION_CANCELLED,
                cancellation_date=cancelled_at or datetime.now(),
            )
        )
        self._logger.info(f"Subscription {subscription.name!r} cancelled")
        return updated


class ResetSubscriptionPeriodsUseCase:
    """Clear paid flags that belong to a past period."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, now: datetime | None = None) -> int:
        """Reset stale paid flags.

        Args:
            now: Reference instant; defaults to now.

        Returns:
            int: Number of subscriptions reset.
        """
        stale = stale_paid_subscriptions(
            self._store.list_subscriptions(),
            now or datetime.now(),
        )
        for subscription in stale:
            self._store.update(replace(subscription, paid_this_period=False))
        if stale:
            self._logger.info(f"Reset paid flag on {len(stale)} subscriptions")
        return len(stale)


__all__ = [
    "PaySubscriptionUseCase",
    "CancelSubscriptionUseCase",
    "ResetSubscriptionPeriodsUseCase",
]
