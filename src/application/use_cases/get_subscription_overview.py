"""Use case to classify subscriptions for the current period."""

from dataclasses import dataclass
from datetime import datetime

from src.application.ports.finance_store import FinanceStorePort
from src.domain.models import (
    FinanceSnapshot,
    SubscriptionBuckets,
    SubscriptionSummary,
)
from src.domain.policies import filter_by_profile
from src.domain.services.filters import PeriodFilter, filter_transactions
from src.domain.services.subscriptions import (
    classify_subscriptions,
    summarize_subscriptions,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SubscriptionOverview:
    """Subscription buckets and headline figures for one profile."""

    buckets: SubscriptionBuckets
    summary: SubscriptionSummary


class GetSubscriptionOverviewUseCase:
    """Classify subscriptions and summarize their cost."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing the finance records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        reference_date: datetime | None = None,
        period: PeriodFilter | None = None,
        snapshot: FinanceSnapshot | None = None,
    ) -> SubscriptionOverview:
        """Return the subscription overview.

        Args:
            reference_date: Date defining the current period; now if None.
            period: Profile and transaction period used for the expense
                share. Defaults to the reference month for all profiles.
            snapshot: Already loaded snapshot; read from the store if None.

        Returns:
            SubscriptionOverview: Buckets and summary figures.
        """
        reference = reference_date or datetime.now()
        selected = period or PeriodFilter.current_month(reference)
        data = snapshot or self._store.load_snapshot()

        subscriptions = filter_by_profile(data.subscriptions, selected.profile)
        buckets = classify_subscriptions(subscriptions, reference)
        summary = summarize_subscriptions(
            subscriptions,
            filter_transactions(data.transactions, selected),
        )
        self._logger.info(
            f"Classified {len(subscriptions)} subscriptions: "
            f"overdue={len(buckets.overdue)}, "
            f"this_period={len(buckets.due_this_period)}, "
            f"upcoming={len(buckets.upcoming)}, "
            f"cancelled={len(buckets.cancelled)}"
        )
        return SubscriptionOverview(buckets=buckets, summary=summary)


__all__ = ["GetSubscriptionOverviewUseCase", "SubscriptionOverview"]
