"""Use case to build the notification list."""

from dataclasses import replace
from datetime import datetime

from src.application.ports.finance_store import FinanceStorePort
from src.domain.models import AppNotification
from src.domain.services.notifications import (
    build_notifications,
    reached_goals,
)
from src.infrastructure.logging.logger import get_app_logger


class GetNotificationsUseCase:
    """Build notifications and remember which goals were announced."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, now: datetime | None = None) -> list[AppNotification]:
        """Return the current notifications.

        Goals reported as reached are flagged so they are announced once.
        """
        snapshot = self._store.load_snapshot()
        notifications = build_notifications(
            snapshot.debts,
            snapshot.subscriptions,
            snapshot.goals,
            now or datetime.now(),
        )
        for goal in reached_goals(snapshot.goals):
            self._store.update(replace(goal, completion_notified=True))
        self._logger.info(f"Built {len(notifications)} notifications")
        return notifications


__all__ = ["GetNotificationsUseCase"]
