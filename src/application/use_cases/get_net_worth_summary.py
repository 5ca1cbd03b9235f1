"""Use case to compute net worth from the finance store."""

from src.application.ports.finance_store import FinanceStorePort
from src.domain.constants import ALL_PROFILES
from src.domain.models import FinanceSnapshot, NetWorthSummary
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth for one profile or for every profile."""

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
        profile: str = ALL_PROFILES,
        snapshot: FinanceSnapshot | None = None,
    ) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            profile: Profile name or ``ALL_PROFILES``.
            snapshot: Already loaded snapshot; read from the store if None.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        data = snapshot or self._store.load_snapshot()
        summary = compute_net_worth_summary(
            data.accounts,
            data.cards,
            data.debts,
            data.investments,
            data.tangible_assets,
            profile,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth computed for profile={profile}: "
            f"assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
