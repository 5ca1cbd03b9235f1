"""Use case to compute the dashboard financial breakdown."""

from src.application.ports.finance_store import FinanceStorePort
from src.domain.constants import ALL_PROFILES
from src.domain.models import FinanceSnapshot, FinancialSummary
from src.domain.services.finance import compute_financial_summary
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute balances by purpose next to the net worth figure."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        profile: str = ALL_PROFILES,
        snapshot: FinanceSnapshot | None = None,
    ) -> FinancialSummary:
        """Return the financial summary for the selected profile."""
        data = snapshot or self._store.load_snapshot()
        summary = compute_financial_summary(
            data.accounts,
            data.cards,
            data.debts,
            data.investments,
            data.tangible_assets,
            data.goals,
            profile,
            logger=self._logger,
        )
        self._logger.info(
            f"Financial summary computed for profile={profile}: "
            f"main_balance={summary.main_balance}, "
            f"net_worth={summary.net_worth.net_worth}"
        )
        return summary


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
