"""Use case to compare a budget with the spend of a period."""

from datetime import datetime

from src.application.ports.finance_store import FinanceStorePort
from src.domain.models import Budget, BudgetVarianceRow, FinanceSnapshot
from src.domain.services.budget import compute_budget_variance
from src.domain.services.filters import PeriodFilter, filter_transactions
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetVarianceUseCase:
    """Compute planned versus actual spend for a budget."""

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
        budget_id: str | None = None,
        period: PeriodFilter | None = None,
        snapshot: FinanceSnapshot | None = None,
    ) -> list[BudgetVarianceRow]:
        """Return the variance rows of the selected budget.

        Args:
            budget_id: Budget to analyse. Defaults to the favorite budget,
                or the first budget when none is flagged.
            period: Transactions to compare with. Defaults to the current
                month for all profiles.
            snapshot: Already loaded snapshot; read from the store if None.

        Returns:
            list[BudgetVarianceRow]: Empty when no budget is selected.
        """
        data = snapshot or self._store.load_snapshot()
        budget = self._select_budget(data, budget_id)
        if budget is None:
            return []
        selected = period or PeriodFilter.current_month(datetime.now())
        transactions = filter_transactions(data.transactions, selected)
        rows = compute_budget_variance(budget, transactions)
        over_budget = [row.category for row in rows if row.is_over_budget]
        self._logger.info(
            f"Budget {budget.name!r} analysed over {len(transactions)} "
            f"transactions: {len(rows)} categories, "
            f"{len(over_budget)} over budget"
        )
        return rows

    def _select_budget(
        self,
        snapshot: FinanceSnapshot,
        budget_id: str | None,
    ) -> Budget | None:
        if budget_id is None:
            return snapshot.favorite_budget()
        budget = snapshot.find_budget(budget_id)
        if budget is None:
            self._logger.warning(f"Budget {budget_id} not found")
        return budget


__all__ = ["GetBudgetVarianceUseCase", "BudgetVarianceRow"]
