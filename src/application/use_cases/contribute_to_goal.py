"""Use case to move money from an account into a savings goal."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from src.application.ports.finance_store import FinanceStorePort
from src.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from src.domain.constants import GOAL_CONTRIBUTION_CATEGORY, TRANSACTION_EXPENSE
from src.domain.errors import (
    DataIntegrityError,
    InsufficientFundsError,
    RecordNotFoundError,
)
from src.domain.models import SavingsGoal, Transaction
from src.infrastructure.logging.logger import get_app_logger


class ContributeToGoalUseCase:
    """Record a goal contribution as an expense of the source account."""

    def __init__(
        self,
        store: FinanceStorePort,
        logger=None,
        record_transaction: RecordTransactionUseCase | None = None,
    ) -> None:
        self._store = store
        self._logger = logger or get_app_logger()
        self._record_transaction = record_transaction or (
            RecordTransactionUseCase(store, logger=self._logger)
        )

    def execute(
        self,
        goal_id: str,
        amount: Decimal,
        source_account_id: str,
        contributed_at: datetime | None = None,
    ) -> SavingsGoal:
        """Contribute to a goal.

        Args:
            goal_id: Goal receiving the money.
            amount: Positive contribution amount.
            source_account_id: Account the contribution is debited from.
            contributed_at: Contribution instant; defaults to now.

        Returns:
            SavingsGoal: The goal with its increased current amount.

        Raises:
            DataIntegrityError: If the amount is not positive.
            RecordNotFoundError: If the goal or the account does not exist.
            InsufficientFundsError: If the account balance is below the
                amount.
        """
        if amount <= 0:
            raise DataIntegrityError(
                f"Goal contribution must be positive: {amount}"
            )
        goal = next(
            (g for g in self._store.list_goals() if g.id == goal_id),
            None,
        )
        if goal is None:
            raise RecordNotFoundError("savings_goals", goal_id)
        account = next(
            (
                a
                for a in self._store.list_bank_accounts()
                if a.id == source_account_id
            ),
            None,
        )
        if account is None:
            raise RecordNotFoundError("bank_accounts", source_account_id)
        if amount > account.balance:
            raise InsufficientFundsError(account.id, account.balance, amount)

        updated = replace(goal, current_amount=goal.current_amount + amount)
        self._record_transaction.execute(
            Transaction(
                id="",
                type=TRANSACTION_EXPENSE,
                amount=amount,
                description=f"Contribution to goal: {goal.name}",
                category=GOAL_CONTRIBUTION_CATEGORY,
                profile=account.profile,
                date=contributed_at or datetime.now(),
                account_id=account.id,
            ),
            updates=[updated],
        )
        self._logger.info(
            f"Goal {goal.name!r} received {amount}, "
            f"now at {updated.current_amount} of {goal.target_amount}"
        )
        return updated


__all__ = ["ContributeToGoalUseCase"]
