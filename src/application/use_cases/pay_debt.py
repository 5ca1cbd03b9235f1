"""Use case to record a payment towards a debt."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from src.application.ports.finance_store import FinanceStorePort
from src.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from src.domain.constants import DEBT_PAYMENT_CATEGORY, TRANSACTION_EXPENSE
from src.domain.errors import DataIntegrityError, RecordNotFoundError
from src.domain.models import Debt, Transaction
from src.domain.services.dates import add_months
from src.infrastructure.logging.logger import get_app_logger


class PayDebtUseCase:
    """Record a debt payment and advance the debt due date."""

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
        debt_id: str,
        amount: Decimal,
        account_id: str,
        paid_at: datetime | None = None,
    ) -> Debt:
        """Pay part of a debt.

        Args:
            debt_id: Debt being paid.
            amount: Positive payment amount.
            account_id: Account the payment is debited from.
            paid_at: Payment instant; defaults to now.

        Returns:
            Debt: The updated debt.
        """
        if amount <= 0:
            raise DataIntegrityError(f"Debt payment must be positive: {amount}")
        debt = next(
            (d for d in self._store.list_debts() if d.id == debt_id),
            None,
        )
        if debt is None:
            raise RecordNotFoundError("debts", debt_id)

        updated = replace(
            debt,
            paid_amount=debt.paid_amount + amount,
            due_date=add_months(debt.due_date, 1),
        )
        self._record_transaction.execute(
            Transaction(
                id="",
                type=TRANSACTION_EXPENSE,
                amount=amount,
                description=f"Payment towards {debt.name}",
                category=DEBT_PAYMENT_CATEGORY,
                profile=debt.profile,
                date=paid_at or datetime.now(),
                account_id=account_id,
            ),
            updates=[updated],
        )
        self._logger.info(
            f"Debt {debt.name!r} paid {amount}, "
            f"remaining {updated.remaining_amount}"
        )
        return updated


__all__ = ["PayDebtUseCase"]
