"""Use cases that open, fund and close investments.

Money for an investment moves through the portfolio account of its
profile: the bank account whose purpose matches the investment purpose.
"""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from src.application.ports.finance_store import FinanceStorePort
from src.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from src.domain.constants import (
    INVESTMENT_CONTRIBUTION_CATEGORY,
    INVESTMENT_INCOME_CATEGORY,
    PORTFOLIO_ACCOUNT_PURPOSES,
    TRANSACTION_EXPENSE,
    TRANSACTION_INCOME,
)
from src.domain.errors import (
    DataIntegrityError,
    InsufficientFundsError,
    RecordNotFoundError,
)
from src.domain.models import BankAccount, Investment, Transaction
from src.infrastructure.logging.logger import get_app_logger


def _find_investment(
    store: FinanceStorePort,
    investment_id: str,
) -> Investment:
    for investment in store.list_investments():
        if investment.id == investment_id:
            return investment
    raise RecordNotFoundError("investments", investment_id)


def _portfolio_account(
    store: FinanceStorePort,
    investment: Investment,
) -> BankAccount:
    purpose = PORTFOLIO_ACCOUNT_PURPOSES.get(investment.purpose)
    if purpose is None:
        raise DataIntegrityError(
            f"Unknown investment purpose: {investment.purpose!r}"
        )
    for account in store.list_bank_accounts():
        if account.profile == investment.profile and account.purpose == purpose:
            return account
    raise DataIntegrityError(
        f"No {purpose} account for profile {investment.profile!r}"
    )


def _contribution(
    investment: Investment,
    account: BankAccount,
    amount: Decimal,
    when: datetime,
) -> Transaction:
    if amount > account.balance:
        raise InsufficientFundsError(account.id, account.balance, amount)
    return Transaction(
        id="",
        type=TRANSACTION_EXPENSE,
        amount=amount,
        description=f"Contribution to {investment.purpose}: {investment.name}",
        category=INVESTMENT_CONTRIBUTION_CATEGORY,
        profile=investment.profile,
        date=when,
        account_id=account.id,
    )


class _InvestmentUseCase:
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
            record_transaction: Use case recording the portfolio movement.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._record_transaction = record_transaction or (
            RecordTransactionUseCase(store, logger=self._logger)
        )


class AddInvestmentUseCase(_InvestmentUseCase):
    """Open an investment funded from its portfolio account."""

    def execute(self, investment: Investment) -> Investment:
        """Store the investment and debit its initial amount.

        The current value starts at the initial amount.

        Args:
            investment: New investment; an empty id is assigned.

        Returns:
            Investment: The stored investment.

        Raises:
            DataIntegrityError: If the initial amount is negative or the
                profile has no portfolio account.
            InsufficientFundsError: If the portfolio cannot cover the
                initial amount.
        """
        if investment.initial_amount < 0:
            raise DataIntegrityError(
                f"Initial amount must be non-negative: "
                f"{investment.initial_amount}"
            )
        when = investment.start_date or datetime.now()
        opened = replace(
            investment,
            id=investment.id or uuid4().hex,
            current_value=investment.initial_amount,
            start_date=when,
        )
        if not opened.initial_amount:
            stored = self._store.add(opened)
        else:
            account = _portfolio_account(self._store, opened)
            self._record_transaction.execute(
                _contribution(opened, account, opened.initial_amount, when),
                inserts=[opened],
            )
            stored = opened
        self._logger.info(
            f"Opened {stored.purpose} {stored.name!r} with "
            f"{stored.initial_amount}"
        )
        return stored


class ContributeToInvestmentUseCase(_InvestmentUseCase):
    """Add money to an existing investment."""

    def execute(
        self,
        investment_id: str,
        amount: Decimal,
        contributed_at: datetime | None = None,
    ) -> Investment:
        """Debit the portfolio and raise the investment value and cost.

        Raises:
            DataIntegrityError: If the amount is not positive or the profile
                has no portfolio account.
            InsufficientFundsError: If the portfolio cannot cover the amount.
        """
        if amount <= 0:
            raise DataIntegrityError(
                f"Investment contribution must be positive: {amount}"
            )
        investment = _find_investment(self._store, investment_id)
        account = _portfolio_account(self._store, investment)
        transaction = _contribution(
            investment,
            account,
            amount,
            contributed_at or datetime.now(),
        )
        updated = replace(
            investment,
            current_value=(
                investment.current_value or investment.initial_amount
            )
            + amount,
            initial_amount=investment.initial_amount + amount,
        )
        self._record_transaction.execute(transaction, updates=[updated])
        self._logger.info(
            f"Investment {investment.name!r} received {amount}, "
            f"value now {updated.current_value}"
        )
        return updated


class CloseInvestmentUseCase(_InvestmentUseCase):
    """Liquidate an investment into its portfolio account."""

    def execute(
        self,
        investment_id: str,
        final_value: Decimal,
        closed_at: datetime | None = None,
    ) -> Transaction:
        """Record the final value as income and remove the investment.

        Returns:
            Transaction: The liquidation income.

        Raises:
            DataIntegrityError: If the final value is negative or the
                profile has no portfolio account.
        """
        if final_value < 0:
            raise DataIntegrityError(
                f"Final value must be non-negative: {final_value}"
            )
        investment = _find_investment(self._store, investment_id)
        account = _portfolio_account(self._store, investment)
        stored = self._record_transaction.execute(
            Transaction(
                id="",
                type=TRANSACTION_INCOME,
                amount=final_value,
                description=(
                    f"Liquidation of {investment.purpose}: {investment.name}"
                ),
                category=INVESTMENT_INCOME_CATEGORY,
                profile=investment.profile,
                date=closed_at or datetime.now(),
                account_id=account.id,
            ),
            deletes=[(Investment, investment.id)],
        )
        self._logger.info(
            f"Closed {investment.purpose} {investment.name!r} at {final_value}"
        )
        return stored


__all__ = [
    "AddInvestmentUseCase",
    "ContributeToInvestmentUseCase",
    "CloseInvestmentUseCase",
]
