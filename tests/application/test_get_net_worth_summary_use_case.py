"""Tests for the net worth and financial summary use cases."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.domain.models import BankAccount, BankCard, Debt, FinanceSnapshot


def _snapshot() -> FinanceSnapshot:
    return FinanceSnapshot(
        accounts=[
            BankAccount(
                id="acc-1",
                name="Cuenta RUT",
                profile="Personal",
                balance=Decimal("500"),
            ),
            BankAccount(
                id="acc-2",
                name="Empresa",
                profile="Negocio",
                balance=Decimal("2000"),
            ),
        ],
        cards=[
            BankCard(
                id="visa",
                name="Visa",
                profile="Personal",
                card_type="credit",
                account_id="acc-1",
                used_amount=Decimal("100"),
            )
        ],
        debts=[
            Debt(
                id="d1",
                name="Credito",
                profile="Negocio",
                total_amount=Decimal("3000"),
                paid_amount=Decimal("500"),
                due_date=datetime(2024, 3, 1),
                account_id="acc-2",
            )
        ],
    )


def test_execute_loads_snapshot_and_filters_profile() -> None:
    """The use case should read the store once and filter by profile."""
    store = MagicMock()
    store.load_snapshot.return_value = _snapshot()
    logger = MagicMock()

    result = GetNetWorthSummaryUseCase(store, logger=logger).execute(
        "Personal"
    )

    store.load_snapshot.assert_called_once_with()
    assert result.asset_total == Decimal("500")
    assert result.liability_total == Decimal("100")
    assert result.net_worth == Decimal("400")
    logger.info.assert_called_once()


def test_execute_for_all_profiles_can_be_negative() -> None:
    store = MagicMock()
    store.load_snapshot.return_value = _snapshot()

    result = GetNetWorthSummaryUseCase(store, logger=MagicMock()).execute()

    assert result.asset_total == Decimal("2500")
    assert result.liability_total == Decimal("2600")
    assert result.net_worth == Decimal("-100")


def test_execute_uses_given_snapshot_without_reading_store() -> None:
    store = MagicMock()

    result = GetNetWorthSummaryUseCase(store, logger=MagicMock()).execute(
        "Negocio",
        snapshot=_snapshot(),
    )

    store.load_snapshot.assert_not_called()
    assert result.net_worth == Decimal("-500")


def test_financial_summary_reports_breakdown() -> None:
    store = MagicMock()
    store.load_snapshot.return_value = _snapshot()

    result = GetFinancialSummaryUseCase(store, logger=MagicMock()).execute(
        "Personal"
    )

    assert result.main_balance == Decimal("500")
    assert result.credit_card_used == Decimal("100")
    assert result.remaining_debt == Decimal("0")
    assert result.net_worth.net_worth == Decimal("400")
