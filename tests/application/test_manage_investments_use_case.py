"""Tests for the investment lifecycle use cases."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_investments import (
    AddInvestmentUseCase,
    CloseInvestmentUseCase,
    ContributeToInvestmentUseCase,
)
from src.domain.errors import (
    DataIntegrityError,
    InsufficientFundsError,
    RecordNotFoundError,
)
from src.domain.models import BankAccount, Investment


def _investment(**kwargs) -> Investment:
    values = {
        "id": "etf",
        "name": "ETF Global",
        "profile": "Personal",
        "current_value": Decimal("120000"),
        "initial_amount": Decimal("100000"),
        "purpose": "investment",
    }
    values.update(kwargs)
    return Investment(**values)


def _store(*investments: Investment) -> MagicMock:
    store = MagicMock()
    store.list_investments.return_value = list(investments)
    store.list_bank_accounts.return_value = [
        BankAccount(id="main", name="Cuenta RUT", profile="Personal"),
        BankAccount(
            id="broker",
            name="Broker",
            profile="Personal",
            balance=Decimal("50000"),
            purpose="investment",
        ),
        BankAccount(
            id="rainy-day",
            name="Ahorro",
            profile="Personal",
            balance=Decimal("80000"),
            purpose="savings",
        ),
    ]
    store.add.side_effect = lambda record: record
    return store


def _build(use_case_class, store, recorder):
    return use_case_class(store, logger=MagicMock(), record_transaction=recorder)


def test_add_inserts_investment_with_its_opening_expense() -> None:
    store = _store()
    recorder = MagicMock()

    stored = _build(AddInvestmentUseCase, store, recorder).execute(
        Investment(
            id="",
            name="Deposito",
            profile="Personal",
            current_value=Decimal("0"),
            initial_amount=Decimal("30000"),
            start_date=datetime(2024, 4, 1),
            purpose="saving",
        )
    )

    assert stored.id
    assert stored.current_value == Decimal("30000")
    assert stored.initial_amount == Decimal("30000")
    transaction = recorder.execute.call_args.args[0]
    assert transaction.account_id == "rainy-day"
    assert transaction.amount == Decimal("30000")
    assert transaction.category == "Inversiones y Ahorros"
    assert transaction.date == datetime(2024, 4, 1)
    assert recorder.execute.call_args.kwargs["inserts"] == [stored]
    store.add.assert_not_called()


def test_add_without_initial_amount_only_stores_the_investment() -> None:
    store = _store()
    recorder = MagicMock()

    stored = _build(AddInvestmentUseCase, store, recorder).execute(
        _investment(id="", initial_amount=Decimal("0"))
    )

    store.add.assert_called_once_with(stored)
    assert stored.current_value == Decimal("0")
    recorder.execute.assert_not_called()


def test_add_rejects_initial_amount_above_portfolio_balance() -> None:
    recorder = MagicMock()

    with pytest.raises(InsufficientFundsError):
        _build(AddInvestmentUseCase, _store(), recorder).execute(
            _investment(id="", initial_amount=Decimal("50001"))
        )

    recorder.execute.assert_not_called()


def test_contribute_raises_value_and_cost_basis() -> None:
    store = _store(_investment())
    recorder = MagicMock()

    updated = _build(ContributeToInvestmentUseCase, store, recorder).execute(
        "etf",
        Decimal("20000"),
        contributed_at=datetime(2024, 4, 2),
    )

    assert updated.current_value == Decimal("140000")
    assert updated.initial_amount == Decimal("120000")
    transaction = recorder.execute.call_args.args[0]
    assert transaction.type == "expense"
    assert transaction.account_id == "broker"
    assert recorder.execute.call_args.kwargs["updates"] == [updated]


def test_contribute_to_unvalued_investment_starts_from_cost() -> None:
    store = _store(_investment(current_value=Decimal("0")))

    updated = _build(
        ContributeToInvestmentUseCase,
        store,
        MagicMock(),
    ).execute("etf", Decimal("5000"))

    assert updated.current_value == Decimal("105000")


def test_contribute_without_portfolio_account_fails() -> None:
    store = _store(_investment(profile="Negocio"))
    recorder = MagicMock()

    with pytest.raises(DataIntegrityError):
        _build(ContributeToInvestmentUseCase, store, recorder).execute(
            "etf",
            Decimal("10"),
        )

    recorder.execute.assert_not_called()


def test_close_records_income_and_deletes_investment() -> None:
    store = _store(_investment())
    recorder = MagicMock()
    recorder.execute.side_effect = lambda tx, **kwargs: tx

    income = _build(CloseInvestmentUseCase, store, recorder).execute(
        "etf",
        Decimal("135000"),
        closed_at=datetime(2024, 5, 1),
    )

    assert income.type == "income"
    assert income.amount == Decimal("135000")
    assert income.account_id == "broker"
    assert income.category == "Ingresos por Inversión"
    assert recorder.execute.call_args.kwargs["deletes"] == [
        (Investment, "etf")
    ]
    store.delete.assert_not_called()


@pytest.mark.parametrize(
    ("investment_id", "final_value", "error"),
    [
        ("missing", Decimal("1"), RecordNotFoundError),
        ("etf", Decimal("-1"), DataIntegrityError),
    ],
)
def test_close_rejects_invalid_requests(investment_id, final_value, error):
    recorder = MagicMock()

    with pytest.raises(error):
        _build(CloseInvestmentUseCase, _store(_investment()), recorder).execute(
            investment_id,
            final_value,
        )

    recorder.execute.assert_not_called()
