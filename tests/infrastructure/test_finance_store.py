"""Tests for the SQLAlchemy finance store on an in-memory database."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import func, select

from src.domain.errors import RecordNotFoundError
from src.domain.models import (
    AppSettings,
    BalanceEffect,
    BankAccount,
    BankCard,
    Budget,
    BudgetItem,
    Debt,
    Subscription,
    TangibleAsset,
    Transaction,
)
from src.infrastructure import finance_tables as tables
from src.infrastructure.db import _create_engine
from src.infrastructure.finance_store import SqlAlchemyFinanceStore


class _FakeDbPort:
    def __init__(self) -> None:
        self.engine = _create_engine("sqlite:///:memory:")

    def get_finance_engine(self):
        return self.engine


@pytest.fixture
def store() -> SqlAlchemyFinanceStore:
    finance_store = SqlAlchemyFinanceStore(_FakeDbPort(), logger=MagicMock())
    finance_store.ensure_schema()
    return finance_store


def _account(acc_id: str, balance: str) -> BankAccount:
    return BankAccount(
        id=acc_id,
        name=f"Account {acc_id}",
        profile="Personal",
        balance=Decimal(balance),
    )


def _count(store: SqlAlchemyFinanceStore, table) -> int:
    engine = store._db_port.get_finance_engine()
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(table)).scalar_one()


def test_seed_defaults_runs_once(store) -> None:
    assert store.seed_defaults() is True
    assert store.seed_defaults() is False

    names = [profile.name for profile in store.list_profiles()]
    assert names == ["Negocio", "Personal"]
    assert len(store.list_categories()) == 14


def test_add_assigns_id_and_round_trips_values(store) -> None:
    stored = store.add(
        Subscription(
            id="",
            name="Spotify",
            amount=Decimal("5490.50"),
            due_date=datetime(2024, 2, 10, 8, 30),
            card_id="visa",
            profile="Personal",
        )
    )

    assert stored.id
    (loaded,) = store.list_subscriptions()
    assert loaded == stored
    assert isinstance(loaded.amount, Decimal)
    assert loaded.due_date == datetime(2024, 2, 10, 8, 30)


def test_add_normalizes_date_inputs(store) -> None:
    store.add(
        Transaction(
            id="t1",
            type="income",
            amount=Decimal("100"),
            category="Sueldo",
            profile="Personal",
            date="2024-02-01T09:00:00",
            account_id="acc-1",
        )
    )

    (loaded,) = store.list_transactions()
    assert loaded.date == datetime(2024, 2, 1, 9, 0)


def test_update_and_delete_unknown_records_raise(store) -> None:
    with pytest.raises(RecordNotFoundError):
        store.update(_account("ghost", "0"))
    with pytest.raises(RecordNotFoundError):
        store.delete(BankAccount, "ghost")


def test_update_and_delete_existing_record(store) -> None:
    account = store.add(_account("acc-1", "100"))

    store.update(replace(account, name="Renamed"))
    assert store.list_bank_accounts()[0].name == "Renamed"

    store.delete(BankAccount, "acc-1")
    assert store.list_bank_accounts() == []


def test_record_transaction_applies_effects(store) -> None:
    store.add(_account("acc-1", "1000"))
    store.add(_account("acc-2", "50"))
    store.add(
        BankCard(
            id="visa",
            name="Visa",
            profile="Personal",
            card_type="credit",
            account_id="acc-1",
        )
    )
    transfer = Transaction(
        id="",
        type="transfer",
        amount=Decimal("300"),
        category="Transferencia Interna",
        profile="Personal",
        date=datetime(2024, 2, 1),
        account_id="acc-1",
        destination_account_id="acc-2",
    )

    stored = store.record_transaction(
        transfer,
        [
            BalanceEffect("bank_accounts", "acc-1", "balance", Decimal("-300")),
            BalanceEffect("bank_accounts", "acc-2", "balance", Decimal("300")),
            BalanceEffect("bank_cards", "visa", "used_amount", Decimal("25")),
        ],
    )

    balances = {a.id: a.balance for a in store.list_bank_accounts()}
    assert balances == {"acc-1": Decimal("700"), "acc-2": Decimal("350")}
    assert store.list_bank_cards()[0].used_amount == Decimal("25")
    assert [tx.id for tx in store.list_transactions()] == [stored.id]


def test_record_transaction_rolls_back_on_unknown_target(store) -> None:
    store.add(_account("acc-1", "1000"))
    expense = Transaction(
        id="t1",
        type="expense",
        amount=Decimal("10"),
        category="Supermercado",
        profile="Personal",
        date=datetime(2024, 2, 1),
        account_id="acc-1",
    )

    with pytest.raises(RecordNotFoundError):
        store.record_transaction(
            expense,
            [
                BalanceEffect("bank_accounts", "acc-1", "balance", Decimal("-10")),
                BalanceEffect("bank_cards", "ghost", "used_amount", Decimal("10")),
            ],
        )

    assert store.list_bank_accounts()[0].balance == Decimal("1000")
    assert _count(store, tables.transactions) == 0


def _debt() -> Debt:
    return Debt(
        id="loan",
        name="Credito",
        profile="Personal",
        total_amount=Decimal("1000"),
        due_date=datetime(2024, 2, 10),
        account_id="acc-1",
    )


def test_record_transaction_writes_related_updates_and_deletes(store) -> None:
    store.add(_account("acc-1", "1000"))
    debt = store.add(_debt())
    store.add(
        TangibleAsset(
            id="car",
            name="Auto",
            profile="Personal",
            estimated_value=Decimal("5000"),
        )
    )
    payment = Transaction(
        id="",
        type="expense",
        amount=Decimal("100"),
        category="Pago de Deuda",
        profile="Personal",
        date=datetime(2024, 2, 1),
        account_id="acc-1",
    )

    store.record_transaction(
        payment,
        [BalanceEffect("bank_accounts", "acc-1", "balance", Decimal("-100"))],
        updates=[replace(debt, paid_amount=Decimal("100"))],
        deletes=[(TangibleAsset, "car")],
    )

    assert store.list_debts()[0].paid_amount == Decimal("100")
    assert store.list_tangible_assets() == []
    assert store.list_bank_accounts()[0].balance == Decimal("900")


def test_record_transaction_rolls_back_when_related_update_fails(store) -> None:
    store.add(_account("acc-1", "1000"))
    payment = Transaction(
        id="t1",
        type="expense",
        amount=Decimal("100"),
        category="Pago de Deuda",
        profile="Personal",
        date=datetime(2024, 2, 1),
        account_id="acc-1",
    )

    with pytest.raises(RecordNotFoundError):
        store.record_transaction(
            payment,
            [BalanceEffect("bank_accounts", "acc-1", "balance", Decimal("-100"))],
            updates=[_debt()],
        )

    assert store.list_bank_accounts()[0].balance == Decimal("1000")
    assert _count(store, tables.transactions) == 0


def test_budget_items_round_trip_and_favorite_flag(store) -> None:
    first = store.add(
        Budget(
            id="b1",
            name="Base",
            profile="Personal",
            items=(
                BudgetItem("Supermercado", Decimal("30")),
                BudgetItem("Transporte", Decimal("10")),
            ),
            is_favorite=True,
        )
    )
    store.add(Budget(id="b2", name="Strict", profile="Personal"))

    store.update(
        Budget(
            id=first.id,
            name="Base",
            profile="Personal",
            items=(BudgetItem("Cuentas", Decimal("25.5")),),
            is_favorite=True,
        )
    )
    store.set_favorite_budget("b2")

    budgets = {budget.id: budget for budget in store.list_budgets()}
    assert budgets["b1"].items == (BudgetItem("Cuentas", Decimal("25.5")),)
    assert budgets["b1"].is_favorite is False
    assert budgets["b2"].is_favorite is True
    assert store.load_snapshot().favorite_budget().id == "b2"

    store.delete(Budget, "b1")
    assert _count(store, tables.budget_items) == 0


def test_set_favorite_budget_requires_existing_budget(store) -> None:
    with pytest.raises(RecordNotFoundError):
        store.set_favorite_budget("missing")


def test_settings_default_and_round_trip(store) -> None:
    assert store.get_settings() == AppSettings()

    store.update_settings(
        AppSettings(
            currency="USD",
            large_transaction_threshold=Decimal("2500"),
            show_sensitive_data=False,
        )
    )

    settings = store.get_settings()
    assert settings.currency == "USD"
    assert settings.large_transaction_threshold == Decimal("2500")
    assert settings.show_sensitive_data is False


def test_unstored_settings_fall_back_to_given_defaults(store) -> None:
    defaults = AppSettings(
        currency="EUR",
        large_transaction_threshold=Decimal("10"),
        show_sensitive_data=False,
    )

    assert store.get_settings(defaults=defaults) == defaults


def test_load_snapshot_reads_every_collection(store) -> None:
    store.add(_account("acc-1", "10"))
    store.add(Budget(id="b1", name="Base", profile="Personal"))

    snapshot = store.load_snapshot()

    assert [a.id for a in snapshot.accounts] == ["acc-1"]
    assert [b.id for b in snapshot.budgets] == ["b1"]
    assert snapshot.transactions == []
    assert snapshot.goals == []


def test_unsupported_record_type_is_rejected(store) -> None:
    with pytest.raises(TypeError):
        store.add(AppSettings())
