"""SQLAlchemy-backed finance store."""

from collections.abc import Sequence
from dataclasses import asdict, replace
from decimal import Decimal
from typing import Any
from uuid import uuid4

from sqlalchemy import DateTime, Numeric, Table, delete, func, insert, select
from sqlalchemy import update as sql_update
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_store import FinanceStorePort
from src.domain.constants import DEFAULT_CATEGORIES, DEFAULT_PROFILES
from src.domain.errors import DataIntegrityError, RecordNotFoundError
from src.domain.models import (
    AppSettings,
    BalanceEffect,
    BankAccount,
    BankCard,
    Budget,
    BudgetItem,
    Category,
    Debt,
    FinanceSnapshot,
    Investment,
    Profile,
    SavingsGoal,
    Subscription,
    TangibleAsset,
    Transaction,
)
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_datetime,
)
from src.infrastructure import finance_tables as tables
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyFinanceStore(FinanceStorePort):
    """Finance store persisting records through SQLAlchemy Core.

    Rows are converted to domain records at this boundary: numeric columns
    become ``Decimal`` and date columns become naive ``datetime`` values,
    whatever representation the backend returned.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def ensure_schema(self) -> None:
        """Create the finance tables if they do not exist."""
        engine = self._db_port.get_finance_engine()
        tables.metadata.create_all(engine)

    def seed_defaults(self) -> bool:
        """Insert default profiles and categories when none exist.

        Returns:
            bool: True when defaults were inserted.
        """
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            count = conn.execute(
                select(func.count()).select_from(tables.profiles)
            ).scalar_one()
            if count:
                return False
            conn.execute(
                insert(tables.profiles),
                [
                    {"id": uuid4().hex, "name": name, "color": color}
                    for name, color in DEFAULT_PROFILES
                ],
            )
            conn.execute(
                insert(tables.categories),
                [
                    {
                        "id": uuid4().hex,
                        "name": name,
                        "kind": kind,
                        "color": color,
                    }
                    for name, kind, color in DEFAULT_CATEGORIES
                ],
            )
        self._logger.info(
            f"Seeded {len(DEFAULT_PROFILES)} profiles and "
            f"{len(DEFAULT_CATEGORIES)} categories"
        )
        return True

    def load_snapshot(self) -> FinanceSnapshot:
        """Return every list-typed record read over one connection."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            snapshot = FinanceSnapshot(
                transactions=self._select(conn, Transaction),
                accounts=self._select(conn, BankAccount),
                cards=self._select(conn, BankCard),
                debts=self._select(conn, Debt),
                subscriptions=self._select(conn, Subscription),
                budgets=self._select_budgets(conn),
                investments=self._select(conn, Investment),
                tangible_assets=self._select(conn, TangibleAsset),
                goals=self._select(conn, SavingsGoal),
            )
        self._logger.info(
            f"Loaded snapshot with {len(snapshot.transactions)} transactions"
        )
        return snapshot

    def list_transactions(self) -> list[Transaction]:
        return self._list(Transaction)

    def list_bank_accounts(self) -> list[BankAccount]:
        return self._list(BankAccount)

    def list_bank_cards(self) -> list[BankCard]:
        return self._list(BankCard)

    def list_debts(self) -> list[Debt]:
        return self._list(Debt)

    def list_subscriptions(self) -> list[Subscription]:
        return self._list(Subscription)

    def list_budgets(self) -> list[Budget]:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            return self._select_budgets(conn)

    def list_investments(self) -> list[Investment]:
        return self._list(Investment)

    def list_tangible_assets(self) -> list[TangibleAsset]:
        return self._list(TangibleAsset)

    def list_goals(self) -> list[SavingsGoal]:
        return self._list(SavingsGoal)

    def list_profiles(self) -> list[Profile]:
        return self._list(Profile)

    def list_categories(self) -> list[Category]:
        return self._list(Category)

    def add(self, record: Any) -> Any:
        """Insert a record, assigning an id when it has none.

        Args:
            record: Domain record to insert.

        Returns:
            Any: The stored record.
        """
        table = self._table_for(type(record))
        if not record.id:
            record = replace(record, id=uuid4().hex)
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            self._insert_row(conn, record)
        self._logger.info(f"Added {table.name} record {record.id}")
        return record

    def update(self, record: Any) -> Any:
        """Replace a stored record by id.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            self._update_row(conn, record)
        self._logger.info(
            f"Updated {self._table_for(type(record)).name} record {record.id}"
        )
        return record

    def delete(self, record_type: type, record_id: str) -> None:
        """Delete a record by type and id.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            self._delete_row(conn, record_type, record_id)
        self._logger.info(
            f"Deleted {self._table_for(record_type).name} record {record_id}"
        )

    def record_transaction(
        self,
        transaction: Transaction,
        effects: list[BalanceEffect],
        inserts: Sequence[Any] = (),
        updates: Sequence[Any] = (),
        deletes: Sequence[tuple[type, str]] = (),
    ) -> Transaction:
        """Insert a transaction and apply its balance effects atomically.

        Records created, replaced or removed because of the transaction,
        such as a new investment, a paid debt or a sold asset, are written
        in the same database transaction.

        Args:
            transaction: Transaction to insert.
            effects: Deltas computed by the ledger service.
            inserts: Records with assigned ids inserted alongside the
                transaction.
            updates: Records replaced by id alongside the transaction.
            deletes: ``(record_type, record_id)`` pairs removed alongside
                the transaction.

        Returns:
            Transaction: The stored transaction.

        Raises:
            RecordNotFoundError: If an effect, update or delete targets an
                unknown record; the whole write is rolled back.
            DataIntegrityError: If an inserted record has no id.
        """
        if not transaction.id:
            transaction = replace(transaction, id=uuid4().hex)
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(tables.transactions).values(
                    **self._to_row(tables.transactions, transaction)
                )
            )
            for record in inserts:
                if not record.id:
                    raise DataIntegrityError(
                        f"{type(record).__name__} inserted with a transaction "
                        "needs an id"
                    )
                self._insert_row(conn, record)
            for effect in effects:
                table = tables.TABLES_BY_NAME[effect.collection]
                column = table.c[effect.field]
                result = conn.execute(
                    sql_update(table)
                    .where(table.c.id == effect.record_id)
                    .values({column: column + effect.delta})
                )
                if result.rowcount == 0:
                    raise RecordNotFoundError(table.name, effect.record_id)
            for record in updates:
                self._update_row(conn, record)
            for record_type, record_id in deletes:
                self._delete_row(conn, record_type, record_id)
        self._logger.info(
            f"Recorded {transaction.type} {transaction.id} "
            f"with {len(effects)} balance effects"
        )
        return transaction

    def set_favorite_budget(self, budget_id: str) -> None:
        """Flag one budget as favorite and clear the flag on the others."""
        table = tables.budgets
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            exists = conn.execute(
                select(table.c.id).where(table.c.id == budget_id)
            ).first()
            if exists is None:
                raise RecordNotFoundError(table.name, budget_id)
            conn.execute(sql_update(table).values(is_favorite=False))
            conn.execute(
                sql_update(table)
                .where(table.c.id == budget_id)
                .values(is_favorite=True)
            )

    def get_settings(self, defaults: AppSettings | None = None) -> AppSettings:
        """Return stored settings, falling back to defaults per key.

        Args:
            defaults: Values used for keys that were never stored.
        """
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(select(tables.app_settings)).all()
        values = {row.key: row.value for row in rows}
        defaults = defaults or AppSettings()
        return AppSettings(
            currency=normalize_currency_code(values.get("currency"))
            or defaults.currency,
            large_transaction_threshold=coerce_decimal(
                values.get(
                    "large_transaction_threshold",
                    defaults.large_transaction_threshold,
                )
            ),
            show_sensitive_data=values.get(
                "show_sensitive_data",
                str(defaults.show_sensitive_data),
            )
            == "True",
        )

    def update_settings(self, settings: AppSettings) -> None:
        """Persist every settings key."""
        normalize_currency_code(settings.currency)
        payload = [
            {"key": "currency", "value": settings.currency},
            {
                "key": "large_transaction_threshold",
                "value": str(settings.large_transaction_threshold),
            },
            {
                "key": "show_sensitive_data",
                "value": str(bool(settings.show_sensitive_data)),
            },
        ]
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(delete(tables.app_settings))
            conn.execute(insert(tables.app_settings), payload)

    def _list(self, record_type: type) -> list:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            return self._select(conn, record_type)

    def _insert_row(self, conn: Connection, record: Any) -> None:
        table = self._table_for(type(record))
        conn.execute(insert(table).values(**self._to_row(table, record)))
        if isinstance(record, Budget):
            self._insert_budget_items(conn, record)

    def _update_row(self, conn: Connection, record: Any) -> None:
        table = self._table_for(type(record))
        row = self._to_row(table, record)
        row.pop("id")
        result = conn.execute(
            sql_update(table).where(table.c.id == record.id).values(**row)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError(table.name, record.id)
        if isinstance(record, Budget):
            conn.execute(
                delete(tables.budget_items).where(
                    tables.budget_items.c.budget_id == record.id
                )
            )
            self._insert_budget_items(conn, record)

    def _delete_row(
        self,
        conn: Connection,
        record_type: type,
        record_id: str,
    ) -> None:
        table = self._table_for(record_type)
        if record_type is Budget:
            conn.execute(
                delete(tables.budget_items).where(
                    tables.budget_items.c.budget_id == record_id
                )
            )
        result = conn.execute(delete(table).where(table.c.id == record_id))
        if result.rowcount == 0:
            raise RecordNotFoundError(table.name, record_id)

    def _select(self, conn: Connection, record_type: type) -> list:
        table = self._table_for(record_type)
        order_column = self._order_column(table)
        rows = conn.execute(
            select(table).order_by(order_column, table.c.id)
        ).all()
        return [
            record_type(**self._from_row(table, row._mapping)) for row in rows
        ]

    def _select_budgets(self, conn: Connection) -> list[Budget]:
        items_table = tables.budget_items
        item_rows = conn.execute(
            select(items_table).order_by(
                items_table.c.budget_id,
                items_table.c.position,
            )
        ).all()
        items: dict[str, list[BudgetItem]] = {}
        for row in item_rows:
            items.setdefault(row.budget_id, []).append(
                BudgetItem(
                    category=row.category,
                    percentage=coerce_decimal(row.percentage),
                )
            )
        return [
            replace(budget, items=tuple(items.get(budget.id, ())))
            for budget in self._select(conn, Budget)
        ]

    @staticmethod
    def _insert_budget_items(conn: Connection, budget: Budget) -> None:
        if not budget.items:
            return
        conn.execute(
            insert(tables.budget_items),
            [
                {
                    "budget_id": budget.id,
                    "position": position,
                    "category": item.category,
                    "percentage": coerce_decimal(item.percentage),
                }
                for position, item in enumerate(budget.items)
            ],
        )

    @staticmethod
    def _table_for(record_type: type) -> Table:
        try:
            return tables.RECORD_TABLES[record_type]
        except KeyError as exc:
            raise TypeError(
                f"{record_type.__name__} is not stored by the finance store"
            ) from exc

    @staticmethod
    def _order_column(table: Table):
        for name in ("date", "due_date", "name"):
            if name in table.c:
                return table.c[name]
        return table.c.id

    @staticmethod
    def _to_row(table: Table, record: Any) -> dict[str, Any]:
        raw = asdict(record)
        row: dict[str, Any] = {}
        for column in table.columns:
            value = raw.get(column.name)
            if value is not None and isinstance(column.type, DateTime):
                value = normalize_datetime(value, column.name)
            elif value is not None and isinstance(column.type, Numeric):
                value = coerce_decimal(value)
            row[column.name] = value
        return row

    @staticmethod
    def _from_row(table: Table, mapping) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for column in table.columns:
            value = mapping[column.name]
            if value is None:
                if not column.nullable and isinstance(column.type, DateTime):
                    raise DataIntegrityError(
                        f"{table.name}.{column.name} is missing for "
                        f"record {mapping['id']}"
                    )
                if isinstance(column.type, Numeric) and not column.nullable:
                    value = Decimal("0")
            elif isinstance(column.type, DateTime):
                value = normalize_datetime(value, f"{table.name}.{column.name}")
            elif isinstance(column.type, Numeric):
                value = coerce_decimal(value)
            values[column.name] = value
        return values


__all__ = ["SqlAlchemyFinanceStore"]
