"""Port for reading and writing finance records."""

from collections.abc import Sequence
from typing import Any, Protocol

from src.domain.models import (
    AppSettings,
    BalanceEffect,
    BankAccount,
    BankCard,
    Budget,
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


class FinanceStorePort(Protocol):
    """Port exposing the records the aggregators consume.

    Readers return records with normalized dates and Decimal amounts.
    Writers return once the store has committed the change.
    """

    def ensure_schema(self) -> None:
        """Create the storage tables when missing."""

    def seed_defaults(self) -> bool:
        """Insert default profiles and categories into an empty store."""

    def load_snapshot(self) -> FinanceSnapshot:
        """Return every list-typed record read in one pass."""

    def list_transactions(self) -> list[Transaction]:
        """Return all transactions."""

    def list_bank_accounts(self) -> list[BankAccount]:
        """Return all bank accounts."""

    def list_bank_cards(self) -> list[BankCard]:
        """Return all bank cards."""

    def list_debts(self) -> list[Debt]:
        """Return all debts."""

    def list_subscriptions(self) -> list[Subscription]:
        """Return all subscriptions."""

    def list_budgets(self) -> list[Budget]:
        """Return all budgets with their items."""

    def list_investments(self) -> list[Investment]:
        """Return all investments."""

    def list_tangible_assets(self) -> list[TangibleAsset]:
        """Return all tangible assets."""

    def list_goals(self) -> list[SavingsGoal]:
        """Return all savings goals."""

    def list_profiles(self) -> list[Profile]:
        """Return all profiles."""

    def list_categories(self) -> list[Category]:
        """Return all categories."""

    def add(self, record: Any) -> Any:
        """Insert a record and return it with its assigned id."""

    def update(self, record: Any) -> Any:
        """Replace a stored record by id."""

    def delete(self, record_type: type, record_id: str) -> None:
        """Delete a record by type and id."""

    def record_transaction(
        self,
        transaction: Transaction,
        effects: list[BalanceEffect],
        inserts: Sequence[Any] = (),
        updates: Sequence[Any] = (),
        deletes: Sequence[tuple[type, str]] = (),
    ) -> Transaction:
        """Insert a transaction and its related writes atomically."""

    def set_favorite_budget(self, budget_id: str) -> None:
        """Flag one budget as favorite and clear the others."""

    def get_settings(self, defaults: AppSettings | None = None) -> AppSettings:
        """Return the stored application settings over ``defaults``."""

    def update_settings(self, settings: AppSettings) -> None:
        """Persist the application settings."""


__all__ = ["FinanceStorePort"]
