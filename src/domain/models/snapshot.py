"""Read-only snapshot of every list-typed entity."""

from dataclasses import dataclass, field

from src.domain.models.records import (
    BankAccount,
    BankCard,
    Budget,
    Debt,
    Investment,
    SavingsGoal,
    Subscription,
    TangibleAsset,
    Transaction,
)


@dataclass(frozen=True)
class FinanceSnapshot:
    """Consistent set of records read in one store pass.

    Aggregators receive a snapshot instead of reaching for shared state, so
    every computation is a function of explicit inputs.
    """

    transactions: list[Transaction] = field(default_factory=list)
    accounts: list[BankAccount] = field(default_factory=list)
    cards: list[BankCard] = field(default_factory=list)
    debts: list[Debt] = field(default_factory=list)
    subscriptions: list[Subscription] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    investments: list[Investment] = field(default_factory=list)
    tangible_assets: list[TangibleAsset] = field(default_factory=list)
    goals: list[SavingsGoal] = field(default_factory=list)

    def find_budget(self, budget_id: str | None) -> Budget | None:
        """Return the budget with the given id, if any."""
        if budget_id is None:
            return None
        return next((b for b in self.budgets if b.id == budget_id), None)

    def favorite_budget(self) -> Budget | None:
        """Return the favorite budget, falling back to the first one."""
        for budget in self.budgets:
            if budget.is_favorite:
                return budget
        return self.budgets[0] if self.budgets else None


__all__ = ["FinanceSnapshot"]
