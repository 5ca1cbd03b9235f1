"""Domain models package."""

from .finance import (
    AppNotification,
    BalanceEffect,
    BudgetVarianceRow,
    FinancialSummary,
    NetWorthSummary,
    SubscriptionBuckets,
    SubscriptionSummary,
)
from .records import (
    AppSettings,
    BankAccount,
    BankCard,
    Budget,
    BudgetItem,
    Category,
    Debt,
    Investment,
    Profile,
    SavingsGoal,
    Subscription,
    TangibleAsset,
    Transaction,
)
from .snapshot import FinanceSnapshot

__all__ = [
    "AppNotification",
    "BalanceEffect",
    "BudgetVarianceRow",
    "FinancialSummary",
    "NetWorthSummary",
    "SubscriptionBuckets",
    "SubscriptionSummary",
    "AppSettings",
    "BankAccount",
    "BankCard",
    "Budget",
    "BudgetItem",
    "Category",
    "Debt",
    "Investment",
    "Profile",
    "SavingsGoal",
    "Subscription",
    "TangibleAsset",
    "Transaction",
    "FinanceSnapshot",
]
