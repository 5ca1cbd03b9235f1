"""Domain package for business rules and core models."""

from .constants import ALL_PROFILES
from .errors import (
    DataIntegrityError,
    FinanceError,
    InsufficientFundsError,
    RecordNotFoundError,
)
from .models import (
    BankAccount,
    BankCard,
    Budget,
    BudgetItem,
    Debt,
    FinanceSnapshot,
    Investment,
    NetWorthSummary,
    Subscription,
    SubscriptionBuckets,
    TangibleAsset,
    Transaction,
)

__all__ = [
    "ALL_PROFILES",
    "DataIntegrityError",
    "FinanceError",
    "InsufficientFundsError",
    "RecordNotFoundError",
    "BankAccount",
    "BankCard",
    "Budget",
    "BudgetItem",
    "Debt",
    "FinanceSnapshot",
    "Investment",
    "NetWorthSummary",
    "Subscription",
    "SubscriptionBuckets",
    "TangibleAsset",
    "Transaction",
]
