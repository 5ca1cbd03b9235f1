"""Domain records persisted by the finance store.

Records are immutable snapshots. Writers build new instances with
``dataclasses.replace`` and hand them back to the store.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.constants import (
    CARD_CREDIT,
    DEFAULT_CURRENCY,
    DEFAULT_DEBT_NOTIFICATION_DAYS,
    DEFAULT_LARGE_TRANSACTION_THRESHOLD,
    SUBSCRIPTION_ACTIVE,
)


@dataclass(frozen=True)
class Transaction:
    """Money movement on an account.

    Attributes:
        type: One of income, expense or transfer.
        amount: Non-negative amount moved.
        account_id: Source account (the only account for income/expense).
        destination_account_id: Destination account, transfers only.
        card_id: Card used for an expense, if any.
        is_credit_line_payment: Expense charged to the account credit line.
    """

    id: str
    type: str
    amount: Decimal
    category: str
    profile: str
    date: datetime
    account_id: str
    description: str = ""
    destination_account_id: str | None = None
    card_id: str | None = None
    is_credit_line_payment: bool = False


@dataclass(frozen=True)
class BankAccount:
    id: str
    name: str
    profile: str
    balance: Decimal = Decimal("0")
    bank: str = ""
    account_type: str = ""
    account_number: str = ""
    purpose: str = "main"
    monthly_limit: Decimal | None = None
    has_credit_line: bool = False
    credit_line_limit: Decimal = Decimal("0")
    credit_line_used: Decimal = Decimal("0")


@dataclass(frozen=True)
class BankCard:
    id: str
    name: str
    profile: str
    card_type: str
    account_id: str
    bank: str = ""
    last4_digits: str = ""
    credit_limit: Decimal = Decimal("0")
    used_amount: Decimal = Decimal("0")

    @property
    def is_credit(self) -> bool:
        return self.card_type == CARD_CREDIT


@dataclass(frozen=True)
class Debt:
    id: str
    name: str
    profile: str
    total_amount: Decimal
    due_date: datetime
    account_id: str
    paid_amount: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")
    installments: int = 1
    debt_type: str = "otro"
    financial_institution: str | None = None
    card_id: str | None = None
    due_notification_days: int = DEFAULT_DEBT_NOTIFICATION_DAYS

    @property
    def remaining_amount(self) -> Decimal:
        """Return the unpaid part of the debt."""
        return self.total_amount - self.paid_amount


@dataclass(frozen=True)
class Subscription:
    """Recurring obligation charged to a card.

    Attributes:
        last_payment_month: Calendar month (1-12) of the last payment.
        last_payment_year: Calendar year of the last payment.
        paid_this_period: Set when the current period was paid.
    """

    id: str
    name: str
    amount: Decimal
    due_date: datetime
    card_id: str
    profile: str
    status: str = SUBSCRIPTION_ACTIVE
    cancellation_date: datetime | None = None
    last_payment_month: int | None = None
    last_payment_year: int | None = None
    paid_this_period: bool = False


@dataclass(frozen=True)
class BudgetItem:
    category: str
    percentage: Decimal


@dataclass(frozen=True)
class Budget:
    """Named allocation of income percentages per category."""

    id: str
    name: str
    profile: str
    items: tuple[BudgetItem, ...] = ()
    is_favorite: bool = False


@dataclass(frozen=True)
class Investment:
    id: str
    name: str
    profile: str
    current_value: Decimal
    initial_amount: Decimal = Decimal("0")
    start_date: datetime | None = None
    investment_type: str = ""
    platform: str = ""
    purpose: str = "investment"


@dataclass(frozen=True)
class TangibleAsset:
    id: str
    name: str
    profile: str
    estimated_value: Decimal
    category: str = ""
    purchase_date: datetime | None = None
    description: str | None = None


@dataclass(frozen=True)
class SavingsGoal:
    id: str
    name: str
    profile: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    estimated_date: datetime | None = None
    category: str = ""
    completion_notified: bool = False


@dataclass(frozen=True)
class Profile:
    id: str
    name: str
    color: str = "#3b82f6"


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    kind: str
    color: str = "#6366f1"


@dataclass(frozen=True)
class AppSettings:
    currency: str = DEFAULT_CURRENCY
    large_transaction_threshold: Decimal = field(
        default_factory=lambda: Decimal(DEFAULT_LARGE_TRANSACTION_THRESHOLD)
    )
    show_sensitive_data: bool = True


__all__ = [
    "Transaction",
    "BankAccount",
    "BankCard",
    "Debt",
    "Subscription",
    "BudgetItem",
    "Budget",
    "Investment",
    "TangibleAsset",
    "SavingsGoal",
    "Profile",
    "Category",
    "AppSettings",
]
