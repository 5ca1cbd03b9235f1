"""SQLAlchemy table definitions for the finance store.

Column names mirror the field names of the domain records so rows can be
mapped to records without a per-table translation layer.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

from src.domain.models import (
    BankAccount,
    BankCard,
    Budget,
    Category,
    Debt,
    Investment,
    Profile,
    SavingsGoal,
    Subscription,
    TangibleAsset,
    Transaction,
)

metadata = MetaData()


def _amount(name: str, nullable: bool = False) -> Column:
    return Column(name, Numeric(18, 2), nullable=nullable, default=0)


transactions = Table(
    "transactions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("type", String(16), nullable=False),
    _amount("amount"),
    Column("category", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    Column("date", DateTime, nullable=False),
    Column("account_id", String(64), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("destination_account_id", String(64)),
    Column("card_id", String(64)),
    Column("is_credit_line_payment", Boolean, nullable=False, default=False),
)

bank_accounts = Table(
    "bank_accounts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    _amount("balance"),
    Column("bank", String(120), nullable=False, default=""),
    Column("account_type", String(60), nullable=False, default=""),
    Column("account_number", String(60), nullable=False, default=""),
    Column("purpose", String(20), nullable=False, default="main"),
    _amount("monthly_limit", nullable=True),
    Column("has_credit_line", Boolean, nullable=False, default=False),
    _amount("credit_line_limit"),
    _amount("credit_line_used"),
)

bank_cards = Table(
    "bank_cards",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    Column("card_type", String(16), nullable=False),
    Column("account_id", String(64), nullable=False),
    Column("bank", String(120), nullable=False, default=""),
    Column("last4_digits", String(4), nullable=False, default=""),
    _amount("credit_limit"),
    _amount("used_amount"),
)

debts = Table(
    "debts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    _amount("total_amount"),
    Column("due_date", DateTime, nullable=False),
    Column("account_id", String(64), nullable=False),
    _amount("paid_amount"),
    _amount("monthly_payment"),
    Column("installments", Integer, nullable=False, default=1),
    Column("debt_type", String(30), nullable=False, default="otro"),
    Column("financial_institution", String(120)),
    Column("card_id", String(64)),
    Column("due_notification_days", Integer, nullable=False, default=3),
)

subscriptions = Table(
    "subscriptions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    _amount("amount"),
    Column("due_date", DateTime, nullable=False),
    Column("card_id", String(64), nullable=False),
    Column("profile", String(120), nullable=False),
    Column("status", String(16), nullable=False, default="active"),
    Column("cancellation_date", DateTime),
    Column("last_payment_month", Integer),
    Column("last_payment_year", Integer),
    Column("paid_this_period", Boolean, nullable=False, default=False),
)

budgets = Table(
    "budgets",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    Column("is_favorite", Boolean, nullable=False, default=False),
)

budget_items = Table(
    "budget_items",
    metadata,
    Column(
        "budget_id",
        String(64),
        ForeignKey("budgets.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("category", String(120), nullable=False),
    Column("percentage", Numeric(7, 2), nullable=False),
)

investments = Table(
    "investments",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    _amount("current_value"),
    _amount("initial_amount"),
    Column("start_date", DateTime),
    Column("investment_type", String(60), nullable=False, default=""),
    Column("platform", String(120), nullable=False, default=""),
    Column("purpose", String(20), nullable=False, default="investment"),
)

tangible_assets = Table(
    "tangible_assets",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    _amount("estimated_value"),
    Column("category", String(120), nullable=False, default=""),
    Column("purchase_date", DateTime),
    Column("description", Text),
)

savings_goals = Table(
    "savings_goals",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("profile", String(120), nullable=False),
    _amount("target_amount"),
    _amount("current_amount"),
    Column("estimated_date", DateTime),
    Column("category", String(120), nullable=False, default=""),
    Column("completion_notified", Boolean, nullable=False, default=False),
)

profiles = Table(
    "profiles",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False, unique=True),
    Column("color", String(16), nullable=False),
)

categories = Table(
    "categories",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(120), nullable=False, unique=True),
    Column("kind", String(16), nullable=False),
    Column("color", String(16), nullable=False),
)

app_settings = Table(
    "app_settings",
    metadata,
    Column("key", String(60), primary_key=True),
    Column("value", String(120), nullable=False),
)


RECORD_TABLES: dict[type, Table] = {
    Transaction: transactions,
    BankAccount: bank_accounts,
    BankCard: bank_cards,
    Debt: debts,
    Subscription: subscriptions,
    Budget: budgets,
    Investment: investments,
    TangibleAsset: tangible_assets,
    SavingsGoal: savings_goals,
    Profile: profiles,
    Category: categories,
}

TABLES_BY_NAME: dict[str, Table] = {
    table.name: table for table in metadata.sorted_tables
}


__all__ = [
    "metadata",
    "transactions",
    "bank_accounts",
    "bank_cards",
    "debts",
    "subscriptions",
    "budgets",
    "budget_items",
    "investments",
    "tangible_assets",
    "savings_goals",
    "profiles",
    "categories",
    "app_settings",
    "RECORD_TABLES",
    "TABLES_BY_NAME",
]
