"""Domain constants for the finance tracker."""

ALL_PROFILES = "all"

TRANSACTION_INCOME = "income"
TRANSACTION_EXPENSE = "expense"
TRANSACTION_TRANSFER = "transfer"
TRANSACTION_TYPES = (
    TRANSACTION_INCOME,
    TRANSACTION_EXPENSE,
    TRANSACTION_TRANSFER,
)

SUBSCRIPTION_ACTIVE = "active"
SUBSCRIPTION_CANCELLED = "cancelled"

CARD_CREDIT = "credit"
CARD_DEBIT = "debit"
CARD_PREPAID = "prepaid"

ACCOUNT_PURPOSES = ("main", "savings", "investment", "tax")
INVESTMENT_PURPOSES = ("investment", "saving")

SUPPORTED_CURRENCIES = ("CLP", "USD", "EUR")
DEFAULT_CURRENCY = "CLP"
DEFAULT_LARGE_TRANSACTION_THRESHOLD = 500000
DEFAULT_DEBT_NOTIFICATION_DAYS = 3

SUBSCRIPTIONS_CATEGORY = "Suscripciones"
DEBT_PAYMENT_CATEGORY = "Pago de Deuda"
TRANSFER_CATEGORY = "Transferencia Interna"
GOAL_CONTRIBUTION_CATEGORY = "Ahorro para Metas"
INVESTMENT_CONTRIBUTION_CATEGORY = "Inversiones y Ahorros"
INVESTMENT_INCOME_CATEGORY = "Ingresos por Inversión"
ASSET_SALE_CATEGORY = "Venta de Activos"

# Account purpose holding the money of each investment purpose.
PORTFOLIO_ACCOUNT_PURPOSES = {"investment": "investment", "saving": "savings"}

DEFAULT_PROFILES = (
    ("Personal", "#3b82f6"),
    ("Negocio", "#14b8a6"),
)

DEFAULT_CATEGORIES = (
    ("Sueldo", "income", "#22c55e"),
    ("Ventas", "income", "#84cc16"),
    ("Supermercado", "expense", "#ef4444"),
    ("Transporte", "expense", "#f97316"),
    ("Cuentas", "expense", "#d946ef"),
    ("Restaurantes", "expense", "#eab308"),
    (TRANSFER_CATEGORY, "transfer", "#6366f1"),
    (ASSET_SALE_CATEGORY, "income", "#10b981"),
    (GOAL_CONTRIBUTION_CATEGORY, "expense", "#f59e0b"),
    (INVESTMENT_CONTRIBUTION_CATEGORY, "expense", "#0ea5e9"),
    (INVESTMENT_INCOME_CATEGORY, "income", "#14b8a6"),
    (DEBT_PAYMENT_CATEGORY, "expense", "#f43f5e"),
    (SUBSCRIPTIONS_CATEGORY, "expense", "#8b5cf6"),
    ("Impuestos", "expense", "#0d9488"),
)


__all__ = [
    "ALL_PROFILES",
    "TRANSACTION_INCOME",
    "TRANSACTION_EXPENSE",
    "TRANSACTION_TRANSFER",
    "TRANSACTION_TYPES",
    "SUBSCRIPTION_ACTIVE",
    "SUBSCRIPTION_CANCELLED",
    "CARD_CREDIT",
    "CARD_DEBIT",
    "CARD_PREPAID",
    "ACCOUNT_PURPOSES",
    "INVESTMENT_PURPOSES",
    "SUPPORTED_CURRENCIES",
    "DEFAULT_CURRENCY",
    "DEFAULT_LARGE_TRANSACTION_THRESHOLD",
    "DEFAULT_DEBT_NOTIFICATION_DAYS",
    "SUBSCRIPTIONS_CATEGORY",
    "DEBT_PAYMENT_CATEGORY",
    "TRANSFER_CATEGORY",
    "GOAL_CONTRIBUTION_CATEGORY",
    "INVESTMENT_CONTRIBUTION_CATEGORY",
    "INVESTMENT_INCOME_CATEGORY",
    "ASSET_SALE_CATEGORY",
    "PORTFOLIO_ACCOUNT_PURPOSES",
    "DEFAULT_PROFILES",
    "DEFAULT_CATEGORIES",
]
