"""Domain errors for the finance tracker."""


class FinanceError(Exception):
    """Base class for finance tracker errors."""


class DataIntegrityError(FinanceError):
    """Raised when stored data cannot be trusted for aggregation.

    Examples are unparsable date fields, negative amounts, or references to
    accounts and cards that do not exist.
    """


class RecordNotFoundError(FinanceError):
    """Raised when a store write targets an unknown record id."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"No record {record_id!r} in {collection}")
        self.collection = collection
        self.record_id = record_id


class InsufficientFundsError(FinanceError):
    """Raised when an account cannot cover a contribution."""

    def __init__(self, account_id: str, balance, amount) -> None:
        super().__init__(
            f"Account {account_id!r} has {balance}, {amount} is required"
        )
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


__all__ = [
    "FinanceError",
    "DataIntegrityError",
    "RecordNotFoundError",
    "InsufficientFundsError",
]
