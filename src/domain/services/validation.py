"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import TRANSACTION_TRANSFER, TRANSACTION_TYPES
from src.domain.errors import DataIntegrityError
from src.domain.models import BankCard, Debt, Transaction
from src.utils.decimal_utils import coerce_decimal


def validate_transaction_shape(transaction: Transaction) -> None:
    """Reject transactions that break the account-reference invariant.

    Args:
        transaction: Transaction about to be recorded.

    Raises:
        DataIntegrityError: If the type is unknown, the amount is negative
            or not finite, or the account references do not match the type.
    """
    if transaction.type not in TRANSACTION_TYPES:
        raise DataIntegrityError(
            f"Unknown transaction type: {transaction.type!r}"
        )
    if coerce_decimal(transaction.amount) < 0:
        raise DataIntegrityError(
            f"Transaction amount must be non-negative: {transaction.amount}"
        )
    if not transaction.account_id:
        raise DataIntegrityError("Transaction has no source account")
    if transaction.type == TRANSACTION_TRANSFER:
        if not transaction.destination_account_id:
            raise DataIntegrityError("Transfer has no destination account")
        if transaction.destination_account_id == transaction.account_id:
            raise DataIntegrityError(
                "Transfer source and destination must differ"
            )
    elif transaction.destination_account_id:
        raise DataIntegrityError(
            f"A {transaction.type} cannot have a destination account"
        )


def warn_on_debt_overpayment(debt: Debt, logger: Logger) -> None:
    """Warn when a debt reports more paid than owed."""
    if debt.paid_amount > debt.total_amount:
        logger.warning(
            f"Debt {debt.id} paid_amount={debt.paid_amount} exceeds "
            f"total_amount={debt.total_amount}"
        )


def warn_on_card_overuse(card: BankCard, logger: Logger) -> None:
    """Warn when a credit card is used beyond its limit."""
    if card.is_credit and card.credit_limit and (
        card.used_amount > card.credit_limit
    ):
        logger.warning(
            f"Card {card.id} used_amount={card.used_amount} exceeds "
            f"credit_limit={card.credit_limit}"
        )


def warn_on_large_transaction(
    transaction: Transaction,
    threshold: Decimal,
    logger: Logger,
) -> None:
    """Warn when a transaction is above the configured threshold."""
    if threshold > 0 and transaction.amount >= threshold:
        logger.warning(
            f"Large {transaction.type} of {transaction.amount} recorded "
            f"on account {transaction.account_id}"
        )


__all__ = [
    "validate_transaction_shape",
    "warn_on_debt_overpayment",
    "warn_on_card_overuse",
    "warn_on_large_transaction",
]
