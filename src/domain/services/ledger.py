"""Balance effects implied by recording a transaction."""

from collections.abc import Iterable
from dataclasses import replace

from src.domain.constants import (
    TRANSACTION_EXPENSE,
    TRANSACTION_INCOME,
    TRANSACTION_TRANSFER,
    TRANSFER_CATEGORY,
)
from src.domain.errors import DataIntegrityError
from src.domain.models import BalanceEffect, BankAccount, BankCard, Transaction
from src.domain.services.validation import validate_transaction_shape

ACCOUNTS = "bank_accounts"
CARDS = "bank_cards"


def prepare_transaction(
    transaction: Transaction,
    transfer_category: str = TRANSFER_CATEGORY,
) -> Transaction:
    """Validate a transaction and apply the transfer category rule."""
    validate_transaction_shape(transaction)
    if transaction.type == TRANSACTION_TRANSFER:
        return replace(transaction, category=transfer_category)
    return transaction


def compute_balance_effects(
    transaction: Transaction,
    accounts: Iterable[BankAccount],
    cards: Iterable[BankCard],
) -> list[BalanceEffect]:
    """Return the field deltas a new transaction applies.

    * income credits the account balance;
    * an expense on a credit card raises the card's used amount;
    * an expense on a debit or prepaid card, or without a card, debits the
      account balance, unless it is charged to the account credit line;
    * a transfer debits the source and credits the destination.

    Args:
        transaction: Validated transaction to record.
        accounts: Known bank accounts.
        cards: Known bank cards.

    Returns:
        list[BalanceEffect]: Deltas to apply atomically with the insert.

    Raises:
        DataIntegrityError: If a referenced account or card is unknown.
    """
    validate_transaction_shape(transaction)
    accounts_by_id = {account.id: account for account in accounts}
    cards_by_id = {card.id: card for card in cards}
    amount = transaction.amount

    account = _resolve(accounts_by_id, transaction.account_id, "account")
    if transaction.type == TRANSACTION_INCOME:
        return [BalanceEffect(ACCOUNTS, account.id, "balance", amount)]

    if transaction.type == TRANSACTION_EXPENSE:
        if transaction.card_id:
            card = _resolve(cards_by_id, transaction.card_id, "card")
            if card.is_credit:
                return [BalanceEffect(CARDS, card.id, "used_amount", amount)]
            return [BalanceEffect(ACCOUNTS, account.id, "balance", -amount)]
        if transaction.is_credit_line_payment:
            if not account.has_credit_line:
                raise DataIntegrityError(
                    f"Account {account.id} has no credit line"
                )
            return [
                BalanceEffect(ACCOUNTS, account.id, "credit_line_used", amount)
            ]
        return [BalanceEffect(ACCOUNTS, account.id, "balance", -amount)]

    destination = _resolve(
        accounts_by_id,
        transaction.destination_account_id,
        "destination account",
    )
    return [
        BalanceEffect(ACCOUNTS, account.id, "balance", -amount),
        BalanceEffect(ACCOUNTS, destination.id, "balance", amount),
    ]


def _resolve(index: dict, record_id: str | None, label: str):
    record = index.get(record_id) if record_id else None
    if record is None:
        raise DataIntegrityError(f"Unknown {label}: {record_id!r}")
    return record


__all__ = [
    "ACCOUNTS",
    "CARDS",
    "prepare_transaction",
    "compute_balance_effects",
]
