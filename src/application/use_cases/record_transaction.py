"""Use case to record a transaction and update balances."""

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from src.application.ports.finance_store import FinanceStorePort
from src.domain.constants import DEFAULT_LARGE_TRANSACTION_THRESHOLD
from src.domain.models import Transaction
from src.domain.services.ledger import (
    compute_balance_effects,
    prepare_transaction,
)
from src.domain.services.validation import warn_on_large_transaction
from src.infrastructure.logging.logger import get_app_logger


class RecordTransactionUseCase:
    """Persist a transaction together with its balance effects."""

    def __init__(
        self,
        store: FinanceStorePort,
        logger=None,
        large_transaction_threshold: Decimal | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing the finance records.
            logger: Optional logger compatible with logging.Logger-like API.
            large_transaction_threshold: Amount that triggers a warning.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._threshold = (
            large_transaction_threshold
            if large_transaction_threshold is not None
            else Decimal(DEFAULT_LARGE_TRANSACTION_THRESHOLD)
        )

    def execute(
        self,
        transaction: Transaction,
        inserts: Sequence[Any] = (),
        updates: Sequence[Any] = (),
        deletes: Sequence[tuple[type, str]] = (),
    ) -> Transaction:
        """Record the transaction.

        Args:
            transaction: Transaction to record; an empty id is assigned.
            inserts: Records created in the same store write; they must
                carry their ids.
            updates: Records replaced in the same store write, such as the
                debt or subscription the transaction pays.
            deletes: ``(record_type, record_id)`` pairs removed in the same
                store write.

        Returns:
            Transaction: The stored transaction.

        Raises:
            DataIntegrityError: If the transaction is malformed or references
                unknown accounts or cards.
        """
        prepared = prepare_transaction(transaction)
        effects = compute_balance_effects(
            prepared,
            self._store.list_bank_accounts(),
            self._store.list_bank_cards(),
        )
        warn_on_large_transaction(prepared, self._threshold, self._logger)
        stored = self._store.record_transaction(
            prepared,
            effects,
            inserts=tuple(inserts),
            updates=tuple(updates),
            deletes=tuple(deletes),
        )
        self._logger.info(
            f"Recorded {stored.type} of {stored.amount} in {stored.category}"
        )
        return stored


__all__ = ["RecordTransactionUseCase"]
