"""Use case to sell a tangible asset."""

from datetime import datetime
from decimal import Decimal

from src.application.ports.finance_store import FinanceStorePort
from src.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from src.domain.constants import ASSET_SALE_CATEGORY, TRANSACTION_INCOME
from src.domain.errors import DataIntegrityError, RecordNotFoundError
from src.domain.models import TangibleAsset, Transaction
from src.infrastructure.logging.logger import get_app_logger


class SellTangibleAssetUseCase:
    """Record the sale income and remove the asset."""

    def __init__(
        self,
        store: FinanceStorePort,
        logger=None,
        record_transaction: RecordTransactionUseCase | None = None,
    ) -> None:
        self._store = store
        self._logger = logger or get_app_logger()
        self._record_transaction = record_transaction or (
            RecordTransactionUseCase(store, logger=self._logger)
        )

    def execute(
        self,
        asset_id: str,
        sale_price: Decimal,
        destination_account_id: str,
        sold_at: datetime | None = None,
    ) -> Transaction:
        """Sell the asset.

        Args:
            asset_id: Asset being sold.
            sale_price: Amount received for the asset.
            destination_account_id: Account credited with the sale.
            sold_at: Sale instant; defaults to now.

        Returns:
            Transaction: The sale income.

        Raises:
            DataIntegrityError: If the price is negative or the destination
                account does not exist.
            RecordNotFoundError: If the asset does not exist.
        """
        if sale_price < 0:
            raise DataIntegrityError(
                f"Sale price must be non-negative: {sale_price}"
            )
        asset = next(
            (a for a in self._store.list_tangible_assets() if a.id == asset_id),
            None,
        )
        if asset is None:
            raise RecordNotFoundError("tangible_assets", asset_id)

        stored = self._record_transaction.execute(
            Transaction(
                id="",
                type=TRANSACTION_INCOME,
                amount=sale_price,
                description=f"Sale of asset: {asset.name}",
                category=ASSET_SALE_CATEGORY,
                profile=asset.profile,
                date=sold_at or datetime.now(),
                account_id=destination_account_id,
            ),
            deletes=[(TangibleAsset, asset.id)],
        )
        self._logger.info(
            f"Sold {asset.name!r} for {sale_price}, "
            f"estimated at {asset.estimated_value}"
        )
        return stored


__all__ = ["SellTangibleAssetUseCase"]
