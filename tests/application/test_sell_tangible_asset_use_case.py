"""Tests for the SellTangibleAssetUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.sell_tangible_asset import (
    SellTangibleAssetUseCase,
)
from src.domain.errors import DataIntegrityError, RecordNotFoundError
from src.domain.models import TangibleAsset


def _store() -> MagicMock:
    store = MagicMock()
    store.list_tangible_assets.return_value = [
        TangibleAsset(
            id="car",
            name="Auto",
            profile="Personal",
            estimated_value=Decimal("6000000"),
        )
    ]
    return store


def test_execute_records_sale_income_and_deletes_asset() -> None:
    store = _store()
    recorder = MagicMock()
    recorder.execute.side_effect = lambda tx, **kwargs: tx

    income = SellTangibleAssetUseCase(
        store,
        logger=MagicMock(),
        record_transaction=recorder,
    ).execute(
        "car",
        Decimal("5500000"),
        "main",
        sold_at=datetime(2024, 6, 1),
    )

    assert income.type == "income"
    assert income.category == "Venta de Activos"
    assert income.amount == Decimal("5500000")
    assert income.account_id == "main"
    assert income.profile == "Personal"
    assert recorder.execute.call_args.kwargs["deletes"] == [
        (TangibleAsset, "car")
    ]
    store.delete.assert_not_called()


@pytest.mark.parametrize(
    ("asset_id", "price", "error"),
    [
        ("missing", Decimal("1"), RecordNotFoundError),
        ("car", Decimal("-1"), DataIntegrityError),
    ],
)
def test_execute_rejects_invalid_requests(asset_id, price, error) -> None:
    recorder = MagicMock()

    with pytest.raises(error):
        SellTangibleAssetUseCase(
            _store(),
            logger=MagicMock(),
            record_transaction=recorder,
        ).execute(asset_id, price, "main")

    recorder.execute.assert_not_called()
