"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_store import FinanceStorePort
from src.application.use_cases.contribute_to_goal import (
    ContributeToGoalUseCase,
)
from src.application.use_cases.manage_investments import (
    AddInvestmentUseCase,
    CloseInvestmentUseCase,
    ContributeToInvestmentUseCase,
)
from src.application.use_cases.pay_debt import PayDebtUseCase
from src.application.use_cases.pay_subscription import PaySubscriptionUseCase
from src.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from src.application.use_cases.sell_tangible_asset import (
    SellTangibleAssetUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.finance_store import SqlAlchemyFinanceStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_store(
    db_port: DatabaseEnginePort | None = None,
) -> FinanceStorePort:
    """Return the finance store backed by the configured database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceStore(resolved_db, logger=get_app_logger())


def build_settings(store: FinanceStorePort | None = None) -> FinanceSettings:
    """Return runtime settings.

    Environment variables give the defaults. When a store is given, the
    settings saved in it take precedence key by key.
    """
    settings = FinanceSettings.from_env()
    if store is None:
        return settings
    stored = store.get_settings(defaults=settings.as_app_settings())
    return settings.with_stored(stored)


def build_record_transaction(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> RecordTransactionUseCase:
    """Return the transaction recorder using the configured threshold."""
    resolved_store = store or build_finance_store()
    resolved_settings = settings or build_settings(resolved_store)
    return RecordTransactionUseCase(
        resolved_store,
        logger=get_app_logger(),
        large_transaction_threshold=(
            resolved_settings.large_transaction_threshold
        ),
    )


def _build_money_movement(use_case_class, store, settings):
    resolved_store = store or build_finance_store()
    return use_case_class(
        resolved_store,
        logger=get_app_logger(),
        record_transaction=build_record_transaction(resolved_store, settings),
    )


def build_pay_subscription(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> PaySubscriptionUseCase:
    """Return the subscription payment use case."""
    return _build_money_movement(PaySubscriptionUseCase, store, settings)


def build_pay_debt(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> PayDebtUseCase:
    """Return the debt payment use case."""
    return _build_money_movement(PayDebtUseCase, store, settings)


def build_contribute_to_goal(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> ContributeToGoalUseCase:
    """Return the goal contribution use case."""
    return _build_money_movement(ContributeToGoalUseCase, store, settings)


def build_add_investment(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> AddInvestmentUseCase:
    """Return the use case opening a funded investment."""
    return _build_money_movement(AddInvestmentUseCase, store, settings)


def build_contribute_to_investment(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> ContributeToInvestmentUseCase:
    """Return the investment contribution use case."""
    return _build_money_movement(ContributeToInvestmentUseCase, store, settings)


def build_close_investment(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> CloseInvestmentUseCase:
    """Return the investment liquidation use case."""
    return _build_money_movement(CloseInvestmentUseCase, store, settings)


def build_sell_tangible_asset(
    store: FinanceStorePort | None = None,
    settings: FinanceSettings | None = None,
) -> SellTangibleAssetUseCase:
    """Return the tangible asset sale use case."""
    return _build_money_movement(SellTangibleAssetUseCase, store, settings)


__all__ = [
    "build_database_adapter",
    "build_finance_store",
    "build_settings",
    "build_record_transaction",
    "build_pay_subscription",
    "build_pay_debt",
    "build_contribute_to_goal",
    "build_add_investment",
    "build_contribute_to_investment",
    "build_close_investment",
    "build_sell_tangible_asset",
]
