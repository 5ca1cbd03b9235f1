"""Application use cases package."""

from .contribute_to_goal import ContributeToGoalUseCase
from .get_budget_variance import GetBudgetVarianceUseCase
from .get_financial_summary import GetFinancialSummaryUseCase
from .get_net_worth_summary import GetNetWorthSummaryUseCase, NetWorthSummary
from .get_notifications import GetNotificationsUseCase
from .get_subscription_overview import (
    GetSubscriptionOverviewUseCase,
    SubscriptionOverview,
)
from .manage_investments import (
    AddInvestmentUseCase,
    CloseInvestmentUseCase,
    ContributeToInvestmentUseCase,
)
from .manage_settings import AddCategoryUseCase, AddProfileUseCase
from .pay_debt import PayDebtUseCase
from .pay_subscription import (
    CancelSubscriptionUseCase,
    PaySubscriptionUseCase,
    ResetSubscriptionPeriodsUseCase,
)
from .record_transaction import RecordTransactionUseCase
from .sell_tangible_asset import SellTangibleAssetUseCase

__all__ = [
    "ContributeToGoalUseCase",
    "GetBudgetVarianceUseCase",
    "GetFinancialSummaryUseCase",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetNotificationsUseCase",
    "GetSubscriptionOverviewUseCase",
    "SubscriptionOverview",
    "AddCategoryUseCase",
    "AddProfileUseCase",
    "AddInvestmentUseCase",
    "CloseInvestmentUseCase",
    "ContributeToInvestmentUseCase",
    "PayDebtUseCase",
    "CancelSubscriptionUseCase",
    "PaySubscriptionUseCase",
    "ResetSubscriptionPeriodsUseCase",
    "RecordTransactionUseCase",
    "SellTangibleAssetUseCase",
]
