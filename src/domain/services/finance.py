"""Domain services for net worth aggregates."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import ALL_PROFILES
from src.domain.models import (
    BankAccount,
    BankCard,
    Debt,
    FinancialSummary,
    Investment,
    NetWorthSummary,
    SavingsGoal,
    TangibleAsset,
)
from src.domain.policies import filter_by_profile
from src.domain.services.validation import (
    warn_on_card_overuse,
    warn_on_debt_overpayment,
)
from src.utils.decimal_utils import sum_decimals


def compute_net_worth_summary(
    accounts: Iterable[BankAccount],
    cards: Iterable[BankCard],
    debts: Iterable[Debt],
    investments: Iterable[Investment],
    tangible_assets: Iterable[TangibleAsset],
    profile_filter: str = ALL_PROFILES,
    *,
    logger: Logger | None = None,
) -> NetWorthSummary:
    """Compute net worth totals for one profile or for all of them.

    Args:
        accounts: Bank accounts; every balance counts as an asset.
        cards: Bank cards; only credit card usage counts as a liability.
        debts: Debts; the unpaid remainder counts as a liability.
        investments: Investments valued at their current value.
        tangible_assets: Assets valued at their estimated value.
        profile_filter: Profile name or ``ALL_PROFILES``.
        logger: Optional logger used for data warnings.

    Returns:
        NetWorthSummary: Totals; net worth is not clamped at zero.
    """
    f_accounts = filter_by_profile(accounts, profile_filter)
    f_cards = filter_by_profile(cards, profile_filter)
    f_debts = filter_by_profile(debts, profile_filter)
    f_investments = filter_by_profile(investments, profile_filter)
    f_assets = filter_by_profile(tangible_assets, profile_filter)

    if logger is not None:
        for card in f_cards:
            warn_on_card_overuse(card, logger)
        for debt in f_debts:
            warn_on_debt_overpayment(debt, logger)

    asset_total = (
        sum_decimals(account.balance for account in f_accounts)
        + sum_decimals(investment.current_value for investment in f_investments)
        + sum_decimals(asset.estimated_value for asset in f_assets)
    )
    liability_total = _credit_card_usage(f_cards) + _remaining_debt(f_debts)

    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        profile=profile_filter,
    )


def compute_financial_summary(
    accounts: Iterable[BankAccount],
    cards: Iterable[BankCard],
    debts: Iterable[Debt],
    investments: Iterable[Investment],
    tangible_assets: Iterable[TangibleAsset],
    goals: Iterable[SavingsGoal],
    profile_filter: str = ALL_PROFILES,
    *,
    logger: Logger | None = None,
) -> FinancialSummary:
    """Compute the dashboard breakdown next to the net worth figure."""
    accounts = filter_by_profile(accounts, profile_filter)
    cards = filter_by_profile(cards, profile_filter)
    debts = filter_by_profile(debts, profile_filter)
    investments = filter_by_profile(investments, profile_filter)
    tangible_assets = filter_by_profile(tangible_assets, profile_filter)
    goals = filter_by_profile(goals, profile_filter)

    net_worth = compute_net_worth_summary(
        accounts,
        cards,
        debts,
        investments,
        tangible_assets,
        profile_filter,
        logger=logger,
    )
    return FinancialSummary(
        net_worth=net_worth,
        main_balance=_balance_for_purpose(accounts, "main"),
        savings_balance=_balance_for_purpose(accounts, "savings"),
        invested_total=sum_decimals(
            i.current_value for i in investments if i.purpose == "investment"
        ),
        saved_in_instruments=sum_decimals(
            i.current_value for i in investments if i.purpose == "saving"
        ),
        saved_in_goals=sum_decimals(goal.current_amount for goal in goals),
        credit_card_used=_credit_card_usage(cards),
        remaining_debt=_remaining_debt(debts),
        tangible_assets_total=sum_decimals(
            asset.estimated_value for asset in tangible_assets
        ),
    )


def _balance_for_purpose(
    accounts: list[BankAccount],
    purpose: str,
) -> Decimal:
    return sum_decimals(
        account.balance for account in accounts if account.purpose == purpose
    )


def _credit_card_usage(cards: list[BankCard]) -> Decimal:
    return sum_decimals(card.used_amount for card in cards if card.is_credit)


def _remaining_debt(debts: list[Debt]) -> Decimal:
    return sum_decimals(debt.remaining_amount for debt in debts)


__all__ = ["compute_net_worth_summary", "compute_financial_summary"]
