"""CLI adapter printing a plain-text finance report."""

import argparse
from datetime import datetime

from src.application.use_cases.get_budget_variance import (
    GetBudgetVarianceUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.application.use_cases.get_subscription_overview import (
    GetSubscriptionOverviewUseCase,
)
from src.domain.services.filters import PeriodFilter
from src.infrastructure.container import build_finance_store, build_settings
from src.infrastructure.logging.logger import get_app_logger
from src.utils.currency import format_currency


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--profile", default=None, help="Profile to report on")
    parser.add_argument("--budget-id", default=None, help="Budget to analyse")
    return parser.parse_args(argv)


def build_report(store, settings, profile: str, budget_id: str | None) -> str:
    """Return the report text for the current month."""
    logger = get_app_logger()
    now = datetime.now()
    snapshot = store.load_snapshot()
    period = PeriodFilter.current_month(now, profile=profile)

    def money(value) -> str:
        return format_currency(
            value,
            settings.currency,
            show_sensitive_data=settings.show_sensitive_data,
        )

    summary = GetNetWorthSummaryUseCase(store, logger=logger).execute(
        profile,
        snapshot=snapshot,
    )
    overview = GetSubscriptionOverviewUseCase(store, logger=logger).execute(
        now,
        period=period,
        snapshot=snapshot,
    )
    rows = GetBudgetVarianceUseCase(store, logger=logger).execute(
        budget_id,
        period=period,
        snapshot=snapshot,
    )

    lines = [
        f"Finance report {now:%Y-%m} (profile: {profile})",
        f"  Assets:      {money(summary.asset_total)}",
        f"  Liabilities: {money(summary.liability_total)}",
        f"  Net worth:   {money(summary.net_worth)}",
        "Subscriptions",
        f"  Overdue:     {len(overview.buckets.overdue)}",
        f"  This period: {len(overview.buckets.due_this_period)}",
        f"  Upcoming:    {len(overview.buckets.upcoming)}",
        f"  Monthly cost: {money(overview.summary.monthly_cost)}",
    ]
    if rows:
        lines.append("Budget")
        for row in rows:
            lines.append(
                f"  {row.category}: planned {money(row.planned_amount)}, "
                f"spent {money(row.spent_amount)}, "
                f"difference {money(row.difference)}"
            )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    """Print the report for the configured or requested profile."""
    args = _parse_args(argv)
    store = build_finance_store()
    settings = build_settings(store)
    print(
        build_report(
            store,
            settings,
            args.profile or settings.profile,
            args.budget_id,
        )
    )


if __name__ == "__main__":  # pragma: no cover
    main()
