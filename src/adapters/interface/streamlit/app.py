"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_budget_variance import (
    GetBudgetVarianceUseCase,
)
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_notifications import (
    GetNotificationsUseCase,
)
from src.application.use_cases.get_subscription_overview import (
    GetSubscriptionOverviewUseCase,
    SubscriptionOverview,
)
from src.domain.constants import ALL_PROFILES
from src.domain.models import (
    AppNotification,
    BudgetVarianceRow,
    FinancialSummary,
    Subscription,
)
from src.domain.services.filters import PeriodFilter, available_years
from src.infrastructure.container import build_finance_store, build_settings
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import FinanceSettings
from src.utils.currency import format_currency

_MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def _fetch_profile_names() -> list[str]:
    """Fetch the configured profile names."""
    store = build_finance_store()
    return [profile.name for profile in store.list_profiles()]


@st.cache_data(show_spinner=False)
def _load_profile_names() -> list[str]:
    """Cached wrapper around _fetch_profile_names."""
    return _fetch_profile_names()


def _fetch_available_years(today: date) -> list[int]:
    """Fetch the years that have transactions, plus the current one."""
    store = build_finance_store()
    return available_years(
        store.list_transactions(),
        datetime(today.year, today.month, today.day),
    )


@st.cache_data(show_spinner=False)
def _load_available_years(today: date) -> list[int]:
    """Cached wrapper around _fetch_available_years."""
    return _fetch_available_years(today)


def _fetch_financial_summary(profile: str) -> FinancialSummary:
    """Fetch the net worth breakdown for a profile."""
    use_case = GetFinancialSummaryUseCase(store=build_finance_store())
    return use_case.execute(profile)


@st.cache_data(show_spinner=False)
def _load_financial_summary(profile: str) -> FinancialSummary:
    """Cached wrapper around _fetch_financial_summary."""
    return _fetch_financial_summary(profile)


def _fetch_subscription_overview(
    profile: str,
    today: date,
) -> SubscriptionOverview:
    """Fetch subscription buckets for the month containing ``today``."""
    reference = datetime(today.year, today.month, today.day)
    use_case = GetSubscriptionOverviewUseCase(store=build_finance_store())
    return use_case.execute(
        reference,
        period=PeriodFilter.current_month(reference, profile=profile),
    )


@st.cache_data(show_spinner=False)
def _load_subscription_overview(
    profile: str,
    today: date,
) -> SubscriptionOverview:
    """Cached wrapper around _fetch_subscription_overview."""
    return _fetch_subscription_overview(profile, today)


def _fetch_budget_variance(
    profile: str,
    year: int,
    month: int | None,
) -> list[BudgetVarianceRow]:
    """Fetch the favorite budget variance for the selected period."""
    use_case = GetBudgetVarianceUseCase(store=build_finance_store())
    return use_case.execute(
        period=PeriodFilter(year=year, month=month, profile=profile),
    )


@st.cache_data(show_spinner=False)
def _load_budget_variance(
    profile: str,
    year: int,
    month: int | None,
) -> list[BudgetVarianceRow]:
    """Cached wrapper around _fetch_budget_variance."""
    return _fetch_budget_variance(profile, year, month)


def _fetch_notifications(today: date) -> list[AppNotification]:
    """Fetch debt, subscription and goal notifications as of ``today``."""
    use_case = GetNotificationsUseCase(store=build_finance_store())
    return use_case.execute(datetime(today.year, today.month, today.day))


@st.cache_data(show_spinner=False)
def _load_notifications(today: date) -> list[AppNotification]:
    """Cached wrapper around _fetch_notifications."""
    return _fetch_notifications(today)


def _money(value: Decimal, settings: FinanceSettings) -> str:
    """Format an amount with the configured currency and privacy flag."""
    return format_currency(
        value,
        settings.currency,
        show_sensitive_data=settings.show_sensitive_data,
    )


def _format_share(part: Decimal, total: Decimal) -> str:
    """Format ``part`` as a percentage of ``total``."""
    if total == 0:
        return "0.0%"
    share = (part / total) * Decimal("100")
    return f"{share:.1f}%"


def _asset_slices(summary: FinancialSummary) -> list[tuple[str, Decimal]]:
    """Return the positive asset components of a financial summary."""
    slices = [
        ("Main accounts", summary.main_balance),
        ("Savings accounts", summary.savings_balance),
        ("Investments", summary.invested_total),
        ("Savings instruments", summary.saved_in_instruments),
        ("Tangible assets", summary.tangible_assets_total),
    ]
    return [(label, amount) for label, amount in slices if amount > 0]


def _prepare_donut_chart_data(
    slices: Sequence[tuple[str, Decimal]],
    settings: FinanceSettings,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        slices: Category labels and amounts.
        settings: Display settings used for the amount labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(slices, key=lambda item: item[1], reverse=True)
    top_items = list(sorted_items[:max_categories])
    other_items = sorted_items[max_categories:]
    other_amount = sum(
        (amount for _, amount in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items.append(("Other", other_amount))
    total_amount = sum(
        (amount for _, amount in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for category, amount in top_items:
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": _money(amount, settings),
                "share_label": _format_share(amount, total_amount),
            }
        )
    return data, total_amount


def _render_asset_chart(
    summary: FinancialSummary,
    settings: FinanceSettings,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of where the assets sit."""
    slices = _asset_slices(summary)
    if not slices:
        st.info("No asset amounts available for the chart.")
        return
    data, _ = _prepare_donut_chart_data(slices, settings)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.35)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Assets by Type")
    st.altair_chart(chart, width="stretch")


def _prepare_budget_chart_data(
    rows: Sequence[BudgetVarianceRow],
) -> list[dict[str, str | float]]:
    """Return one planned and one spent bar per category."""
    data: list[dict[str, str | float]] = []
    for row in rows:
        data.append(
            {
                "category": row.category,
                "kind": "Planned",
                "amount": float(row.planned_amount),
            }
        )
        data.append(
            {
                "category": row.category,
                "kind": "Spent",
                "amount": float(row.spent_amount),
            }
        )
    return data


def _render_budget_chart(rows: Sequence[BudgetVarianceRow]) -> None:
    """Render planned versus spent bars per category."""
    chart = alt.Chart(
        alt.Data(values=_prepare_budget_chart_data(rows))
    ).mark_bar().encode(
        x=alt.X("category:N", title=None),
        xOffset="kind:N",
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(range=["#457b9d", "#e76f51"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("amount:Q", format=",.0f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _subscription_rows(
    subscriptions: Sequence[Subscription],
    settings: FinanceSettings,
) -> list[dict[str, str]]:
    return [
        {
            "Name": sub.name,
            "Amount": _money(sub.amount, settings),
            "Due": sub.due_date.strftime("%Y-%m-%d"),
            "Profile": sub.profile,
        }
        for sub in subscriptions
    ]


def _render_dashboard(
    profile: str,
    settings: FinanceSettings,
    today: date,
) -> None:
    """Render net worth metrics, the asset chart and notifications."""
    summary = _load_financial_summary(profile)
    net_worth = summary.net_worth

    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric("Assets", _money(net_worth.asset_total, settings))
    liabilities_col.metric(
        "Liabilities",
        _money(net_worth.liability_total, settings),
    )
    net_worth_col.metric("Net Worth", _money(net_worth.net_worth, settings))

    cards_col, debt_col, goals_col = st.columns(3)
    cards_col.metric(
        "Credit cards used",
        _money(summary.credit_card_used, settings),
    )
    debt_col.metric("Remaining debt", _money(summary.remaining_debt, settings))
    goals_col.metric("Saved in goals", _money(summary.saved_in_goals, settings))

    chart_col, notifications_col = st.columns(2)
    with chart_col:
        _render_asset_chart(summary, settings)
    with notifications_col:
        _render_notifications(_load_notifications(today))


def _render_notifications(notifications: Sequence[AppNotification]) -> None:
    st.subheader("Notifications")
    if not notifications:
        st.caption("Nothing requires attention.")
        return
    for notification in notifications:
        text = f"**{notification.title}**: {notification.description}"
        if notification.type == "error":
            st.error(text)
        elif notification.type == "warning":
            st.warning(text)
        else:
            st.success(text)


def _render_subscriptions(
    profile: str,
    settings: FinanceSettings,
    today: date,
) -> None:
    """Render subscription metrics and the four period buckets."""
    overview = _load_subscription_overview(profile, today)
    summary = overview.summary

    count_col, cost_col, share_col = st.columns(3)
    count_col.metric("Active subscriptions", str(summary.active_count))
    cost_col.metric("Monthly cost", _money(summary.monthly_cost, settings))
    share_col.metric(
        "Share of expenses",
        f"{summary.expense_participation:.1f}%",
    )

    buckets = overview.buckets
    sections = [
        ("Overdue", buckets.overdue),
        ("Due this month", buckets.due_this_period),
        ("Upcoming", buckets.upcoming),
        ("Cancelled", buckets.cancelled),
    ]
    for title, subscriptions in sections:
        st.subheader(f"{title} ({len(subscriptions)})")
        if not subscriptions:
            st.caption("None")
            continue
        st.dataframe(
            _subscription_rows(subscriptions, settings),
            width="stretch",
            hide_index=True,
        )


def _render_budget(
    profile: str,
    settings: FinanceSettings,
    today: date,
) -> None:
    """Render the favorite budget against the selected period."""
    years = _load_available_years(today)
    year = st.sidebar.selectbox("Year", years, index=0)
    month_label = st.sidebar.selectbox(
        "Month",
        ["Whole year", *_MONTHS],
        index=today.month,
    )
    month = None if month_label == "Whole year" else (
        _MONTHS.index(month_label) + 1
    )

    rows = _load_budget_variance(profile, year, month)
    if not rows:
        st.warning("No budget found. Create one to compare spending.")
        return

    over_budget = [row for row in rows if row.is_over_budget]
    st.caption(
        f"{len(rows)} categories, {len(over_budget)} over budget"
    )
    data = [
        {
            "Category": row.category,
            "Planned %": f"{row.planned_percentage:.1f}%",
            "Planned": _money(row.planned_amount, settings),
            "Spent": _money(row.spent_amount, settings),
            "Difference": _money(row.difference, settings),
        }
        for row in rows
    ]
    st.dataframe(data, width="stretch", hide_index=True)
    _render_budget_chart(rows)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    settings = build_settings(store=build_finance_store())
    profile_options = [ALL_PROFILES, *_load_profile_names()]
    default_index = (
        profile_options.index(settings.profile)
        if settings.profile in profile_options
        else 0
    )
    profile = st.sidebar.selectbox(
        "Profile",
        profile_options,
        index=default_index,
    )
    page = st.sidebar.selectbox("Page", ["Dashboard", "Subscriptions", "Budget"])
    today = date.today()
    get_usage_logger().info(f"Page viewed: {page} (profile={profile})")

    if page == "Dashboard":
        _render_dashboard(profile, settings, today)
    elif page == "Subscriptions":
        _render_subscriptions(profile, settings, today)
    else:
        _render_budget(profile, settings, today)


if __name__ == "__main__":  # pragma: no cover
    main()
