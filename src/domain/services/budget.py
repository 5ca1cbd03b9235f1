"""Budget variance analysis."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import TRANSACTION_EXPENSE, TRANSACTION_INCOME
from src.domain.models import Budget, BudgetVarianceRow, Transaction
from src.utils.decimal_utils import coerce_decimal


def compute_budget_variance(
    budget: Budget | None,
    transactions: Iterable[Transaction],
) -> list[BudgetVarianceRow]:
    """Compare a budget plan with the actual spend of a period.

    Planned amounts are the budget percentages applied to the total income
    of the period. Percentages are not normalized, so a plan may leave
    income unallocated or allocate more than 100%.

    Args:
        budget: Selected budget, or None when nothing is selected.
        transactions: Transactions of the analysed period.

    Returns:
        list[BudgetVarianceRow]: One row per category found in the budget
        or in the period expenses, budget categories first. Empty when no
        budget is selected.
    """
    if budget is None:
        return []

    total_income = Decimal("0")
    spent: dict[str, Decimal] = {}
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.type == TRANSACTION_INCOME:
            total_income += amount
        elif transaction.type == TRANSACTION_EXPENSE:
            spent[transaction.category] = (
                spent.get(transaction.category, Decimal("0")) + amount
            )

    planned_percentages: dict[str, Decimal] = {}
    for item in budget.items:
        planned_percentages.setdefault(
            item.category,
            coerce_decimal(item.percentage),
        )

    categories = list(planned_percentages)
    categories.extend(
        category for category in spent if category not in planned_percentages
    )

    rows: list[BudgetVarianceRow] = []
    for category in categories:
        percentage = planned_percentages.get(category, Decimal("0"))
        planned_amount = (
            total_income * percentage / Decimal("100")
            if total_income
            else Decimal("0")
        )
        spent_amount = spent.get(category, Decimal("0"))
        rows.append(
            BudgetVarianceRow(
                category=category,
                planned_percentage=percentage,
                planned_amount=planned_amount,
                spent_amount=spent_amount,
                difference=planned_amount - spent_amount,
            )
        )
    return rows


__all__ = ["compute_budget_variance"]
