from typing import Iterable, List, Optional

from ..models.category import Category
from ..models.expense import Expense
from ..models.summary import BudgetStatus, CategorySummary, MonthlySummary
from .months import in_month


WARNING_PERCENT = 80.0
EXCEEDED_PERCENT = 100.0


def percent_used(spent: float, limit: float) -> float:
    """Share of the limit already spent, as a percentage (0 when there is no limit)."""
    if not limit:
        return 0.0
    return spent / limit * 100


def budget_status(percent: float, limit: float) -> BudgetStatus:
    if not limit:
        return "ok"
    if percent > EXCEEDED_PERCENT:
        return "exceeded"
    if percent >= WARNING_PERCENT:
        return "warning"
    return "ok"


def summarize_category(category: Category, month_expenses: Iterable[Expense]) -> CategorySummary:
    spent = round(
        sum(e.amount for e in month_expenses if e.category_id == category.id),
        2,
    )
    limit = category.monthly_limit
    # Thresholds see the exact ratio; only the reported figure is rounded
    percent = percent_used(spent, limit)
    return CategorySummary(
        category_id=category.id,
        category_name=category.name,
        category_color=category.color,
        spent=spent,
        limit=limit,
        percent_used=round(percent, 2),
        status=budget_status(percent, limit),
    )


def build_monthly_summary(
    categories: Iterable[Category],
    expenses: Iterable[Expense],
    year: Optional[int],
    month: Optional[int],
) -> MonthlySummary:
    """
    Aggregate spend against limits for one calendar month.

    - One breakdown row per category, in category order, even with no spend.
    - Totals are sums over the breakdown, so expenses whose category id
      matches no category are not counted.
    - year/month of None (unparseable request) matches no expense.
    """
    if year is None or month is None:
        month_expenses: List[Expense] = []
    else:
        month_expenses = [e for e in expenses if in_month(e.date, year, month)]

    breakdown = [summarize_category(c, month_expenses) for c in categories]

    return MonthlySummary(
        year=year,
        month=month,
        total_spent=round(sum(c.spent for c in breakdown), 2),
        total_limit=round(sum(c.limit for c in breakdown), 2),
        category_breakdown=breakdown,
    )
