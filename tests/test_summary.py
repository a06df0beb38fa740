from datetime import date

import pytest

from budget_api.core.summary import budget_status, build_monthly_summary, percent_used
from budget_api.models.category import Category
from budget_api.models.expense import Expense


@pytest.mark.parametrize(
    "spent, limit, expected_percent, expected_status",
    [
        (240, 300, 80.0, "warning"),
        (300, 300, 100.0, "warning"),
        (301, 300, 100.33, "exceeded"),
        (100, 300, 33.33, "ok"),
        (50, 0, 0.0, "ok"),
    ],
)
def test_status_thresholds(spent, limit, expected_percent, expected_status):
    percent = percent_used(spent, limit)
    assert percent == pytest.approx(expected_percent, abs=0.01)
    assert budget_status(percent, limit) == expected_status


def test_cent_over_limit_is_exceeded():
    categories = [Category(id=2, name="Rent", monthly_limit=1200)]
    expenses = [
        _expense(1, 1200.00, date(2025, 12, 1), 2),
        _expense(2, 0.01, date(2025, 12, 2), 2),
    ]

    rent = build_monthly_summary(categories, expenses, 2025, 12).category_breakdown[0]

    assert rent.spent == pytest.approx(1200.01)
    # Reported percent rounds to 100.0 but the category is still over its limit
    assert rent.percent_used == pytest.approx(100.0)
    assert rent.status == "exceeded"


def _expense(id, amount, day, category_id):
    return Expense(
        id=id,
        amount=amount,
        description="x",
        date=day,
        category_id=category_id,
        category_name="n",
        category_color="#000000",
    )


def test_summary_skips_other_months_and_dangling_categories():
    categories = [
        Category(id=1, name="Food", monthly_limit=100),
        Category(id=2, name="Fun", monthly_limit=0),
    ]
    expenses = [
        _expense(1, 30, date(2026, 3, 2), 1),
        _expense(2, 20, date(2026, 4, 2), 1),
        _expense(3, 10, date(2026, 3, 9), 2),
        _expense(4, 99, date(2026, 3, 9), 42),
    ]

    summary = build_monthly_summary(categories, expenses, 2026, 3)

    assert [c.category_id for c in summary.category_breakdown] == [1, 2]
    food, fun = summary.category_breakdown
    assert food.spent == pytest.approx(30)
    assert food.percent_used == pytest.approx(30)
    assert fun.spent == pytest.approx(10)
    assert fun.percent_used == 0
    assert fun.status == "ok"
    assert summary.total_spent == pytest.approx(40)
    assert summary.total_limit == pytest.approx(100)


def test_summary_for_unparsed_month_has_no_spend():
    categories = [Category(id=1, name="Food", monthly_limit=100)]
    expenses = [_expense(1, 30, date(2026, 3, 2), 1)]

    summary = build_monthly_summary(categories, expenses, None, None)

    assert summary.year is None
    assert summary.total_spent == 0
    assert summary.category_breakdown[0].status == "ok"
