from datetime import date
from typing import List

from .models.category import Category
from .models.expense import Expense


def mock_categories() -> List[Category]:
    return [
        Category(id=1, name="Groceries", color="#22c55e", monthly_limit=300, description="Food and household supplies"),
        Category(id=2, name="Rent", color="#3b82f6", monthly_limit=1200, description="Monthly rent or mortgage"),
        Category(id=3, name="Utilities", color="#f59e0b", monthly_limit=150, description="Electric, water, gas, internet"),
        Category(id=4, name="Miscellaneous", color="#6b7280", monthly_limit=200, description="Other expenses"),
        Category(id=5, name="Personal", color="#8b5cf6", monthly_limit=250, description="Personal care and entertainment"),
    ]


def _expense(id, amount, description, day, category_id, category_name, category_color) -> Expense:
    return Expense(
        id=id,
        amount=amount,
        description=description,
        date=day,
        category_id=category_id,
        category_name=category_name,
        category_color=category_color,
    )


def mock_expenses() -> List[Expense]:
    return [
        _expense(1, 45.50, "Weekly groceries", date(2025, 12, 15), 1, "Groceries", "#22c55e"),
        _expense(2, 82.30, "Grocery run", date(2025, 12, 22), 1, "Groceries", "#22c55e"),
        _expense(3, 1200.00, "December rent", date(2025, 12, 1), 2, "Rent", "#3b82f6"),
        _expense(4, 95.00, "Electric bill", date(2025, 12, 10), 3, "Utilities", "#f59e0b"),
        _expense(5, 65.00, "Internet", date(2025, 12, 5), 3, "Utilities", "#f59e0b"),
        _expense(6, 35.00, "Haircut", date(2025, 12, 20), 5, "Personal", "#8b5cf6"),
        _expense(7, 120.00, "Christmas gifts", date(2025, 12, 23), 4, "Miscellaneous", "#6b7280"),
    ]
