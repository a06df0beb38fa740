from typing import List, Literal, Optional

from .base import CamelModel


BudgetStatus = Literal["ok", "warning", "exceeded"]


class CategorySummary(CamelModel):
    category_id: int
    category_name: str
    category_color: str
    spent: float
    limit: float
    percent_used: float
    status: BudgetStatus


class MonthlySummary(CamelModel):
    # None when the requested month could not be parsed
    year: Optional[int]
    month: Optional[int]
    total_spent: float
    total_limit: float
    category_breakdown: List[CategorySummary]
