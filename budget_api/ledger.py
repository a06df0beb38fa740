from datetime import date
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from .core.months import in_month, parse_month
from .core.summary import build_monthly_summary
from .logger import get_logger
from .models.category import DEFAULT_COLOR, Category
from .models.expense import Expense, ExpenseCreate, ExpenseUpdate
from .models.summary import MonthlySummary
from .seed import mock_categories, mock_expenses


logger = get_logger(__name__)

UNKNOWN_CATEGORY_NAME = "Unknown"


class LedgerStore:
    """
    In-memory owner of the category and expense collections.

    Nothing here is process-global: build one store per app (or per test)
    and hand it to whatever needs it.
    """

    def __init__(
        self,
        categories: Optional[Iterable[Category]] = None,
        expenses: Optional[Iterable[Expense]] = None,
        today: Callable[[], date] = date.today,
    ):
        self._categories: List[Category] = list(categories or [])
        self._expenses: List[Expense] = list(expenses or [])
        self._today = today
        # Ids are never reused, even after deletions
        self._next_id = max((e.id for e in self._expenses), default=0) + 1

    @classmethod
    def with_mock_data(cls, today: Callable[[], date] = date.today) -> "LedgerStore":
        return cls(mock_categories(), mock_expenses(), today=today)

    # ─────────────────────────────
    #   CATEGORIES
    # ─────────────────────────────

    def fetch_categories(self) -> List[Category]:
        return list(self._categories)

    def get_category(self, category_id: int) -> Optional[Category]:
        return next((c for c in self._categories if c.id == category_id), None)

    # ─────────────────────────────
    #   EXPENSES
    # ─────────────────────────────

    def fetch_expenses(self, month: Optional[str] = None) -> List[Expense]:
        """
        All expenses, or only those dated in `month` ("YYYY-MM").

        A month that cannot be parsed matches nothing.
        """
        if not month:
            return list(self._expenses)
        parsed = parse_month(month)
        if parsed is None:
            return []
        year, month_num = parsed
        return [e for e in self._expenses if in_month(e.date, year, month_num)]

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        return next((e for e in self._expenses if e.id == expense_id), None)

    def create_expense(self, expense: Union[ExpenseCreate, Mapping[str, Any]]) -> Expense:
        if not isinstance(expense, ExpenseCreate):
            expense = ExpenseCreate.model_validate(expense)

        name, color = self._category_snapshot(expense.category_id)
        created = Expense(
            id=self._next_id,
            amount=expense.amount,
            description=expense.description,
            date=expense.date,
            category_id=expense.category_id,
            category_name=name,
            category_color=color,
        )
        self._next_id += 1
        self._expenses.append(created)
        logger.info("Created expense id=%s amount=%s category=%s", created.id, created.amount, name)
        return created

    def update_expense(
        self,
        expense_id: int,
        changes: Union[ExpenseUpdate, Mapping[str, Any]],
    ) -> Optional[Expense]:
        """Apply the non-null fields of `changes`; None if the id is unknown."""
        if not isinstance(changes, ExpenseUpdate):
            changes = ExpenseUpdate.model_validate(changes)

        for index, existing in enumerate(self._expenses):
            if existing.id != expense_id:
                continue
            update = changes.model_dump(exclude_none=True)
            if "category_id" in update:
                name, color = self._category_snapshot(update["category_id"])
                update["category_name"] = name
                update["category_color"] = color
            updated = existing.model_copy(update=update)
            self._expenses[index] = updated
            logger.info("Updated expense id=%s fields=%s", expense_id, sorted(update))
            return updated
        return None

    def delete_expense(self, expense_id: int) -> bool:
        """Remove the first expense with this id. Returns False if there was none."""
        for index, existing in enumerate(self._expenses):
            if existing.id == expense_id:
                del self._expenses[index]
                logger.info("Deleted expense id=%s", expense_id)
                return True
        logger.debug("Delete ignored, no expense with id=%s", expense_id)
        return False

    # ─────────────────────────────
    #   SUMMARY
    # ─────────────────────────────

    def fetch_summary(self, month: Optional[str] = None) -> MonthlySummary:
        """Spend against limits per category; defaults to the current month."""
        if month:
            parsed = parse_month(month)
            year, month_num = parsed if parsed is not None else (None, None)
        else:
            today = self._today()
            year, month_num = today.year, today.month
        return build_monthly_summary(self._categories, self._expenses, year, month_num)

    def _category_snapshot(self, category_id: int) -> Tuple[str, str]:
        category = self.get_category(category_id)
        if category is None:
            return UNKNOWN_CATEGORY_NAME, DEFAULT_COLOR
        return category.name, category.color
