from typing import Any, List, Mapping, Optional, Union

from .ledger import LedgerStore
from .models.category import Category
from .models.expense import Expense, ExpenseCreate
from .models.summary import MonthlySummary


class LedgerClient:
    """
    Async call surface used by UI code.

    Every coroutine completes without awaiting anything; the signatures are
    the ones a networked client against the /api routes would expose.
    """

    def __init__(self, store: LedgerStore):
        self._store = store

    async def fetch_summary(self, month: Optional[str] = None) -> MonthlySummary:
        return self._store.fetch_summary(month)

    async def fetch_categories(self) -> List[Category]:
        return self._store.fetch_categories()

    async def fetch_expenses(self, month: Optional[str] = None) -> List[Expense]:
        return self._store.fetch_expenses(month)

    async def create_expense(self, expense: Union[ExpenseCreate, Mapping[str, Any]]) -> Expense:
        return self._store.create_expense(expense)

    async def delete_expense(self, expense_id: int) -> None:
        self._store.delete_expense(expense_id)
