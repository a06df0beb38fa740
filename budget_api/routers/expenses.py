from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import check_month, get_ledger
from ..ledger import LedgerStore
from ..models.expense import Expense, ExpenseCreate, ExpenseUpdate


router = APIRouter(
    prefix="/expenses",
    tags=["expenses"],
)


@router.get(
    "",
    response_model=List[Expense],
)
def list_expenses(
    month: Optional[str] = None,
    ledger: LedgerStore = Depends(get_ledger),
):
    """
    List expenses.

    - month: optional "YYYY-MM" filter on the expense date.
    """
    if month:
        check_month(month)
    return ledger.fetch_expenses(month)


@router.get(
    "/{expense_id}",
    response_model=Expense,
)
def get_expense(
    expense_id: int,
    ledger: LedgerStore = Depends(get_ledger),
):
    expense = ledger.get_expense(expense_id)
    if expense is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found",
        )
    return expense


@router.post(
    "",
    response_model=Expense,
    status_code=status.HTTP_201_CREATED,
)
def create_expense(
    expense_in: ExpenseCreate,
    ledger: LedgerStore = Depends(get_ledger),
):
    """
    Record a new expense.

    - An unknown categoryId is kept, shown as "Unknown" in the default color.
    """
    return ledger.create_expense(expense_in)


@router.patch(
    "/{expense_id}",
    response_model=Expense,
)
def update_expense(
    expense_id: int,
    expense_in: ExpenseUpdate,
    ledger: LedgerStore = Depends(get_ledger),
):
    """Partially update an expense."""
    if not expense_in.model_dump(exclude_none=True):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    expense = ledger.update_expense(expense_id, expense_in)
    if expense is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found",
        )
    return expense


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_expense(
    expense_id: int,
    ledger: LedgerStore = Depends(get_ledger),
):
    if not ledger.delete_expense(expense_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found",
        )
    return None
