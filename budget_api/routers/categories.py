from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_ledger
from ..ledger import LedgerStore
from ..models.category import Category


router = APIRouter(
    prefix="/categories",
    tags=["categories"],
)


@router.get(
    "",
    response_model=List[Category],
    status_code=status.HTTP_200_OK,
)
def list_categories(ledger: LedgerStore = Depends(get_ledger)):
    return ledger.fetch_categories()


@router.get(
    "/{category_id}",
    response_model=Category,
)
def get_category(
    category_id: int,
    ledger: LedgerStore = Depends(get_ledger),
):
    category = ledger.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category
