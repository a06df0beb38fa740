from fastapi import HTTPException, Request, status

from .core.months import is_valid_month
from .ledger import LedgerStore


def get_ledger(request: Request) -> LedgerStore:
    return request.app.state.ledger


def check_month(month: str) -> None:
    if not is_valid_month(month):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid month")
