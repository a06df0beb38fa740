from typing import Optional

from fastapi import APIRouter, Depends, status

from ..dependencies import check_month, get_ledger
from ..ledger import LedgerStore
from ..models.summary import MonthlySummary


router = APIRouter(
    prefix="/summary",
    tags=["summary"],
)


@router.get(
    "",
    response_model=MonthlySummary,
    status_code=status.HTTP_200_OK,
)
def get_monthly_summary(
    month: Optional[str] = None,
    ledger: LedgerStore = Depends(get_ledger),
):
    """
    Total spend and per-category breakdown for a month.

    - month: "YYYY-MM", defaults to the current month.
    """
    if month:
        check_month(month)
    return ledger.fetch_summary(month)
