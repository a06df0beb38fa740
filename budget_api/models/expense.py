import datetime as dt
from typing import Optional

from sqlmodel import Field

from .base import CamelModel


class ExpenseBase(CamelModel):
    amount: float = Field(gt=0)
    description: str = Field(min_length=1, max_length=255)
    date: dt.date
    category_id: int


class ExpenseCreate(ExpenseBase):
    pass


class ExpenseUpdate(CamelModel):
    amount: Optional[float] = Field(default=None, gt=0)
    description: Optional[str] = Field(default=None, min_length=1, max_length=255)
    date: Optional[dt.date] = None
    category_id: Optional[int] = None


class Expense(ExpenseBase):
    id: int
    # Snapshot of the category at write time
    category_name: str
    category_color: str
