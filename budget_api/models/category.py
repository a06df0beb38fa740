from sqlmodel import Field

from .base import CamelModel


DEFAULT_COLOR = "#6b7280"


class Category(CamelModel):
    id: int
    name: str = Field(min_length=1, max_length=100)
    color: str = Field(default=DEFAULT_COLOR, max_length=7)
    monthly_limit: float = Field(default=0, ge=0)
    description: str = ""
