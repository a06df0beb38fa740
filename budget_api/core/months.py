import re
from datetime import date
from typing import Optional, Tuple


MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


def parse_month(month: str) -> Optional[Tuple[int, int]]:
    """
    Split a "YYYY-MM" string into (year, month) integers.

    Only the first two dash-separated parts are read, so "2025-12-01" is
    December 2025. Returns None when either part is missing or not numeric.
    Out of range months are returned as-is; they simply never match a real date.
    """
    try:
        parts = month.split("-")
        year_part, month_part = parts[0], parts[1]
        return int(year_part), int(month_part)
    except (AttributeError, IndexError, ValueError):
        return None


def is_valid_month(month: str) -> bool:
    if not MONTH_RE.match(month):
        return False
    parsed = parse_month(month)
    return parsed is not None and 1 <= parsed[1] <= 12


def in_month(day: date, year: int, month: int) -> bool:
    return day.year == year and day.month == month
