"""
Calendar arithmetic helpers.

Month subtraction clamps to the last valid day of the target month, so
March 31 minus one month is the last day of February.
"""

import calendar
from datetime import date, datetime


def as_date(value: date | datetime) -> date:
    """Drop any time component from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """
    Move a (year, month) pair by a number of calendar months.

    Args:
        year: Four digit year.
        month: Month number, 1-12.
        months: Months to move by, negative to go back.

    Returns:
        The resulting (year, month) pair.
    """
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def add_months(value: date, months: int) -> date:
    """Return ``value`` moved by ``months`` calendar months, clamping the day."""
    year, month = shift_month(value.year, value.month, months)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def subtract_months(value: date, months: int) -> date:
    return add_months(value, -months)
