"""
Date utilities.
"""
from datetime import date, datetime, timezone
from typing import Optional


def utc_today() -> date:
    """
    Get the current UTC date.

    Returns:
        date: Today's date in UTC
    """
    return datetime.now(timezone.utc).date()


def get_current_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """
    Get the age in whole years of someone born on ``date_of_birth``.

    Args:
        date_of_birth: Birth date
        today: Reference date, defaults to today in UTC

    Returns:
        int: Completed years, never negative
    """
    today = today or utc_today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return max(age, 0)
