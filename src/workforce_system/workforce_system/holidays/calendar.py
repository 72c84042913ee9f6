"""Calendar classification of days inside a payroll period."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Sequence

from .model import Holiday


def is_sunday(day: date) -> bool:
    return day.weekday() == 6


def find_holiday(day: date, holidays: Sequence[Holiday]) -> Optional[Holiday]:
    """First holiday falling on ``day``, or ``None``."""
    for h in holidays:
        if h.date == day:
            return h
    return None


def generate_date_range(from_date: date, to_date: date) -> list[date]:
    """Every day from ``from_date`` to ``to_date`` inclusive; empty when reversed."""
    days: list[date] = []
    current = from_date
    while current <= to_date:
        days.append(current)
        current += timedelta(days=1)
    return days


def count_sundays_in_range(from_date: date, to_date: date) -> int:
    return sum(1 for d in generate_date_range(from_date, to_date) if is_sunday(d))


def count_holidays_in_range(from_date: date, to_date: date, holidays: Sequence[Holiday]) -> int:
    """Holidays that fall on a working weekday of the range.

    A holiday on a Sunday is already counted as a Sunday.
    """
    return sum(
        1
        for d in generate_date_range(from_date, to_date)
        if not is_sunday(d) and find_holiday(d, holidays) is not None
    )
