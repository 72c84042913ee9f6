"""Display helpers.

Everything here turns numbers into strings for reports; none of it is used for
arithmetic or comparisons.
"""
from __future__ import annotations

import math
from datetime import date

from ..core.constants import CURRENCY_SYMBOL


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def minutes_to_time(total_minutes: float) -> str:
    """Minutes -> ``HH:MM:SS``."""
    total_seconds = round_half_up(total_minutes * 60)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_time(minutes: float) -> str:
    """Minutes since midnight -> ``H:MM AM/PM``."""
    hours = int(math.floor(minutes / 60))
    mins = int(math.floor(minutes % 60))
    period = "PM" if hours >= 12 else "AM"
    if hours > 12:
        display_hours = hours - 12
    elif hours == 0:
        display_hours = 12
    else:
        display_hours = hours
    return f"{display_hours}:{mins:02d} {period}"


def format_date(value: date) -> str:
    """``date(2024, 3, 5)`` -> ``"05 March"``."""
    return value.strftime("%d %B")


def format_currency(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_minutes(minutes: float) -> str:
    return f"{round_half_up(minutes)} mins"
