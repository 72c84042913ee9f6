from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ...attendance.model import Punch
from ...holidays.calendar import is_sunday
from ...holidays.model import Holiday
from .absent_strategy import AbsentStrategy
from .base import DayStrategy
from .holiday_strategy import HolidayStrategy
from .present_strategy import PresentDayStrategy
from .sunday_strategy import SundayStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: choose how a day is settled.

    Sunday wins over everything; a punched day is a working day even when it is
    a holiday; an unpunched holiday is paid; anything else is an absence.
    """

    def for_day(self, *, day: date, punches: Sequence[Punch], holiday: Optional[Holiday]) -> DayStrategy:
        if is_sunday(day):
            return SundayStrategy()
        if punches:
            return PresentDayStrategy()
        if holiday is not None:
            return HolidayStrategy(holiday)
        return AbsentStrategy()
