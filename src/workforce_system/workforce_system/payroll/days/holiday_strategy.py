from __future__ import annotations

from datetime import date
from typing import Sequence

from ...attendance.model import Punch
from ...core.enums import DayKind, ReportStatus
from ...holidays.model import Holiday
from ..model import DailyRecord, ReportRow
from .base import DayContext, DayOutcome, DayStrategy


class HolidayStrategy(DayStrategy):
    """Declared holiday without punches: no salary deduction."""

    def __init__(self, holiday: Holiday):
        self.holiday = holiday

    def evaluate(self, day: date, punches: Sequence[Punch], ctx: DayContext) -> DayOutcome:
        label = f"Holiday - {self.holiday.name}"
        record = DailyRecord(
            date=day,
            punch_time="-",
            issues=(label,),
            expected_day_salary=ctx.per_day_salary,
        )
        row = ReportRow(
            date=day,
            out_time="-",
            in_time="-",
            delay_time="-",
            delay_type=label,
            deduction_amount=None,
            status=ReportStatus.HOLIDAY,
        )
        return DayOutcome(kind=DayKind.HOLIDAY, record=record, rows=(row,))
