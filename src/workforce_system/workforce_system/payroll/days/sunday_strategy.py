from __future__ import annotations

from datetime import date
from typing import Sequence

from ...attendance.model import Punch
from ...core.enums import DayKind, ReportStatus
from ..model import DailyRecord, ReportRow
from .base import DayContext, DayOutcome, DayStrategy

WEEKLY_OFF = "Sunday - Weekly off"


class SundayStrategy(DayStrategy):
    """Weekly off. Punches on a Sunday are not settled as work."""

    def evaluate(self, day: date, punches: Sequence[Punch], ctx: DayContext) -> DayOutcome:
        record = DailyRecord(
            date=day,
            punch_time="-",
            issues=(WEEKLY_OFF,),
            expected_day_salary=ctx.per_day_salary,
        )
        row = ReportRow(
            date=day,
            out_time="-",
            in_time="-",
            delay_time="-",
            delay_type=WEEKLY_OFF,
            deduction_amount=None,
            status=ReportStatus.SUNDAY,
        )
        return DayOutcome(kind=DayKind.SUNDAY, record=record, rows=(row,))
