from __future__ import annotations

from datetime import date
from typing import Sequence

from ...attendance.model import Punch
from ...core.enums import DayKind, ReportStatus
from ..model import DailyRecord, ReportRow
from .base import DayContext, DayOutcome, DayStrategy


class AbsentStrategy(DayStrategy):
    """Working day without punches: the full day's salary is deducted."""

    def evaluate(self, day: date, punches: Sequence[Punch], ctx: DayContext) -> DayOutcome:
        record = DailyRecord(
            date=day,
            punch_time="Absent",
            salary_deduction=ctx.per_day_salary,
            issues=("Absent - Full day salary deducted",),
            expected_day_salary=ctx.per_day_salary,
        )
        row = ReportRow(
            date=day,
            out_time="Absent",
            in_time="Absent",
            delay_time="Full Day",
            delay_type="Absent - Full day",
            deduction_amount=ctx.per_day_salary,
            status=ReportStatus.ABSENT,
        )
        return DayOutcome(kind=DayKind.ABSENT, record=record, rows=(row,))
