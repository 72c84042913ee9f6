from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.enums import DayKind
from .days.base import DayOutcome
from .model import DailyRecord, ReportRow


@dataclass(frozen=True)
class PeriodTotals:
    """Running totals of a period, folded one settled day at a time."""

    working_minutes: float = 0.0
    permission_minutes: float = 0.0
    punctuality_violations: int = 0
    absent_days: int = 0
    holiday_days: int = 0
    daily: tuple[DailyRecord, ...] = ()
    rows: tuple[ReportRow, ...] = ()

    def absorb(self, outcome: DayOutcome) -> "PeriodTotals":
        return replace(
            self,
            working_minutes=self.working_minutes + outcome.working_minutes,
            permission_minutes=self.permission_minutes + outcome.permission_minutes,
            punctuality_violations=self.punctuality_violations + outcome.violations,
            absent_days=self.absent_days + (outcome.kind == DayKind.ABSENT),
            holiday_days=self.holiday_days + (outcome.kind == DayKind.HOLIDAY),
            daily=self.daily + (outcome.record,),
            rows=self.rows + outcome.rows,
        )
