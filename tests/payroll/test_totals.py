from dataclasses import fields
from datetime import date

from src.workforce_system.workforce_system.core.enums import DayKind
from src.workforce_system.workforce_system.payroll.days.base import DayOutcome
from src.workforce_system.workforce_system.payroll.model import DailyRecord
from src.workforce_system.workforce_system.payroll.totals import PeriodTotals


def _outcome(kind, day, **kwargs):
    return DayOutcome(kind=kind, record=DailyRecord(date=day, punch_time=""), rows=(), **kwargs)


def test_absorb_counts_only_what_the_summary_reads():
    outcomes = [
        _outcome(DayKind.SUNDAY, date(2024, 3, 3)),
        _outcome(DayKind.PRESENT, date(2024, 3, 4), working_minutes=540, permission_minutes=20, violations=1),
        _outcome(DayKind.ABSENT, date(2024, 3, 5)),
        _outcome(DayKind.HOLIDAY, date(2024, 3, 6)),
    ]
    totals = PeriodTotals()
    for outcome in outcomes:
        totals = totals.absorb(outcome)

    assert (totals.working_minutes, totals.permission_minutes, totals.punctuality_violations) == (540, 20, 1)
    assert (totals.absent_days, totals.holiday_days) == (1, 1)
    assert [d.date.day for d in totals.daily] == [3, 4, 5, 6]
    assert {f.name for f in fields(PeriodTotals)} == {
        "working_minutes",
        "permission_minutes",
        "punctuality_violations",
        "absent_days",
        "holiday_days",
        "daily",
        "rows",
    }
