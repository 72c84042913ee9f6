from __future__ import annotations

from datetime import date
from typing import Sequence

from ...attendance.model import Punch
from ...common.formatting import format_minutes, format_time, round_half_up
from ...core.enums import DayKind, DelayType, ReportStatus
from ..model import DailyRecord, DetailedBreakdown, ReportRow
from .base import DayContext, DayOutcome, DayStrategy


class PresentDayStrategy(DayStrategy):
    """A working day with at least one punch."""

    def evaluate(self, day: date, punches: Sequence[Punch], ctx: DayContext) -> DayOutcome:
        calc = ctx.calculator
        sc = calc.schedule
        first, last = punches[0], punches[-1]

        working = calc.calculate_working_time_detailed(punches)
        permission = calc.calculate_permission_time_detailed(punches)
        adjusted = max(0.0, working.total_working_minutes - permission.total_permission_minutes)

        issues: list[str] = []
        violations = 0
        for d in permission.details:
            if calc.is_violation(d.total_minutes):
                violations += 1
                issues.append(
                    f"{d.type}: {round_half_up(d.total_minutes)} minutes "
                    f"({calc.permission_time_minutes:g} permission + {round_half_up(d.excess_minutes)} excess)"
                )
            else:
                issues.append(f"{d.type}: {round_half_up(d.total_minutes)} minutes (within permission)")

        rows: list[ReportRow] = []
        if first.minutes > sc.work_start:
            late = first.minutes - sc.work_start
            rows.append(
                ReportRow(
                    date=day,
                    out_time=format_time(sc.work_start),
                    in_time=format_time(first.minutes),
                    delay_time=format_minutes(late),
                    delay_type=DelayType.LATE_ARRIVAL.value,
                    deduction_amount=ctx.charge(late),
                    status=ReportStatus.DELAY,
                )
            )

        for gap in calc.gap_delays(punches):
            rows.append(
                ReportRow(
                    date=day,
                    out_time=format_time(gap.out_minutes),
                    in_time=format_time(gap.in_minutes),
                    delay_time=format_minutes(gap.delay_minutes),
                    delay_type=gap.delay_type,
                    deduction_amount=ctx.charge(gap.delay_minutes),
                    status=ReportStatus.DELAY,
                )
            )

        if len(punches) > 1 and last.minutes < sc.work_end:
            early = sc.work_end - last.minutes
            rows.append(
                ReportRow(
                    date=day,
                    out_time=format_time(last.minutes),
                    in_time=format_time(sc.work_end),
                    delay_time=format_minutes(early),
                    delay_type=DelayType.EARLY_DEPARTURE.value,
                    deduction_amount=ctx.charge(early),
                    status=ReportStatus.DELAY,
                )
            )

        if not rows:
            rows.append(
                ReportRow(
                    date=day,
                    out_time=format_time(first.minutes),
                    in_time=format_time(last.minutes) if len(punches) > 1 else "-",
                    delay_time="0 mins",
                    delay_type=DelayType.NO_DELAYS.value,
                    deduction_amount=0.0,
                    status=ReportStatus.PRESENT,
                )
            )

        punch_time = first.original_time if len(punches) == 1 else f"{first.original_time} - {last.original_time}"
        record = DailyRecord(
            date=day,
            punch_time=punch_time,
            working_minutes=adjusted,
            permission_minutes=permission.total_permission_minutes,
            salary_deduction=permission.total_permission_minutes * ctx.per_minute_salary,
            issues=tuple(issues),
            detailed_breakdown=DetailedBreakdown(
                intervals=working.intervals,
                deductions=working.deductions,
                permission_details=permission.details,
            ),
            day_salary_from_minutes=adjusted * ctx.per_minute_salary,
            expected_day_salary=ctx.per_day_salary,
        )
        return DayOutcome(
            kind=DayKind.PRESENT,
            record=record,
            rows=tuple(rows),
            working_minutes=adjusted,
            permission_minutes=permission.total_permission_minutes,
            violations=violations,
        )
