from __future__ import annotations

from typing import Sequence

from ...attendance.model import Punch, pair_directions
from ...common.formatting import format_time, round_half_up
from ...core.enums import DelayType, PunchDirection
from ...schedules.model import ActiveSchedule
from ..model import GapDelay, PermissionDetail, PermissionTimeResult, TimeDeduction, WorkInterval, WorkingTimeResult
from .base import PayrollCalculator


def _overlap(start: float, end: float, window_start: float, window_end: float) -> float:
    if start < window_end and end > window_start:
        return max(0.0, min(end, window_end) - max(start, window_start))
    return 0.0


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: IN->OUT pairs clipped to the shift, unpaid lunch/breaks removed.

    Overtime beyond the standard day is dropped unless ``consider_overtime``.
    """

    def __init__(self, schedule: ActiveSchedule, *, permission_time_minutes: float, consider_overtime: bool = False):
        self.schedule = schedule
        self.permission_time_minutes = float(permission_time_minutes)
        self.consider_overtime = bool(consider_overtime)

    def calculate_working_time_detailed(self, punches: Sequence[Punch]) -> WorkingTimeResult:
        if not punches:
            return WorkingTimeResult()

        sc = self.schedule
        total = 0.0
        intervals: list[WorkInterval] = []
        deductions: list[TimeDeduction] = []

        for i in range(len(punches) - 1):
            current, nxt = punches[i], punches[i + 1]
            if pair_directions(punches, i) != (PunchDirection.IN, PunchDirection.OUT):
                continue

            start = max(current.minutes, sc.work_start)
            end = min(nxt.minutes, sc.work_end)
            if end <= start:
                continue

            raw = end - start
            final = raw
            interval_deductions: list[TimeDeduction] = []

            if not sc.lunch_counted:
                lunch = _overlap(start, end, sc.lunch_start, sc.lunch_end)
                if lunch > 0:
                    final -= lunch
                    interval_deductions.append(TimeDeduction("Lunch", lunch, "Lunch break deduction"))

            for b in sc.breaks:
                if b.counted:
                    continue
                overlap = _overlap(start, end, b.start, b.end)
                if overlap > 0:
                    final -= overlap
                    interval_deductions.append(
                        TimeDeduction(b.label, overlap, f"Break interval {b.from_time} - {b.to_time}")
                    )

            final = max(0.0, final)
            intervals.append(
                WorkInterval(
                    interval_number=i + 1,
                    in_time=format_time(current.minutes),
                    out_time=format_time(nxt.minutes),
                    raw_minutes=raw,
                    final_minutes=final,
                    deductions=tuple(interval_deductions),
                )
            )
            deductions.extend(interval_deductions)
            total += final

        if not self.consider_overtime:
            expected = sc.standard_working_minutes
            if total > expected:
                deductions.append(
                    TimeDeduction("Overtime Exclusion", total - expected, "Overtime not considered in calculations")
                )
                total = expected

        return WorkingTimeResult(
            total_working_minutes=max(0.0, total),
            intervals=tuple(intervals),
            deductions=tuple(deductions),
        )

    def calculate_permission_time_detailed(self, punches: Sequence[Punch]) -> PermissionTimeResult:
        if not punches:
            return PermissionTimeResult()

        sc = self.schedule
        first, last = punches[0], punches[-1]
        details: list[PermissionDetail] = []
        total = 0.0

        if first.minutes > sc.work_start:
            late = first.minutes - sc.work_start
            used, excess = self.permission_split(late)
            details.append(
                PermissionDetail(
                    type=DelayType.LATE_ARRIVAL.value,
                    total_minutes=late,
                    permission_used=used,
                    excess_minutes=excess,
                    description=f"Arrived {round_half_up(late)} minutes late",
                )
            )
            total += late

        # A single punch means the worker never clocked out.
        if len(punches) > 1 and last.minutes < sc.work_end:
            early = sc.work_end - last.minutes
            used, excess = self.permission_split(early)
            details.append(
                PermissionDetail(
                    type=DelayType.EARLY_DEPARTURE.value,
                    total_minutes=early,
                    permission_used=used,
                    excess_minutes=excess,
                    description=f"Left {round_half_up(early)} minutes early",
                )
            )
            total += early

        return PermissionTimeResult(total_permission_minutes=total, details=tuple(details))

    def gap_delays(self, punches: Sequence[Punch]) -> list[GapDelay]:
        sc = self.schedule
        delays: list[GapDelay] = []

        for i in range(len(punches) - 1):
            current, nxt = punches[i], punches[i + 1]
            if pair_directions(punches, i) != (PunchDirection.OUT, PunchDirection.IN):
                continue

            out_at, in_at = current.minutes, nxt.minutes
            gap = in_at - out_at
            is_lunch = out_at < sc.lunch_end and in_at > sc.lunch_start
            is_defined_break = any(out_at < b.end and in_at > b.start for b in sc.breaks)

            expected = 0.0
            if is_lunch and not sc.lunch_counted:
                expected = _overlap(out_at, in_at, sc.lunch_start, sc.lunch_end)
            for b in sc.breaks:
                if not b.counted:
                    expected += _overlap(out_at, in_at, b.start, b.end)

            delay = max(0.0, gap - expected)
            if delay <= 0:
                continue

            delay_type = DelayType.BREAK_DELAY
            if is_lunch and not is_defined_break:
                delay_type = DelayType.LUNCH_DELAY
            delays.append(GapDelay(out_minutes=out_at, in_minutes=in_at, delay_minutes=delay, delay_type=delay_type.value))

        return delays
