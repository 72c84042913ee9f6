from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.formatting import format_currency, format_date, minutes_to_time, round_half_up
from ..core.constants import DEFAULT_ADVANCE_DESCRIPTION
from ..core.enums import ReportStatus
from ..workers.model import WorkerInfo


@dataclass(frozen=True)
class AdvanceDeduction:
    """An amount already taken from an advance voucher inside the period."""

    date: date
    amount: float
    description: str = DEFAULT_ADVANCE_DESCRIPTION

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Optional["AdvanceDeduction"]:
        day = coerce_date(raw.get("date"))
        if day is None:
            return None
        try:
            amount = float(raw.get("amount") or 0)
        except (TypeError, ValueError):
            amount = 0.0
        return cls(date=day, amount=amount, description=str(raw.get("description") or DEFAULT_ADVANCE_DESCRIPTION))


# --- Per-day calculation detail ---


@dataclass(frozen=True)
class TimeDeduction:
    type: str
    deducted_minutes: float
    reason: str

    def to_dict(self) -> dict:
        return {"type": self.type, "deductedMinutes": self.deducted_minutes, "reason": self.reason}


@dataclass(frozen=True)
class WorkInterval:
    """One IN->OUT pair after clipping to the shift and removing unpaid breaks."""

    interval_number: int
    in_time: str
    out_time: str
    raw_minutes: float
    final_minutes: float
    deductions: tuple[TimeDeduction, ...] = ()

    @property
    def total_deducted(self) -> float:
        return self.raw_minutes - self.final_minutes

    def to_dict(self) -> dict:
        return {
            "intervalNumber": self.interval_number,
            "inTime": self.in_time,
            "outTime": self.out_time,
            "rawMinutes": self.raw_minutes,
            "finalMinutes": self.final_minutes,
            "deductions": [d.to_dict() for d in self.deductions],
            "totalDeducted": self.total_deducted,
        }


@dataclass(frozen=True)
class WorkingTimeResult:
    total_working_minutes: float = 0.0
    intervals: tuple[WorkInterval, ...] = ()
    deductions: tuple[TimeDeduction, ...] = ()


@dataclass(frozen=True)
class PermissionDetail:
    type: str
    total_minutes: float
    permission_used: float
    excess_minutes: float
    description: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "totalMinutes": self.total_minutes,
            "permissionUsed": self.permission_used,
            "excessMinutes": self.excess_minutes,
            "description": self.description,
        }


@dataclass(frozen=True)
class PermissionTimeResult:
    total_permission_minutes: float = 0.0
    details: tuple[PermissionDetail, ...] = ()


@dataclass(frozen=True)
class GapDelay:
    """Minutes an OUT->IN gap ran over the lunch/break time it covered."""

    out_minutes: float
    in_minutes: float
    delay_minutes: float
    delay_type: str


@dataclass(frozen=True)
class DetailedBreakdown:
    intervals: tuple[WorkInterval, ...] = ()
    deductions: tuple[TimeDeduction, ...] = ()
    permission_details: tuple[PermissionDetail, ...] = ()

    def to_dict(self) -> dict:
        return {
            "intervals": [i.to_dict() for i in self.intervals],
            "deductions": [d.to_dict() for d in self.deductions],
            "permissionDetails": [p.to_dict() for p in self.permission_details],
        }


# --- Report structures ---

EMPTY_FINAL_SUMMARY: dict[str, Any] = {
    "Total Days in Period": 0,
    "Total Working Days": 0,
    "Total Sundays": 0,
    "Total Holidays": 0,
    "Total Absent Days": 0,
    "Actual Working Days": 0,
    "Total Working Hours": "0 hours",
    "Total Permission Time": "0 minutes",
    "Absent Deduction": format_currency(0),
    "Permission Deduction": format_currency(0),
    "Advance Deduction": format_currency(0),
    "Total Salary Deductions": format_currency(0),
    "Attendance Rate": "0%",
    "Final Salary": format_currency(0),
}


@dataclass(frozen=True)
class DailyRecord:
    date: date
    punch_time: str
    working_minutes: float = 0.0
    permission_minutes: float = 0.0
    salary_deduction: float = 0.0
    issues: tuple[str, ...] = ()
    detailed_breakdown: DetailedBreakdown = field(default_factory=DetailedBreakdown)
    day_salary_from_minutes: float = 0.0
    expected_day_salary: float = 0.0

    @property
    def working_hours(self) -> float:
        return self.working_minutes / 60

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "punchTime": self.punch_time,
            "workingMinutes": self.working_minutes,
            "permissionMinutes": self.permission_minutes,
            "salaryDeduction": self.salary_deduction,
            "issues": list(self.issues),
            "detailedBreakdown": self.detailed_breakdown.to_dict(),
            "workingHours": self.working_hours,
            "permissionTime": self.permission_minutes,
            "workingTimeDisplay": minutes_to_time(self.working_minutes) if self.working_minutes > 0 else "-",
            "permissionTimeDisplay": minutes_to_time(self.permission_minutes) if self.permission_minutes > 0 else "-",
            "daySalaryFromMinutes": self.day_salary_from_minutes,
            "expectedDaySalary": self.expected_day_salary,
        }


@dataclass(frozen=True)
class ReportRow:
    """One line of the delay report.

    ``deduction_amount`` is ``None`` for rows that show ``-`` (Sunday, holiday).
    """

    date: date
    out_time: str
    in_time: str
    delay_time: str
    delay_type: str
    deduction_amount: Optional[float]
    status: ReportStatus
    description: Optional[str] = None

    def to_dict(self) -> dict:
        row = {
            "date": format_date(self.date),
            "outTime": self.out_time,
            "inTime": self.in_time,
            "delayTime": self.delay_time,
            "delayType": self.delay_type,
            "deductionAmount": "-" if self.deduction_amount is None else format_currency(self.deduction_amount),
            "status": self.status.value,
        }
        if self.description is not None:
            row["description"] = self.description
        return row


@dataclass(frozen=True)
class Configuration:
    consider_overtime: bool
    deduct_salary: bool
    work_start_time: str
    work_end_time: str
    lunch_start_time: str
    lunch_end_time: str
    permission_time_minutes: float
    salary_deduction_per_break: float
    standard_working_minutes_per_day: float

    def to_dict(self) -> dict:
        return {
            "considerOvertime": self.consider_overtime,
            "deductSalary": self.deduct_salary,
            "workStartTime": self.work_start_time,
            "workEndTime": self.work_end_time,
            "lunchStartTime": self.lunch_start_time,
            "lunchEndTime": self.lunch_end_time,
            "permissionTimeMinutes": self.permission_time_minutes,
            "salaryDeductionPerBreak": self.salary_deduction_per_break,
            "standardWorkingMinutesPerDay": self.standard_working_minutes_per_day,
        }


@dataclass(frozen=True)
class PeriodSummary:
    punctuality_score: float = 0.0
    attendance_rate: float = 0.0
    final_salary: float = 0.0
    original_salary: float = 0.0
    salary_from_working_minutes: float = 0.0
    per_minute_salary: float = 0.0
    per_day_salary: float = 0.0
    salary_working_days: int = 0
    total_working_days_in_period: int = 0
    total_days_in_period: int = 0
    total_sundays_in_period: int = 0
    total_holidays_in_period: int = 0
    total_absent_days: int = 0
    actual_working_days: int = 0
    total_working_minutes: float = 0.0
    total_permission_minutes: float = 0.0
    absent_deduction: float = 0.0
    permission_deduction: float = 0.0
    advance_deduction: float = 0.0
    total_deduction: float = 0.0
    worker: WorkerInfo = field(default_factory=WorkerInfo)

    def to_dict(self) -> dict:
        return {
            "punctualityScore": self.punctuality_score,
            "attendanceRate": self.attendance_rate,
            "finalSalary": self.final_salary,
            "originalSalary": self.original_salary,
            "originalSalaryForPeriod": self.original_salary,
            "salaryFromWorkingMinutes": self.salary_from_working_minutes,
            "perMinuteSalary": self.per_minute_salary,
            "perDaySalary": self.per_day_salary,
            "salaryWorkingDays": self.salary_working_days,
            "totalWorkingDaysInPeriod": self.total_working_days_in_period,
            "totalDaysInPeriod": self.total_days_in_period,
            "totalSundaysInPeriod": self.total_sundays_in_period,
            "totalHolidaysInPeriod": self.total_holidays_in_period,
            "totalAbsentDays": self.total_absent_days,
            "actualWorkingDays": self.actual_working_days,
            "totalWorkingMinutes": self.total_working_minutes,
            "totalPermissionMinutes": self.total_permission_minutes,
            "absentDeduction": self.absent_deduction,
            "permissionDeduction": self.permission_deduction,
            "advanceDeduction": self.advance_deduction,
            "totalDeduction": self.total_deduction,
            "worker": self.worker.to_dict(),
        }


@dataclass(frozen=True)
class ProductivityResult:
    """Everything one run of the engine produces.

    The empty case uses the same shape with zeroed fields, so callers never
    have to check which variant they received.
    """

    total_days: int = 0
    working_days: int = 0
    total_working_hours: float = 0.0
    average_working_hours: float = 0.0
    total_permission_time: float = 0.0
    total_salary_deduction: float = 0.0
    total_advance_deduction: float = 0.0
    total_absent_days: int = 0
    total_sunday_count: int = 0
    total_holiday_count: int = 0
    productivity_percentage: float = 0.0
    daily_breakdown: tuple[DailyRecord, ...] = ()
    summary: PeriodSummary = field(default_factory=PeriodSummary)
    configuration: Optional[Configuration] = None
    report: tuple[ReportRow, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def final_summary(self) -> dict[str, Any]:
        """Human-readable totals keyed by their display labels."""
        s = self.summary
        if self.configuration is None:
            return dict(EMPTY_FINAL_SUMMARY)
        return {
            "Total Days in Period": s.total_days_in_period,
            "Total Working Days": s.total_working_days_in_period,
            "Total Sundays": s.total_sundays_in_period,
            "Total Holidays": self.total_holiday_count,
            "Total Absent Days": s.total_absent_days,
            "Actual Working Days": s.actual_working_days,
            "Total Working Hours": f"{s.total_working_minutes / 60:.2f} hours",
            "Total Permission Time": f"{round_half_up(s.total_permission_minutes)} minutes",
            "Absent Deduction": format_currency(s.absent_deduction),
            "Permission Deduction": format_currency(s.permission_deduction),
            "Advance Deduction": format_currency(s.advance_deduction),
            "Total Salary Deductions": format_currency(s.total_deduction),
            "Attendance Rate": f"{s.attendance_rate:.1f}%",
            "Final Salary": format_currency(s.final_salary),
        }

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "workingDays": self.working_days,
            "totalWorkingHours": self.total_working_hours,
            "averageWorkingHours": self.average_working_hours,
            "totalPermissionTime": self.total_permission_time,
            "totalSalaryDeduction": self.total_salary_deduction,
            "totalAdvanceDeduction": self.total_advance_deduction,
            "totalAbsentDays": self.total_absent_days,
            "totalSundayCount": self.total_sunday_count,
            "totalHolidayCount": self.total_holiday_count,
            "productivityPercentage": self.productivity_percentage,
            "dailyBreakdown": [d.to_dict() for d in self.daily_breakdown],
            "summary": self.summary.to_dict(),
            "configuration": self.configuration.to_dict() if self.configuration else {},
            "finalSummary": self.final_summary,
            "report": [r.to_dict() for r in self.report],
            "warnings": list(self.warnings),
        }
