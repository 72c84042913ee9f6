from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import time_to_minutes
from ..core.constants import (
    DEFAULT_BATCH_NAME,
    DEFAULT_DEDUCTION_PER_BREAK,
    DEFAULT_LUNCH_FROM,
    DEFAULT_LUNCH_TO,
    DEFAULT_PERMISSION_MINUTES,
    DEFAULT_REQUIRED_HOURS,
    DEFAULT_WORK_END,
    DEFAULT_WORK_START,
)
from ..holidays.model import Holiday


def _flag(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _number(value: Any, default: float) -> float:
    try:
        return float(value) if value is not None else default
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Batch:
    """A named shift: work window plus its lunch window."""

    batch_name: str
    from_time: str = DEFAULT_WORK_START
    to_time: str = DEFAULT_WORK_END
    lunch_from: str = DEFAULT_LUNCH_FROM
    lunch_to: str = DEFAULT_LUNCH_TO
    is_lunch_consider: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Batch":
        return cls(
            batch_name=str(raw.get("batchName") or ""),
            from_time=str(raw.get("from") or DEFAULT_WORK_START),
            to_time=str(raw.get("to") or DEFAULT_WORK_END),
            lunch_from=str(raw.get("lunchFrom") or DEFAULT_LUNCH_FROM),
            lunch_to=str(raw.get("lunchTo") or DEFAULT_LUNCH_TO),
            is_lunch_consider=_flag(raw.get("isLunchConsider")),
        )


@dataclass(frozen=True)
class BreakInterval:
    interval_name: str
    from_time: str
    to_time: str
    is_break_consider: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "BreakInterval":
        return cls(
            interval_name=str(raw.get("intervalName") or ""),
            from_time=str(raw.get("from") or ""),
            to_time=str(raw.get("to") or ""),
            is_break_consider=_flag(raw.get("isBreakConsider")),
        )


@dataclass(frozen=True)
class AttendanceTimer:
    """Hours a worker must put in over a month to count as present."""

    global_time: float = DEFAULT_REQUIRED_HOURS
    apply_to_all_workers: bool = True
    specific_workers: Mapping[str, float] = field(default_factory=dict)

    def hours_for(self, worker_id: Optional[str]) -> float:
        if self.apply_to_all_workers or worker_id is None:
            return self.global_time
        return self.specific_workers.get(str(worker_id), self.global_time)

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "AttendanceTimer":
        if not raw:
            return cls()
        specific = {
            str(w.get("workerId")): _number(w.get("time"), DEFAULT_REQUIRED_HOURS)
            for w in raw.get("specificWorkers") or []
            if w.get("workerId") is not None
        }
        return cls(
            global_time=_number(raw.get("globalTime"), DEFAULT_REQUIRED_HOURS),
            apply_to_all_workers=_flag(raw.get("applyToAllWorkers"), True),
            specific_workers=specific,
        )


@dataclass(frozen=True)
class ProductivityOptions:
    """Per-run schedule and deduction rules.

    ``lunch_from``/``lunch_to``/``is_lunch_consider`` override the selected
    batch's lunch window when set; ``None`` means "use the batch".
    """

    consider_overtime: bool = False
    deduct_salary: bool = True
    permission_time_minutes: float = DEFAULT_PERMISSION_MINUTES
    salary_deduction_per_break: float = DEFAULT_DEDUCTION_PER_BREAK
    batches: Sequence[Batch] = ()
    intervals: Sequence[BreakInterval] = ()
    filtered_batch: str = DEFAULT_BATCH_NAME
    holidays: Sequence[Holiday] = ()
    lunch_from: Optional[str] = None
    lunch_to: Optional[str] = None
    is_lunch_consider: Optional[bool] = None
    monthly_working_days: Mapping[str, int] = field(default_factory=dict)

    def working_days_for_month(self, year: int, month: int) -> int:
        return int(self.monthly_working_days.get(f"{year}-{month:02d}", 0) or 0)

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "ProductivityOptions":
        """Read the camelCase settings/options object used by the API."""
        if not raw:
            return cls()
        holidays = tuple(
            h for h in (Holiday.from_mapping(item) for item in raw.get("holidays") or []) if h is not None
        )
        monthly = {
            str(m.get("month")): int(_number(m.get("workingDays"), 0))
            for m in raw.get("monthlyWorkingDays") or []
            if m.get("month")
        }
        is_lunch_consider = raw.get("isLunchConsider")
        return cls(
            consider_overtime=_flag(raw.get("considerOvertime")),
            deduct_salary=_flag(raw.get("deductSalary"), True),
            permission_time_minutes=_number(raw.get("permissionTimeMinutes"), DEFAULT_PERMISSION_MINUTES),
            salary_deduction_per_break=_number(raw.get("salaryDeductionPerBreak"), DEFAULT_DEDUCTION_PER_BREAK),
            batches=tuple(Batch.from_mapping(b) for b in raw.get("batches") or []),
            intervals=tuple(BreakInterval.from_mapping(i) for i in raw.get("intervals") or []),
            filtered_batch=str(raw.get("fiteredBatch") or raw.get("filteredBatch") or DEFAULT_BATCH_NAME),
            holidays=holidays,
            lunch_from=raw.get("lunchFrom") or None,
            lunch_to=raw.get("lunchTo") or None,
            is_lunch_consider=None if is_lunch_consider is None else _flag(is_lunch_consider),
            monthly_working_days=monthly,
        )


@dataclass(frozen=True)
class BreakWindow:
    label: str
    start: float
    end: float
    counted: bool
    from_time: str
    to_time: str

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class ActiveSchedule:
    """The batch in force for a run, resolved to minutes since midnight."""

    batch_name: str
    work_start_time: str
    work_end_time: str
    lunch_from: str
    lunch_to: str
    lunch_counted: bool
    breaks: tuple[BreakWindow, ...] = ()
    batch_found: bool = True

    @property
    def work_start(self) -> float:
        return time_to_minutes(self.work_start_time)

    @property
    def work_end(self) -> float:
        return time_to_minutes(self.work_end_time)

    @property
    def lunch_start(self) -> float:
        return time_to_minutes(self.lunch_from)

    @property
    def lunch_end(self) -> float:
        return time_to_minutes(self.lunch_to)

    @property
    def standard_working_minutes(self) -> float:
        """Shift length minus the lunch and breaks that are not paid."""
        minutes = self.work_end - self.work_start
        if not self.lunch_counted:
            minutes -= self.lunch_end - self.lunch_start
        for b in self.breaks:
            if not b.counted:
                minutes -= b.duration
        return minutes

    @classmethod
    def resolve(cls, options: ProductivityOptions) -> "ActiveSchedule":
        batch = next((b for b in options.batches if b.batch_name == options.filtered_batch), None)
        lunch_counted = options.is_lunch_consider
        if lunch_counted is None:
            lunch_counted = batch.is_lunch_consider if batch else False
        breaks = tuple(
            BreakWindow(
                label=f"Break {idx + 1}",
                start=time_to_minutes(i.from_time),
                end=time_to_minutes(i.to_time),
                counted=i.is_break_consider,
                from_time=i.from_time,
                to_time=i.to_time,
            )
            for idx, i in enumerate(options.intervals)
        )
        return cls(
            batch_name=options.filtered_batch,
            work_start_time=batch.from_time if batch else DEFAULT_WORK_START,
            work_end_time=batch.to_time if batch else DEFAULT_WORK_END,
            lunch_from=options.lunch_from or (batch.lunch_from if batch else DEFAULT_LUNCH_FROM),
            lunch_to=options.lunch_to or (batch.lunch_to if batch else DEFAULT_LUNCH_TO),
            lunch_counted=bool(lunch_counted),
            breaks=breaks,
            batch_found=batch is not None,
        )


@dataclass(frozen=True)
class CompanySettings:
    """Settings row of one company (subdomain) as the settings store keeps it."""

    options: ProductivityOptions = field(default_factory=ProductivityOptions)
    attendance_timer: AttendanceTimer = field(default_factory=AttendanceTimer)

    def working_days_for_month(self, year: int, month: int) -> int:
        return self.options.working_days_for_month(year, month)

    def options_for(self, *, batch_name: Optional[str], holidays: Sequence[Holiday]) -> ProductivityOptions:
        """Options for one run: the chosen batch and the holidays of the period."""
        return replace(
            self.options,
            filtered_batch=batch_name or self.options.filtered_batch,
            holidays=tuple(holidays),
        )

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "CompanySettings":
        if not raw:
            return cls()
        return cls(
            options=ProductivityOptions.from_mapping(raw),
            attendance_timer=AttendanceTimer.from_mapping(raw.get("attendanceTimer")),
        )
