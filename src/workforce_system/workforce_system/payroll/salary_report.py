"""Monthly salary sheet for every worker of the company.

A worker counts as present for the whole month when the hours worked reach
the attendance timer's requirement; otherwise every working day is a leave.
"""
from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Sequence

from ..advances.repository import AdvanceRepository
from ..advances.service import current_month_advance, previous_advance_balance
from ..attendance.model import AttendancePunch
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_attendance_time
from ..common.validators import require_month
from ..core.enums import PunchDirection
from ..core.exceptions import NotFoundError
from ..schedules.repository import SettingsRepository
from ..workers.repository import WorkerRepository

logger = logging.getLogger(__name__)


def worked_hours(punches: Iterable[AttendancePunch]) -> float:
    """Sum of IN->OUT spans in hours; a span may cross midnight.

    Only explicitly labelled punches count. An OUT without an open IN is
    ignored and a later IN replaces an open one.
    """
    labelled = sorted(
        (p for p in punches if p.date is not None and p.direction is not None),
        key=lambda p: (p.date, parse_attendance_time(p.time)),
    )
    total_minutes = 0.0
    opened = None
    for p in labelled:
        stamp = p.date.toordinal() * 1440 + parse_attendance_time(p.time)
        if p.direction == PunchDirection.IN:
            opened = stamp
        elif opened is not None:
            total_minutes += stamp - opened
            opened = None
    return total_minutes / 60


@dataclass(frozen=True)
class SalaryLine:
    serial_number: int
    employee_id: str
    employee_name: str
    designation: str
    monthly_salary: float
    total_days: int
    leaves: int
    working_days: int
    per_day_salary: float
    total_salary: float
    current_month_advance: float
    previous_advance: float
    pending_salary: float
    working_hours: float
    required_hours: float
    is_present: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "serialNumber": self.serial_number,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "designation": self.designation,
            "monthlySalary": self.monthly_salary,
            "totalDays": self.total_days,
            "leaves": self.leaves,
            "workingDays": self.working_days,
            "perDaySalary": round(self.per_day_salary, 2),
            "totalSalary": round(self.total_salary, 2),
            "currentMonthAdvance": round(self.current_month_advance, 2),
            "previousAdvance": round(self.previous_advance, 2),
            "pendingSalary": round(self.pending_salary, 2),
            "workingHours": round(self.working_hours, 2),
            "requiredHours": self.required_hours,
            "isPresent": self.is_present,
        }


@dataclass(frozen=True)
class SalaryReport:
    year: int
    month: int
    working_days: int
    lines: Sequence[SalaryLine]

    @property
    def month_key(self) -> str:
        return f"{self.year}-{self.month:02d}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month_key,
            "year": self.year,
            "workingDays": self.working_days,
            "report": [line.to_dict() for line in self.lines],
        }


class SalaryReportService:
    def __init__(
        self,
        workers: WorkerRepository,
        attendance: AttendanceRepository,
        settings: SettingsRepository,
        advances: AdvanceRepository,
    ):
        self._workers = workers
        self._attendance = attendance
        self._settings = settings
        self._advances = advances

    def generate(self, year: Any, month: Any) -> SalaryReport:
        year_num, month_num = require_month(year, month)

        settings = self._settings.get()
        if settings is None:
            raise NotFoundError("Settings not found")
        workers = list(self._workers.list_all())
        if not workers:
            raise NotFoundError("No workers found")

        working_days = settings.working_days_for_month(year_num, month_num)
        first = date(year_num, month_num, 1)
        last = date(year_num, month_num, calendar.monthrange(year_num, month_num)[1])

        lines: list[SalaryLine] = []
        for worker in workers:
            worker_id = worker.worker_id or ""
            hours = worked_hours(self._attendance.list_for_worker(worker_id, start_date=first, end_date=last))
            required = settings.attendance_timer.hours_for(worker_id)
            is_present = hours >= required
            paid_days = working_days if is_present else 0

            per_day = worker.salary / working_days if worker.salary > 0 and working_days > 0 else 0.0
            total_salary = per_day * paid_days
            advances = list(self._advances.list_for_worker(worker_id))
            current = current_month_advance(advances, year_num, month_num)
            previous = previous_advance_balance(advances, year_num, month_num)

            lines.append(
                SalaryLine(
                    serial_number=len(lines) + 1,
                    employee_id=worker_id,
                    employee_name=worker.name,
                    designation=worker.department or "N/A",
                    monthly_salary=worker.salary,
                    total_days=working_days,
                    leaves=0 if is_present else working_days,
                    working_days=paid_days,
                    per_day_salary=per_day,
                    total_salary=total_salary,
                    current_month_advance=current,
                    previous_advance=previous,
                    pending_salary=total_salary - current - previous,
                    working_hours=hours,
                    required_hours=required,
                    is_present=is_present,
                )
            )

        logger.info("Salary report %d-%02d built for %d workers", year_num, month_num, len(lines))
        return SalaryReport(year=year_num, month=month_num, working_days=working_days, lines=lines)
