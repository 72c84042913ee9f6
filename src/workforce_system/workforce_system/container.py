from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.repository import AdvanceRepository
from .advances.service import AdvanceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .payroll.salary_report import SalaryReportService
from .payroll.service import ProductivityReportService
from .schedules.model import ProductivityOptions
from .schedules.mysql_settings_repository import MySQLSettingsRepository
from .schedules.repository import SettingsRepository
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    workers_repo: WorkerRepository
    settings_repo: SettingsRepository
    holidays_repo: HolidayRepository
    advances_repo: AdvanceRepository

    advance_service: AdvanceService
    productivity_service: ProductivityReportService
    salary_report_service: SalaryReportService

    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    attendance: AttendanceRepository,
    workers: WorkerRepository,
    settings: SettingsRepository,
    holidays: HolidayRepository,
    advances: AdvanceRepository,
    default_options: Optional[ProductivityOptions] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    advance_service = AdvanceService(advances)
    productivity_service = ProductivityReportService(
        attendance,
        workers,
        settings,
        holidays,
        advance_service,
        default_options=default_options,
    )
    return Container(
        attendance_repo=attendance,
        workers_repo=workers,
        settings_repo=settings,
        holidays_repo=holidays,
        advances_repo=advances,
        advance_service=advance_service,
        productivity_service=productivity_service,
        salary_report_service=SalaryReportService(workers, attendance, settings, advances),
        conn=conn,
    )


def build_container(*, db_config: dict, default_options: Optional[ProductivityOptions] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return assemble(
        attendance=MySQLAttendanceRepository(conn),
        workers=MySQLWorkerRepository(conn),
        settings=MySQLSettingsRepository(conn),
        holidays=MySQLHolidayRepository(conn),
        advances=MySQLAdvanceRepository(conn),
        default_options=default_options,
        conn=conn,
    )
