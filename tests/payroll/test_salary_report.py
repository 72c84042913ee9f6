from datetime import date

import pytest

from conftest import InMemoryAdvances, InMemoryAttendance, InMemorySettings, InMemoryWorkers
from src.workforce_system.workforce_system.advances.model import Advance, DeductionEntry
from src.workforce_system.workforce_system.core.exceptions import NotFoundError, ValidationError
from src.workforce_system.workforce_system.payroll.salary_report import SalaryReportService, worked_hours
from src.workforce_system.workforce_system.schedules.model import AttendanceTimer, CompanySettings, ProductivityOptions
from src.workforce_system.workforce_system.workers.model import WorkerInfo


def _settings(working_days=26, timer=None):
    return CompanySettings(
        options=ProductivityOptions(monthly_working_days={"2024-03": working_days}),
        attendance_timer=timer or AttendanceTimer(global_time=8),
    )


def test_worked_hours_pairs_in_and_out(punch):
    punches = [
        punch(date(2024, 3, 4), "9:00 AM", "IN"),
        punch(date(2024, 3, 4), "1:00 PM", "OUT"),
        punch(date(2024, 3, 4), "2:00 PM", "OUT"),
        punch(date(2024, 3, 5), "10:00 PM", "IN"),
        punch(date(2024, 3, 6), "2:00 AM", "OUT"),
        punch(date(2024, 3, 7), "9:00 AM"),
    ]
    assert worked_hours(punches) == pytest.approx(8)


def test_salary_report_lines(punch, worker):
    idle = WorkerInfo(name="Idle", department="", salary=26000, worker_id="w2")
    attendance = InMemoryAttendance(
        [punch(date(2024, 3, 4), "9:00 AM", "IN"), punch(date(2024, 3, 4), "6:00 PM", "OUT")]
    )
    advances = InMemoryAdvances(
        [
            Advance(
                advance_id="a1",
                worker_id="w1",
                amount=3000,
                created_on=date(2024, 3, 1),
                deductions=(DeductionEntry(amount=1000, date=date(2024, 3, 10)),),
            )
        ]
    )
    service = SalaryReportService(InMemoryWorkers([worker, idle]), attendance, InMemorySettings(_settings()), advances)

    report = service.generate("2024", "3")
    present, absent = report.lines

    assert report.month_key == "2024-03"
    assert present.is_present and present.working_days == 26 and present.leaves == 0
    assert present.per_day_salary == pytest.approx(30000 / 26)
    assert present.total_salary == pytest.approx(30000)
    assert (present.current_month_advance, present.previous_advance) == (1000, 3000)
    assert present.pending_salary == pytest.approx(26000)
    assert present.to_dict()["perDaySalary"] == 1153.85

    assert not absent.is_present
    assert (absent.working_days, absent.leaves, absent.total_salary) == (0, 26, 0)
    assert absent.designation == "N/A"
    assert absent.serial_number == 2


def test_per_worker_required_hours(punch, worker):
    timer = AttendanceTimer(global_time=8, apply_to_all_workers=False, specific_workers={"w1": 10})
    attendance = InMemoryAttendance(
        [punch(date(2024, 3, 4), "9:00 AM", "IN"), punch(date(2024, 3, 4), "6:00 PM", "OUT")]
    )
    service = SalaryReportService(
        InMemoryWorkers([worker]), attendance, InMemorySettings(_settings(timer=timer)), InMemoryAdvances()
    )
    line = service.generate(2024, 3).lines[0]
    assert line.required_hours == 10
    assert not line.is_present


def test_missing_working_days_pays_nothing(worker):
    service = SalaryReportService(
        InMemoryWorkers([worker]), InMemoryAttendance(), InMemorySettings(CompanySettings()), InMemoryAdvances()
    )
    report = service.generate(2024, 3)
    assert report.working_days == 0
    assert report.lines[0].per_day_salary == 0


@pytest.mark.parametrize("year, month", [(2024, 13), (2019, 5), ("x", 1)])
def test_invalid_period(worker, year, month):
    service = SalaryReportService(
        InMemoryWorkers([worker]), InMemoryAttendance(), InMemorySettings(_settings()), InMemoryAdvances()
    )
    with pytest.raises(ValidationError):
        service.generate(year, month)


def test_missing_settings_or_workers(worker):
    no_settings = SalaryReportService(InMemoryWorkers([worker]), InMemoryAttendance(), InMemorySettings(), InMemoryAdvances())
    with pytest.raises(NotFoundError):
        no_settings.generate(2024, 3)

    no_workers = SalaryReportService(InMemoryWorkers(), InMemoryAttendance(), InMemorySettings(_settings()), InMemoryAdvances())
    with pytest.raises(NotFoundError):
        no_workers.generate(2024, 3)
