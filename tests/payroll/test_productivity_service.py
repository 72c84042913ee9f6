from datetime import date

import pytest

from conftest import InMemoryAdvances, InMemoryAttendance, InMemoryHolidays, InMemorySettings, InMemoryWorkers
from src.workforce_system.workforce_system.advances.model import Advance, DeductionEntry
from src.workforce_system.workforce_system.advances.service import AdvanceService
from src.workforce_system.workforce_system.core.enums import ReportStatus
from src.workforce_system.workforce_system.core.exceptions import NotFoundError, ValidationError
from src.workforce_system.workforce_system.payroll.service import ProductivityReportService
from src.workforce_system.workforce_system.schedules.model import Batch, CompanySettings, ProductivityOptions


def _service(worker, punches=(), settings=None, holidays=(), advances=(), default_options=None):
    return ProductivityReportService(
        InMemoryAttendance(punches),
        InMemoryWorkers([worker]),
        InMemorySettings(settings),
        InMemoryHolidays(holidays),
        AdvanceService(InMemoryAdvances(advances)),
        default_options=default_options,
    )


def test_report_uses_stored_settings_holidays_and_advances(punch, worker, full_time_options, holi):
    tuesday = date(2024, 3, 26)
    settings = CompanySettings(
        options=ProductivityOptions(
            batches=full_time_options.batches
            + (Batch("Half Day", "09:00", "13:00", "12:00", "13:00", True),),
            filtered_batch="Full Time",
        )
    )
    advance = Advance(
        advance_id="a1",
        worker_id="w1",
        amount=2000,
        created_on=date(2024, 3, 1),
        deductions=(DeductionEntry(amount=400, date=tuesday),),
    )
    service = _service(
        worker,
        punches=[punch(tuesday, "9:00 AM", "IN"), punch(tuesday, "1:00 PM", "OUT")],
        settings=settings,
        holidays=[holi],
        advances=[advance],
    )

    result = service.worker_productivity("w1", start=holi.date, end=tuesday, batch_name="Half Day")

    assert result.configuration.work_end_time == "13:00"
    assert result.configuration.standard_working_minutes_per_day == 240
    assert [r.status for r in result.report] == [ReportStatus.HOLIDAY, ReportStatus.PRESENT, ReportStatus.DEDUCTION]
    assert result.total_advance_deduction == 400


def test_defaults_apply_without_saved_settings(punch, worker):
    service = _service(
        worker,
        punches=[punch(date(2024, 3, 5), "9:20 AM", "IN")],
        default_options=ProductivityOptions(permission_time_minutes=30),
    )
    result = service.worker_productivity("w1", start=date(2024, 3, 5), end=date(2024, 3, 5))

    assert result.configuration.permission_time_minutes == 30
    assert result.summary.punctuality_score == 100


def test_unknown_worker(worker):
    with pytest.raises(NotFoundError):
        _service(worker).worker_productivity("nobody", start=date(2024, 3, 4), end=date(2024, 3, 5))


def test_reversed_range_is_rejected_at_the_service(worker):
    with pytest.raises(ValidationError):
        _service(worker).worker_productivity("w1", start=date(2024, 3, 5), end=date(2024, 3, 4))
