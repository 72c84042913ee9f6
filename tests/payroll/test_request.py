from datetime import date

import pytest

from src.workforce_system.workforce_system.core.enums import PunchDirection
from src.workforce_system.workforce_system.core.exceptions import ValidationError
from src.workforce_system.workforce_system.payroll.request import ProductivityRequest


def _payload(**overrides):
    body = {
        "fromDate": "2024-03-04",
        "toDate": "2024-03-05",
        "attendanceData": [
            {"date": "2024-03-04T00:00:00.000Z", "time": "9:00 AM", "presence": True, "worker": {"name": "Asha", "salary": 26000}},
            {"date": "2024-03-04T00:00:00.000Z", "time": "7:00 PM", "presence": False, "worker": {"name": "Asha", "salary": 26000}},
        ],
        "advanceDeductions": [{"date": "2024-03-05", "amount": 1000, "description": "Advance"}],
        "options": {
            "permissionTimeMinutes": 10,
            "fiteredBatch": "Morning",
            "batches": [{"batchName": "Morning", "from": "08:00", "to": "17:00", "lunchFrom": "12:30", "lunchTo": "13:00"}],
            "holidays": [{"date": "2024-03-25", "name": "Holi"}],
            "monthlyWorkingDays": [{"month": "2024-03", "workingDays": 26}],
        },
    }
    body.update(overrides)
    return body


def test_request_is_read_from_dashboard_payload():
    req = ProductivityRequest.from_mapping(_payload())

    assert req.from_date == date(2024, 3, 4)
    assert [p.direction for p in req.attendance] == [PunchDirection.IN, PunchDirection.OUT]
    assert req.options.permission_time_minutes == 10
    assert req.options.filtered_batch == "Morning"
    assert req.options.working_days_for_month(2024, 3) == 26
    assert req.advance_deductions[0].amount == 1000


def test_request_runs_the_engine():
    result = ProductivityRequest.from_mapping(_payload()).run()

    assert result.configuration.work_start_time == "08:00"
    assert result.configuration.standard_working_minutes_per_day == 510
    assert result.summary.per_day_salary == 1000
    assert result.summary.worker.name == "Asha"
    assert result.total_advance_deduction == 1000


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"fromDate": "04/03/2024"}, "fromDate"),
        ({"toDate": None}, "toDate"),
        ({"fromDate": "2024-03-06"}, "From date cannot be greater than To date"),
        ({"attendanceData": "nope"}, "attendanceData"),
    ],
)
def test_invalid_requests_are_rejected(overrides, message):
    with pytest.raises(ValidationError, match=message):
        ProductivityRequest.from_mapping(_payload(**overrides))
