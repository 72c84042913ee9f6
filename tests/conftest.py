from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.workforce_system.workforce_system.advances.model import INSUFFICIENT_ADVANCE_MESSAGE, Advance, DeductionEntry
from src.workforce_system.workforce_system.attendance.model import AttendancePunch
from src.workforce_system.workforce_system.core.enums import PunchDirection
from src.workforce_system.workforce_system.core.exceptions import ValidationError
from src.workforce_system.workforce_system.holidays.model import Holiday
from src.workforce_system.workforce_system.schedules.model import Batch, CompanySettings, ProductivityOptions
from src.workforce_system.workforce_system.workers.model import WorkerInfo


class InMemoryAttendance:
    def __init__(self, punches=()):
        self.punches = list(punches)

    def list_for_worker(self, worker_id: str, *, start_date: date, end_date: date):
        return [
            p
            for p in self.punches
            if p.worker.worker_id == worker_id and p.date is not None and start_date <= p.date <= end_date
        ]


class InMemoryWorkers:
    def __init__(self, workers=()):
        self.workers = {w.worker_id: w for w in workers}

    def list_all(self):
        return list(self.workers.values())

    def get_by_id(self, worker_id: str) -> Optional[WorkerInfo]:
        return self.workers.get(worker_id)


class InMemorySettings:
    def __init__(self, settings: Optional[CompanySettings] = None):
        self.settings = settings

    def get(self) -> Optional[CompanySettings]:
        return self.settings


class InMemoryHolidays:
    def __init__(self, holidays=()):
        self.holidays = list(holidays)

    def list_between(self, *, start_date: date, end_date: date):
        return [h for h in self.holidays if start_date <= h.date <= end_date]


class InMemoryAdvances:
    def __init__(self, advances=()):
        self.advances = {a.advance_id: a for a in advances}
        self.saved: list[tuple[str, DeductionEntry]] = []

    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        return self.advances.get(advance_id)

    def list_for_worker(self, worker_id: str):
        return [a for a in self.advances.values() if a.worker_id == worker_id]

    def add_deduction(self, advance_id: str, entry: DeductionEntry) -> None:
        current = self.advances.get(advance_id)
        if current is None or current.remaining_amount < entry.amount:
            raise ValidationError(INSUFFICIENT_ADVANCE_MESSAGE)
        self.advances[advance_id] = replace(
            current,
            remaining_amount=current.remaining_amount - entry.amount,
            deductions=current.deductions + (entry,),
        )
        self.saved.append((advance_id, entry))


@pytest.fixture
def worker() -> WorkerInfo:
    return WorkerInfo(
        name="Ravi Kumar",
        username="ravi",
        rfid="RF-001",
        department="Assembly",
        email="ravi@example.com",
        salary=30000,
        worker_id="w1",
    )


@pytest.fixture
def punch(worker):
    def make(day: date, time: str, direction=None, who: Optional[WorkerInfo] = None) -> AttendancePunch:
        return AttendancePunch(
            date=day,
            time=time,
            direction=PunchDirection.parse(direction),
            worker=who or worker,
        )

    return make


@pytest.fixture
def full_time_options() -> ProductivityOptions:
    return ProductivityOptions(
        batches=(Batch("Full Time", "09:00", "19:00", "12:00", "13:00", False),),
        filtered_batch="Full Time",
        permission_time_minutes=15,
    )


@pytest.fixture
def holi() -> Holiday:
    return Holiday(date=date(2024, 3, 25), name="Holi")
