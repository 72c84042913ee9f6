from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendancePunch


class AttendanceRepository(Protocol):
    def list_for_worker(self, worker_id: str, *, start_date: date, end_date: date) -> Sequence[AttendancePunch]:
        """Punches of one worker with ``start_date <= date <= end_date``."""

        raise NotImplementedError
