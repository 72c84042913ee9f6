from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..advances.service import AdvanceService
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_date_order
from ..core.exceptions import NotFoundError
from ..holidays.repository import HolidayRepository
from ..schedules.model import CompanySettings, ProductivityOptions
from ..schedules.repository import SettingsRepository
from ..workers.repository import WorkerRepository
from .model import ProductivityResult
from .productivity import calculate_worker_productivity

logger = logging.getLogger(__name__)


class ProductivityReportService:
    """Loads one worker's period from the stores and runs the engine on it."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        workers: WorkerRepository,
        settings: SettingsRepository,
        holidays: HolidayRepository,
        advances: AdvanceService,
        *,
        default_options: Optional[ProductivityOptions] = None,
    ):
        self._attendance = attendance
        self._workers = workers
        self._settings = settings
        self._holidays = holidays
        self._advances = advances
        self._default_options = default_options or ProductivityOptions()

    def worker_productivity(
        self,
        worker_id: str,
        *,
        start: date,
        end: date,
        batch_name: Optional[str] = None,
    ) -> ProductivityResult:
        require_date_order(start, end)
        if self._workers.get_by_id(worker_id) is None:
            raise NotFoundError("Worker not found")

        settings = self._settings.get()
        if settings is None:
            logger.warning("No settings saved; using default schedule for worker %s", worker_id)
            settings = CompanySettings(options=self._default_options)

        holidays = self._holidays.list_between(start_date=start, end_date=end)
        punches = self._attendance.list_for_worker(worker_id, start_date=start, end_date=end)
        return calculate_worker_productivity(
            attendance=punches,
            from_date=start,
            to_date=end,
            options=settings.options_for(batch_name=batch_name, holidays=holidays),
            advance_deductions=self._advances.deductions_for_period(worker_id, start=start, end=end),
        )
