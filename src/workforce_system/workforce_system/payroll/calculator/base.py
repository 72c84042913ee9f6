from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import Punch
from ...schedules.model import ActiveSchedule
from ..model import GapDelay, PermissionTimeResult, WorkingTimeResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Implementations turn one day's sorted, direction-resolved punches into
    working time, permission time and gap delays.
    """

    schedule: ActiveSchedule
    permission_time_minutes: float

    @abstractmethod
    def calculate_working_time_detailed(self, punches: Sequence[Punch]) -> WorkingTimeResult:
        raise NotImplementedError

    @abstractmethod
    def calculate_permission_time_detailed(self, punches: Sequence[Punch]) -> PermissionTimeResult:
        raise NotImplementedError

    @abstractmethod
    def gap_delays(self, punches: Sequence[Punch]) -> Sequence[GapDelay]:
        raise NotImplementedError

    def permission_split(self, minutes: float) -> tuple[float, float]:
        """``(permission used, excess)`` for a lateness of ``minutes``."""
        used = min(minutes, self.permission_time_minutes)
        excess = max(0.0, minutes - self.permission_time_minutes)
        return used, excess

    def is_violation(self, minutes: float) -> bool:
        return minutes > self.permission_time_minutes
