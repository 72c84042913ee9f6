from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ...attendance.model import Punch
from ...core.enums import DayKind
from ..calculator.base import PayrollCalculator
from ..model import DailyRecord, ReportRow


@dataclass(frozen=True)
class DayContext:
    """Rates and rules shared by every day of one run."""

    calculator: PayrollCalculator
    per_day_salary: float
    per_minute_salary: float

    def charge(self, minutes: float) -> float:
        """Salary taken for ``minutes`` of lateness/delay; grace minutes are charged too."""
        used, excess = self.calculator.permission_split(minutes)
        return used * self.per_minute_salary + excess * self.per_minute_salary


@dataclass(frozen=True)
class DayOutcome:
    kind: DayKind
    record: DailyRecord
    rows: tuple[ReportRow, ...]
    working_minutes: float = 0.0
    permission_minutes: float = 0.0
    violations: int = 0


class DayStrategy(ABC):
    """Strategy Pattern: how one calendar day of the period is settled."""

    @abstractmethod
    def evaluate(self, day: date, punches: Sequence[Punch], ctx: DayContext) -> DayOutcome:
        raise NotImplementedError
