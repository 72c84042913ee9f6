from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class PunchDirection(str, Enum):
    """Direction of a single attendance scan."""

    IN = "IN"
    OUT = "OUT"

    @classmethod
    def parse(cls, value: Any) -> Optional["PunchDirection"]:
        """Map a raw label (``"IN"``, ``"out"``, ``True``/``False``) to a direction.

        Returns ``None`` for anything unrecognised so the caller can fall back
        to positional alternation.
        """
        if isinstance(value, bool):
            return cls.IN if value else cls.OUT
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            label = value.strip().upper()
            if label in (cls.IN.value, cls.OUT.value):
                return cls(label)
        return None


class DayKind(str, Enum):
    """How a calendar day in the period was classified."""

    PRESENT = "PRESENT"
    SUNDAY = "SUNDAY"
    HOLIDAY = "HOLIDAY"
    ABSENT = "ABSENT"


class ReportStatus(str, Enum):
    DELAY = "Delay"
    PRESENT = "Present"
    ABSENT = "Absent"
    SUNDAY = "Sunday"
    HOLIDAY = "Holiday"
    DEDUCTION = "Deduction"


class DelayType(str, Enum):
    LATE_ARRIVAL = "Late Arrival"
    EARLY_DEPARTURE = "Early Departure"
    LUNCH_DELAY = "Lunch Delay"
    BREAK_DELAY = "Break Delay"
    NO_DELAYS = "No Delays"
    ADVANCE_DEDUCTION = "Advance Deduction"
