from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from ..attendance.model import AttendancePunch
from ..common.validators import require_date_order, require_iso_date
from ..core.exceptions import ValidationError
from ..schedules.model import ProductivityOptions
from .model import AdvanceDeduction, ProductivityResult
from .productivity import calculate_worker_productivity


@dataclass(frozen=True)
class ProductivityRequest:
    """The calculation input as posted by the dashboard (camelCase JSON)."""

    attendance: tuple[AttendancePunch, ...]
    from_date: date
    to_date: date
    options: ProductivityOptions
    advance_deductions: tuple[AdvanceDeduction, ...] = ()

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ProductivityRequest":
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")

        from_date = require_iso_date(payload.get("fromDate"), "fromDate")
        to_date = require_iso_date(payload.get("toDate"), "toDate")
        require_date_order(from_date, to_date)

        records = payload.get("attendanceData") or []
        if not isinstance(records, list):
            raise ValidationError("attendanceData must be a list")

        advances = tuple(
            a
            for a in (AdvanceDeduction.from_mapping(item) for item in payload.get("advanceDeductions") or [])
            if a is not None
        )
        return cls(
            attendance=tuple(AttendancePunch.from_mapping(r) for r in records if isinstance(r, Mapping)),
            from_date=from_date,
            to_date=to_date,
            options=ProductivityOptions.from_mapping(payload.get("options")),
            advance_deductions=advances,
        )

    def run(self) -> ProductivityResult:
        return calculate_worker_productivity(
            attendance=self.attendance,
            from_date=self.from_date,
            to_date=self.to_date,
            options=self.options,
            advance_deductions=self.advance_deductions,
        )
