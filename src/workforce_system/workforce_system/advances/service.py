from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional

from ..core.exceptions import NotFoundError
from ..payroll.model import AdvanceDeduction
from .model import Advance
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


def current_month_advance(advances: Iterable[Advance], year: int, month: int) -> float:
    """Deductions made this month from advances that were also issued this month."""
    return sum(
        a.deducted_in_month(year, month)
        for a in advances
        if (a.created_on.year, a.created_on.month) == (year, month)
    )


def previous_advance_balance(advances: Iterable[Advance], year: int, month: int) -> float:
    """What was still owed on every advance before this month's deductions."""
    return sum(max(0.0, a.amount - a.deducted_before_month(year, month)) for a in advances)


class AdvanceService:
    def __init__(self, advances: AdvanceRepository):
        self._advances = advances

    def deduct(self, advance_id: str, *, amount: Any, on: date, description: Optional[str] = None) -> Advance:
        advance = self._advances.get_by_id(advance_id)
        if advance is None:
            raise NotFoundError("Advance not found")

        updated = advance.deduct(amount, on=on, description=description)
        entry = updated.deductions[-1]
        # The row read above may be stale; the store checks the balance again.
        self._advances.add_deduction(advance_id, entry)
        logger.info(
            "Deducted %.2f from advance %s (remaining %.2f)",
            entry.amount,
            advance_id,
            updated.remaining_amount,
        )
        return updated

    def deductions_for_period(self, worker_id: str, *, start: date, end: date) -> tuple[AdvanceDeduction, ...]:
        found: list[AdvanceDeduction] = []
        for advance in self._advances.list_for_worker(worker_id):
            found.extend(advance.deductions_between(start, end))
        return tuple(sorted(found, key=lambda d: d.date))
