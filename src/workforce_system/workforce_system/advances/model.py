from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Optional

from ..common.validators import require_positive_amount
from ..core.constants import CURRENCY_SYMBOL, DEFAULT_ADVANCE_DESCRIPTION, DEFAULT_DEDUCTION_DESCRIPTION
from ..core.exceptions import ValidationError
from ..payroll.model import AdvanceDeduction

INSUFFICIENT_ADVANCE_MESSAGE = "Insufficient remaining advance."


@dataclass(frozen=True)
class DeductionEntry:
    amount: float
    date: date
    description: str = DEFAULT_DEDUCTION_DESCRIPTION

    def in_month(self, year: int, month: int) -> bool:
        return (self.date.year, self.date.month) == (year, month)

    def before_month(self, year: int, month: int) -> bool:
        return (self.date.year, self.date.month) < (year, month)


@dataclass(frozen=True)
class Advance:
    """Money paid to a worker ahead of salary, recovered in partial deductions."""

    advance_id: str
    worker_id: str
    amount: float
    created_on: date
    description: str = DEFAULT_ADVANCE_DESCRIPTION
    remaining_amount: Optional[float] = None
    deductions: tuple[DeductionEntry, ...] = ()

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValidationError("Amount must be positive")
        if self.remaining_amount is None:
            object.__setattr__(self, "remaining_amount", self.amount)

    def deduct(self, amount: Any, *, on: date, description: Optional[str] = None) -> "Advance":
        """Return a copy with one more deduction recorded.

        Raises ``ValidationError`` when the amount is not positive or exceeds
        what is still outstanding.
        """
        value = require_positive_amount(amount, "Deduction amount")
        if value > self.remaining_amount:
            raise ValidationError(
                f"{INSUFFICIENT_ADVANCE_MESSAGE} Only {CURRENCY_SYMBOL}{self.remaining_amount:g} available."
            )
        entry = DeductionEntry(amount=value, date=on, description=description or DEFAULT_DEDUCTION_DESCRIPTION)
        return replace(
            self,
            remaining_amount=self.remaining_amount - value,
            deductions=self.deductions + (entry,),
        )

    def deducted_before_month(self, year: int, month: int) -> float:
        return sum(d.amount for d in self.deductions if d.before_month(year, month))

    def deducted_in_month(self, year: int, month: int) -> float:
        return sum(d.amount for d in self.deductions if d.in_month(year, month))

    def deductions_between(self, start: date, end: date) -> tuple[AdvanceDeduction, ...]:
        return tuple(
            AdvanceDeduction(date=d.date, amount=d.amount, description=d.description)
            for d in self.deductions
            if start <= d.date <= end
        )

    def to_dict(self) -> dict:
        return {
            "id": self.advance_id,
            "worker": self.worker_id,
            "amount": self.amount,
            "description": self.description,
            "remainingAmount": self.remaining_amount,
            "createdAt": self.created_on.isoformat(),
            "deductions": [
                {"amount": d.amount, "date": d.date.isoformat(), "description": d.description}
                for d in self.deductions
            ],
        }
