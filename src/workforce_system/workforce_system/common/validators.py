from __future__ import annotations

from datetime import date
from typing import Any

from ..core.constants import MAX_REPORT_YEAR, MIN_REPORT_YEAR
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_iso_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required (YYYY-MM-DD)")
    try:
        return parse_iso_date(value.strip()[:10])
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date: {value!r}") from None


def require_date_order(from_date: date, to_date: date) -> None:
    if from_date > to_date:
        raise ValidationError("From date cannot be greater than To date")


def require_month(year: Any, month: Any) -> tuple[int, int]:
    try:
        year_num = int(year)
        month_num = int(month)
    except (TypeError, ValueError):
        raise ValidationError("Year and month are required") from None
    if not 1 <= month_num <= 12:
        raise ValidationError("Invalid month. Must be between 1 and 12")
    if not MIN_REPORT_YEAR <= year_num <= MAX_REPORT_YEAR:
        raise ValidationError("Invalid year")
    return year_num, month_num


def require_positive_amount(value: Any, field_name: str = "amount") -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if amount <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return amount
