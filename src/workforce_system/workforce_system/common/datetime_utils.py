from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any, Optional

_PERIOD_RE = re.compile(r"^(?P<clock>.*?)\s*(?P<period>[AaPp][Mm])?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion of a record's date field to a calendar day.

    Accepts ``date``/``datetime`` objects and ISO strings, including full
    timestamps such as ``2024-03-05T00:00:00.000Z`` (the time part is dropped).
    Returns ``None`` when nothing usable is found.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and len(value.strip()) >= 10:
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            return None
    return None


def _number(part: str) -> float:
    try:
        n = float(part)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(n) or math.isinf(n) else n


def time_to_minutes(value: Optional[str]) -> float:
    """``"HH:MM[:SS]"`` (24h) -> minutes since midnight, seconds as a fraction.

    Missing or malformed components count as 0; never raises.
    """
    if not value:
        return 0.0
    parts = [_number(p) for p in str(value).strip().split(":")]
    hours = parts[0] if len(parts) > 0 else 0.0
    minutes = parts[1] if len(parts) > 1 else 0.0
    seconds = parts[2] if len(parts) > 2 else 0.0
    return hours * 60 + minutes + seconds / 60


def parse_attendance_time(value: Optional[str]) -> float:
    """``"H:MM[:SS] AM/PM"`` -> minutes since midnight.

    12 AM maps to hour 0 and 12 PM stays 12. Without a period marker the clock
    is read as 24h. Never raises.
    """
    if not value:
        return 0.0
    m = _PERIOD_RE.match(str(value).strip())
    clock = m.group("clock") if m else ""
    period = (m.group("period") or "").upper() if m else ""

    parts = [_number(p) for p in clock.split(":")]
    hours = parts[0] if len(parts) > 0 else 0.0
    minutes = parts[1] if len(parts) > 1 else 0.0
    seconds = parts[2] if len(parts) > 2 else 0.0

    total_seconds = seconds + minutes * 60 + hours * 3600
    if period == "AM" and hours == 12:
        total_seconds -= 12 * 3600
    elif period == "PM" and hours != 12:
        total_seconds += 12 * 3600
    return total_seconds / 60


def is_attendance_time(value: Any) -> bool:
    """True when ``value`` looks like a punch clock string the parser fully understands."""
    if not isinstance(value, str):
        return False
    return re.match(r"^\d{1,2}:\d{2}(:\d{2})?(\s*[AaPp][Mm])?$", value.strip()) is not None
