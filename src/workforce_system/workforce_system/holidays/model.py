from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..core.constants import DEFAULT_HOLIDAY_NAME


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str = DEFAULT_HOLIDAY_NAME
    reason: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Optional["Holiday"]:
        """Build from ``{date, name}`` or the stored ``{date, holidayDesc, reason}`` shape.

        Returns ``None`` when the date cannot be read.
        """
        day = coerce_date(raw.get("date"))
        if day is None:
            return None
        name = raw.get("name") or raw.get("holidayDesc") or DEFAULT_HOLIDAY_NAME
        return cls(date=day, name=str(name), reason=raw.get("reason"))
