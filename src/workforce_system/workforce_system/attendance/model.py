from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..core.enums import PunchDirection
from ..workers.model import WorkerInfo

# Field names that may carry the IN/OUT label, in lookup order.
DIRECTION_ALIASES = ("status", "presence", "type", "Presence", "STATUS")


@dataclass(frozen=True)
class AttendancePunch:
    """Domain entity: one raw scan event as stored by the attendance store."""

    date: Optional[date]
    time: str
    direction: Optional[PunchDirection] = None
    worker: WorkerInfo = field(default_factory=WorkerInfo)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "AttendancePunch":
        direction = None
        for alias in DIRECTION_ALIASES:
            if alias in raw and raw[alias] is not None:
                direction = PunchDirection.parse(raw[alias])
                if direction is not None:
                    break
        worker = raw.get("worker")
        return cls(
            date=coerce_date(raw.get("date")),
            time=str(raw.get("time") or ""),
            direction=direction,
            worker=worker if isinstance(worker, WorkerInfo) else WorkerInfo.from_mapping(worker),
        )


@dataclass(frozen=True)
class Punch:
    """A punch after ingestion: minutes since midnight and the label it was scanned with, if any."""

    minutes: float
    original_time: str
    direction: Optional[PunchDirection] = None


def pair_directions(punches: Sequence[Punch], i: int) -> tuple[PunchDirection, PunchDirection]:
    """Directions of the consecutive pair ``punches[i]``, ``punches[i + 1]``.

    When either side is unlabelled, both take their position in the sorted
    day instead: even index IN, odd index OUT.
    """
    current, nxt = punches[i].direction, punches[i + 1].direction
    if current is None or nxt is None:
        current = PunchDirection.IN if i % 2 == 0 else PunchDirection.OUT
        nxt = PunchDirection.IN if (i + 1) % 2 == 0 else PunchDirection.OUT
    return current, nxt
