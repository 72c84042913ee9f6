from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Sequence

from ..common.datetime_utils import is_attendance_time, parse_attendance_time
from .model import AttendancePunch, Punch

logger = logging.getLogger(__name__)


def group_by_day(
    punches: Iterable[AttendancePunch],
    *,
    from_date: date,
    to_date: date,
    warnings: list[str],
) -> dict[date, list[AttendancePunch]]:
    """Keep punches inside ``[from_date, to_date]`` and bucket them per day."""
    grouped: dict[date, list[AttendancePunch]] = defaultdict(list)
    for p in punches:
        if p.date is None:
            msg = f"Skipped punch with unreadable date (time={p.time!r})"
            logger.warning(msg)
            warnings.append(msg)
            continue
        if from_date <= p.date <= to_date:
            grouped[p.date].append(p)
    return dict(grouped)


def normalize_day(records: Sequence[AttendancePunch], *, warnings: list[str]) -> list[Punch]:
    """Sort a day's punches by time and convert each to minutes since midnight.

    Labels are carried through unchanged. Unlabelled punches are paired by
    position later, see ``pair_directions``.
    """
    for r in records:
        if not is_attendance_time(r.time):
            msg = f"Unparseable punch time {r.time!r} on {r.date}; read as {parse_attendance_time(r.time):.2f} minutes"
            logger.warning(msg)
            warnings.append(msg)

    ordered = sorted(records, key=lambda r: parse_attendance_time(r.time))
    return [Punch(minutes=parse_attendance_time(r.time), original_time=r.time, direction=r.direction) for r in ordered]
