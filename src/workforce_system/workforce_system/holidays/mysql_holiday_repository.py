from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.constants import DEFAULT_HOLIDAY_NAME
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, holiday_desc, reason
                FROM holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date
                """,
                (start_date, end_date),
            )
            return [
                Holiday(date=r["holiday_date"], name=r.get("holiday_desc") or DEFAULT_HOLIDAY_NAME, reason=r.get("reason"))
                for r in fetchall(cur)
            ]
