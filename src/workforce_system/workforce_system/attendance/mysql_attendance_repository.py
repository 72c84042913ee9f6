from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import PunchDirection
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..workers.model import WorkerInfo
from .model import AttendancePunch
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_worker(self, worker_id: str, *, start_date: date, end_date: date) -> Sequence[AttendancePunch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT p.punch_date, p.punch_time, p.presence,
                       w.worker_id, w.name, w.username, w.rfid, w.email, w.salary, d.dept_name
                FROM attendance_punches p
                JOIN workers w ON w.worker_id = p.worker_id
                LEFT JOIN departments d ON d.dept_id = w.dept_id
                WHERE p.worker_id=%s AND p.punch_date BETWEEN %s AND %s
                ORDER BY p.punch_date, p.punch_id
                """,
                (worker_id, start_date, end_date),
            )
            rows = fetchall(cur)

        return [
            AttendancePunch(
                date=r["punch_date"],
                time=str(r["punch_time"] or ""),
                direction=None if r.get("presence") is None else PunchDirection.parse(bool(r["presence"])),
                worker=WorkerInfo(
                    name=r.get("name") or "",
                    username=r.get("username") or "",
                    rfid=r.get("rfid") or "",
                    department=r.get("dept_name") or "",
                    email=r.get("email") or "",
                    salary=float(r.get("salary") or 0),
                    worker_id=str(r["worker_id"]),
                ),
            )
            for r in rows
        ]
