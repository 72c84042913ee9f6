from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import WorkerInfo
from .repository import WorkerRepository

_SELECT = """
    SELECT w.worker_id, w.name, w.username, w.rfid, w.email, w.salary, d.dept_name
    FROM workers w
    LEFT JOIN departments d ON d.dept_id = w.dept_id
"""


def _to_worker(r: Dict[str, Any]) -> WorkerInfo:
    return WorkerInfo(
        name=r.get("name") or "",
        username=r.get("username") or "",
        rfid=r.get("rfid") or "",
        department=r.get("dept_name") or "",
        email=r.get("email") or "",
        salary=float(r.get("salary") or 0),
        worker_id=str(r["worker_id"]),
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[WorkerInfo]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY w.worker_id")
            return [_to_worker(r) for r in fetchall(cur)]

    def get_by_id(self, worker_id: str) -> Optional[WorkerInfo]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE w.worker_id=%s", (worker_id,))
            r = fetchone(cur)
            return _to_worker(r) if r else None
