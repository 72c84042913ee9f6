from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..core.constants import DEFAULT_ADVANCE_DESCRIPTION, DEFAULT_DEDUCTION_DESCRIPTION
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import INSUFFICIENT_ADVANCE_MESSAGE, Advance, DeductionEntry
from .repository import AdvanceRepository

_SELECT_ADVANCES = """
    SELECT advance_id, worker_id, amount, description, remaining_amount, created_at
    FROM advances
"""


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load(self, cur, rows: List[Dict[str, Any]]) -> List[Advance]:
        if not rows:
            return []
        ids = [r["advance_id"] for r in rows]
        placeholders = ",".join(["%s"] * len(ids))
        cur.execute(
            f"""
            SELECT advance_id, amount, deducted_on, description
            FROM advance_deductions
            WHERE advance_id IN ({placeholders})
            ORDER BY deducted_on, deduction_id
            """,
            tuple(ids),
        )
        entries: dict[Any, list[DeductionEntry]] = defaultdict(list)
        for d in fetchall(cur):
            entries[d["advance_id"]].append(
                DeductionEntry(
                    amount=float(d["amount"]),
                    date=d["deducted_on"],
                    description=d.get("description") or DEFAULT_DEDUCTION_DESCRIPTION,
                )
            )
        return [_to_advance(r, entries[r["advance_id"]]) for r in rows]

    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_ADVANCES + " WHERE advance_id=%s", (advance_id,))
            found = self._load(cur, fetchall(cur))
            return found[0] if found else None

    def list_for_worker(self, worker_id: str) -> Sequence[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_ADVANCES + " WHERE worker_id=%s ORDER BY created_at", (worker_id,))
            return self._load(cur, fetchall(cur))

    def add_deduction(self, advance_id: str, entry: DeductionEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE advances
                SET remaining_amount = remaining_amount - %s
                WHERE advance_id=%s AND remaining_amount >= %s
                """,
                (entry.amount, advance_id, entry.amount),
            )
            if cur.rowcount == 0:
                raise ValidationError(INSUFFICIENT_ADVANCE_MESSAGE)
            cur.execute(
                "INSERT INTO advance_deductions(advance_id, amount, deducted_on, description) VALUES(%s,%s,%s,%s)",
                (advance_id, entry.amount, entry.date, entry.description),
            )


def _to_advance(r: Dict[str, Any], entries: Iterable[DeductionEntry]) -> Advance:
    created = r["created_at"]
    return Advance(
        advance_id=str(r["advance_id"]),
        worker_id=str(r["worker_id"]),
        amount=float(r["amount"]),
        created_on=created.date() if hasattr(created, "date") else created,
        description=r.get("description") or DEFAULT_ADVANCE_DESCRIPTION,
        remaining_amount=None if r.get("remaining_amount") is None else float(r["remaining_amount"]),
        deductions=tuple(entries),
    )
