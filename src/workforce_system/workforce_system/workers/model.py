from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _as_salary(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class WorkerInfo:
    """Worker identity echoed into reports; every field degrades to an empty default."""

    name: str = ""
    username: str = ""
    rfid: str = ""
    department: str = ""
    email: str = ""
    salary: float = 0.0
    worker_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "WorkerInfo":
        if not raw:
            return cls()
        department = raw.get("department") or ""
        if isinstance(department, Mapping):
            department = department.get("name") or ""
        worker_id = raw.get("id", raw.get("_id"))
        return cls(
            name=str(raw.get("name") or ""),
            username=str(raw.get("username") or ""),
            rfid=str(raw.get("rfid") or ""),
            department=str(department),
            email=str(raw.get("email") or ""),
            salary=_as_salary(raw.get("salary")),
            worker_id=str(worker_id) if worker_id is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "username": self.username,
            "rfid": self.rfid,
            "department": self.department,
            "email": self.email,
            "salary": self.salary,
        }
