from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkerInfo


class WorkerRepository(Protocol):
    def list_all(self) -> Sequence[WorkerInfo]:
        raise NotImplementedError

    def get_by_id(self, worker_id: str) -> Optional[WorkerInfo]:
        raise NotImplementedError
