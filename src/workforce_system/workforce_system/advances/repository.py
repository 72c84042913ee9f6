from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Advance, DeductionEntry


class AdvanceRepository(Protocol):
    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        raise NotImplementedError

    def list_for_worker(self, worker_id: str) -> Sequence[Advance]:
        raise NotImplementedError

    def add_deduction(self, advance_id: str, entry: DeductionEntry) -> None:
        """Record ``entry`` and lower the stored balance by its amount.

        Raises ``ValidationError`` when the balance no longer covers the amount.
        """
        raise NotImplementedError
