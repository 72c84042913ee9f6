from __future__ import annotations

from typing import Optional, Protocol

from .model import CompanySettings


class SettingsRepository(Protocol):
    def get(self) -> Optional[CompanySettings]:
        """The company's settings row, ``None`` when it was never saved."""

        raise NotImplementedError
