from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json
from .model import CompanySettings
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    """Settings live in one JSON document per company (camelCase keys)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[CompanySettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT settings_json FROM company_settings ORDER BY settings_id LIMIT 1")
            r = fetchone(cur)
            if not r:
                return None
            return CompanySettings.from_mapping(load_json(r["settings_json"]))
