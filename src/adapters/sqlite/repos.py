import json
import sqlite3
from datetime import UTC, datetime
from typing import Any

from src.domain.entities import IconLibrarySettings


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteConfigStore:
    """SQLite adapter for keyed configuration records (JSON payload per key)."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def read(self, key: str) -> IconLibrarySettings | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM config WHERE name = ?", (key,)).fetchone()
            if not row:
                return None
            return self._map_row(row)
        finally:
            conn.close()

    def write(self, key: str, settings: IconLibrarySettings) -> IconLibrarySettings:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO config (name, data, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(name) DO UPDATE SET
                    data=excluded.data,
                    updated_at=excluded.updated_at
            """,
                (
                    key,
                    json.dumps(settings.model_dump()),
                    datetime.now(UTC).isoformat(),
                ),
            )
            conn.commit()
            return settings
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM config WHERE name = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> IconLibrarySettings:
        return IconLibrarySettings.model_validate(json.loads(row["data"]))
