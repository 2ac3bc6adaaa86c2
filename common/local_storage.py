"""
common/local_storage.py

A tiny key/value store that plays the part of the browser's localStorage.

Values are JSON-encoded and kept in a single SQLite table, so the auth
record survives a Streamlit rerun or a full server restart exactly the way
it would survive a browser reload.

One SQLite file serves every browser. `scoped(browser_id)` returns a view
whose keys are stored as "<browser_id>/<key>", so each browser only ever
sees its own records. The unscoped store holds app-wide values such as the
system settings.

NO OTHER FILE IN THE APPLICATION SHOULD IMPORT `sqlite3`.
"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, List

logger = logging.getLogger(__name__)

_CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS local_storage (
    storage_key TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

NAMESPACE_SEPARATOR = "/"


class LocalStorage:
    def __init__(self, db_file: str, namespace: str = ""):
        if NAMESPACE_SEPARATOR in namespace:
            raise ValueError(f"Storage namespace may not contain '{NAMESPACE_SEPARATOR}': {namespace!r}")
        self.db_file = str(db_file)
        self.namespace = namespace
        with self._get_db_conn() as conn:
            conn.execute(_CREATE_TABLE_SQL)

    def scoped(self, namespace: str) -> "LocalStorage":
        """Same SQLite file, keys private to `namespace` (one browser)."""
        return LocalStorage(self.db_file, namespace=namespace)

    @contextmanager
    def _get_db_conn(self):
        """Yields a configured connection; commits on success and always closes."""
        conn = sqlite3.connect(self.db_file)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    @property
    def _prefix(self) -> str:
        return f"{self.namespace}{NAMESPACE_SEPARATOR}" if self.namespace else ""

    def _row_key(self, key: str) -> str:
        return self._prefix + key

    def _in_scope_sql(self):
        # Unscoped stores only see keys without a namespace prefix.
        if self.namespace:
            return "substr(storage_key, 1, ?) = ?", (len(self._prefix), self._prefix)
        return "instr(storage_key, ?) = 0", (NAMESPACE_SEPARATOR,)

    def get_item(self, key: str, default: Any = None) -> Any:
        with self._get_db_conn() as conn:
            row = conn.execute(
                "SELECT payload FROM local_storage WHERE storage_key = ?", (self._row_key(key),)
            ).fetchone()
        if row is None:
            return default
        try:
            return json.loads(row["payload"])
        except json.JSONDecodeError:
            logger.warning(f"Ignoring unreadable value stored under '{key}'")
            return default

    def set_item(self, key: str, value: Any) -> None:
        payload = json.dumps(value, default=str)
        with self._get_db_conn() as conn:
            conn.execute(
                """
                INSERT INTO local_storage (storage_key, payload, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(storage_key) DO UPDATE SET
                    payload = excluded.payload,
                    updated_at = excluded.updated_at
                """,
                (self._row_key(key), payload),
            )

    def remove_item(self, key: str) -> None:
        with self._get_db_conn() as conn:
            conn.execute("DELETE FROM local_storage WHERE storage_key = ?", (self._row_key(key),))

    def keys(self) -> List[str]:
        where, params = self._in_scope_sql()
        with self._get_db_conn() as conn:
            rows = conn.execute(
                f"SELECT storage_key FROM local_storage WHERE {where} ORDER BY storage_key", params
            ).fetchall()
        return [row["storage_key"][len(self._prefix):] for row in rows]

    def clear(self) -> None:
        where, params = self._in_scope_sql()
        with self._get_db_conn() as conn:
            conn.execute(f"DELETE FROM local_storage WHERE {where}", params)
