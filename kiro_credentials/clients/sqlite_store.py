"""SQLite key-value access for stores written by kiro-cli and Amazon Q."""

from __future__ import annotations

import re
import sqlite3
from pathlib import Path
from types import TracebackType
from typing import Optional, Type

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SQLiteKeyValueStore:
    """Point lookups against a single ``(key, value)`` table.

    The connection is opened on construction and released by ``close`` or by
    leaving a ``with`` block. Read-only handles never write to the file.
    """

    def __init__(
        self,
        db_path: str | Path,
        *,
        table: str = "auth_kv",
        read_only: bool = True,
    ) -> None:
        if not _IDENTIFIER.match(table):
            raise ValueError(f"Invalid table name: {table!r}")
        self._db_path = Path(db_path)
        self._table = table
        self._read_only = read_only
        self._conn: Optional[sqlite3.Connection] = self._connect()
        if not read_only:
            self._ensure_schema()

    @property
    def path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        if self._read_only:
            uri = f"{self._db_path.resolve().as_uri()}?mode=ro"
            conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
        else:
            if self._db_path.parent and not self._db_path.parent.exists():
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self._db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("Store handle is closed.")
        return self._conn

    def _ensure_schema(self) -> None:
        with self._connection() as conn:
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self._table} (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
                """
            )

    def get_value(self, key: str) -> Optional[str | bytes]:
        """Return the raw value stored under ``key`` or ``None`` when absent.

        BLOB values come back as bytes without decoding.

        Storage errors (missing table, corrupt file, I/O) propagate as
        ``sqlite3.Error``.
        """
        row = (
            self._connection()
            .execute(f"SELECT value FROM {self._table} WHERE key = ?", (key,))
            .fetchone()
        )
        if not row:
            return None
        return row["value"]

    def put_value(self, key: str, value: str | bytes) -> None:
        if self._read_only:
            raise sqlite3.OperationalError("Store was opened read-only.")
        with self._connection() as conn:
            conn.execute(
                f"""
                INSERT INTO {self._table} (key, value)
                VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "SQLiteKeyValueStore":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


__all__ = ["SQLiteKeyValueStore"]
