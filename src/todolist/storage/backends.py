# src/todolist/storage/backends.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import sqlite3
import time
from pathlib import Path

from ..core.ports import KeyValueStorage

logger = logging.getLogger(__name__)

BACKENDS = ("json", "sqlite")


class JsonFileStorage:
    """
    Key-value slots kept in a single JSON object file.

    - missing file: every key is absent
    - corrupt file: treated as empty on read, replaced on the next write
    - writes go to a sibling .tmp file and are moved into place with os.replace
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text("utf-8")
            data = json.loads(raw) if raw.strip() else {}
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("Storage file %s is not valid JSON; treating as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object; treating as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)


class SqliteStorage:
    """
    Key-value slots in a SQLite table.

    Each call opens its own short-lived connection.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._ensure_schema()
        except sqlite3.Error:
            # get()/set() will fail too; TaskPersistence logs and degrades.
            logger.exception("SqliteStorage schema setup failed db=%s", self._db_path)
            return
        logger.info("SqliteStorage ready db=%s", self._db_path)

    @property
    def path(self) -> Path:
        return self._db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            cur = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cur.fetchone()
            return str(row[0]) if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, time.time()),
            )
            conn.commit()
        finally:
            conn.close()


def open_storage(settings) -> KeyValueStorage:
    """Build the storage backend named by settings.storage_backend."""
    backend = str(getattr(settings, "storage_backend", "json")).strip().lower()
    path = Path(settings.storage_path)

    if backend == "json":
        return JsonFileStorage(path)
    if backend == "sqlite":
        return SqliteStorage(path)
    raise ValueError(f"unknown storage backend: {backend!r} (expected one of {', '.join(BACKENDS)})")
