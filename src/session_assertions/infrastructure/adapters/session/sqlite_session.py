from __future__ import annotations

import pickle
import secrets
import sqlite3
from pathlib import Path
from typing import Any

from session_assertions.application.ports.session_port import SessionPort
from session_assertions.domain.model import MOCK_SESSION_NAME

SCHEMA = """
CREATE TABLE IF NOT EXISTS browser_session (
  id TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  attributes BLOB NOT NULL
);
"""


class SQLiteSession(SessionPort):
    """SQLite-backed session. Attributes survive across handles sharing the same id.

    The application under test can open ``SQLiteSession(db_path, session_id=...)``
    with the id from the session cookie and see what the test stored.
    Creates schema on first use.
    """

    def __init__(
        self,
        db_path: str | Path = ".browser_sessions.sqlite",
        name: str = MOCK_SESSION_NAME,
        session_id: str | None = None,
    ) -> None:
        self._path = Path(db_path)
        self._conn = sqlite3.connect(self._path)
        self._conn.execute("PRAGMA journal_mode=WAL;")
        self._conn.executescript(SCHEMA)
        self._conn.commit()
        self._name = name
        self._id = session_id or secrets.token_hex(16)
        self._attributes: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        cur = self._conn.execute(
            "SELECT attributes FROM browser_session WHERE id=?", (self._id,)
        )
        row = cur.fetchone()
        if not row:
            return {}
        return pickle.loads(row[0])

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> str:
        return self._id

    def has(self, key: str) -> bool:
        return key in self._attributes

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def remove(self, key: str) -> Any:
        return self._attributes.pop(key, None)

    def all(self) -> dict[str, Any]:
        return dict(self._attributes)

    def save(self) -> None:
        self._conn.execute(
            "INSERT OR REPLACE INTO browser_session (id, name, attributes) VALUES (?, ?, ?)",
            (self._id, self._name, pickle.dumps(self._attributes)),
        )
        self._conn.commit()

    def invalidate(self) -> None:
        self._conn.execute("DELETE FROM browser_session WHERE id=?", (self._id,))
        self._conn.commit()
        self._attributes = {}
        self._id = secrets.token_hex(16)

    def close(self) -> None:
        self._conn.close()
