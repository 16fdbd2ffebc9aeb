"""SQLite key-value store for user preferences."""

from __future__ import annotations

import sqlite3
import time
from pathlib import Path
from typing import Optional

from manhwa.config import THEMES

THEME_KEY = "theme"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS preferences (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at REAL NOT NULL
);
"""


class PreferenceStore:
    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._conn = sqlite3.connect(str(db_path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._init_schema()

    def _init_schema(self) -> None:
        self._conn.executescript(_SCHEMA)
        self._conn.commit()

    def close(self) -> None:
        self._conn.close()

    # ── Key-value ──────────────────────────────────────────

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        row = self._conn.execute(
            "SELECT value FROM preferences WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else default

    def set(self, key: str, value: str) -> None:
        self._conn.execute(
            """INSERT OR REPLACE INTO preferences (key, value, updated_at)
               VALUES (?, ?, ?)""",
            (key, value, time.time()),
        )
        self._conn.commit()

    # ── Theme ──────────────────────────────────────────────

    def get_theme(self, default: str = "dark") -> str:
        value = self.get(THEME_KEY)
        return value if value in THEMES else default

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}. Expected one of {THEMES}")
        self.set(THEME_KEY, theme)
