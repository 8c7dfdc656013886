"""
Relational resume store.

SQLite table with one row per user; saving upserts that row.
"""

import sqlite3
from pathlib import Path
from typing import Optional

from dossier.contexts.storage.base import (
    DEFAULT_TITLE,
    ResumeStore,
    SavedResume,
    StorageError,
    require_user_id,
)
from dossier.contexts.storage.logger import _log_debug
from dossier.utils.timestamp import now_exact

SCHEMA = """
CREATE TABLE IF NOT EXISTS resumes (
    user_id TEXT PRIMARY KEY,
    latex_code TEXT NOT NULL,
    title TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

UPSERT = """
INSERT INTO resumes (user_id, latex_code, title, updated_at)
VALUES (?, ?, ?, ?)
ON CONFLICT(user_id) DO UPDATE SET
    latex_code = excluded.latex_code,
    title = excluded.title,
    updated_at = excluded.updated_at
"""


class SQLiteResumeStore(ResumeStore):
    """
    Resume store backed by a SQLite database.

    The database file and table are created on first use.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._connect()
        try:
            with conn:
                conn.execute(SCHEMA)
        except sqlite3.Error as e:
            raise StorageError(f"Could not initialize {self.db_path}: {e}") from e
        finally:
            conn.close()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row  # Enable column access by name
        return conn

    def load(self, user_id: str) -> Optional[SavedResume]:
        if not user_id:
            return None
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT latex_code, title, updated_at FROM resumes WHERE user_id = ?",
                (user_id,),
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Could not read resume for {user_id}: {e}") from e
        finally:
            conn.close()

        if row is None:
            return None
        return SavedResume(
            latex_code=row["latex_code"],
            title=row["title"] or DEFAULT_TITLE,
            updated_at=row["updated_at"],
        )

    def save(self, user_id: str, latex_code: str, title: Optional[str] = None) -> SavedResume:
        user_id = require_user_id(user_id)
        saved = SavedResume(latex_code=latex_code, title=title or DEFAULT_TITLE, updated_at=now_exact())

        conn = self._connect()
        try:
            with conn:
                conn.execute(UPSERT, (user_id, saved.latex_code, saved.title, saved.updated_at))
        except sqlite3.Error as e:
            raise StorageError(f"Could not save resume for {user_id}: {e}") from e
        finally:
            conn.close()

        _log_debug(f"Saved resume for {user_id} to {self.db_path}")
        return saved

    def clear(self, user_id: str) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute("DELETE FROM resumes WHERE user_id = ?", (user_id,))
        except sqlite3.Error as e:
            raise StorageError(f"Could not clear resume for {user_id}: {e}") from e
        finally:
            conn.close()
