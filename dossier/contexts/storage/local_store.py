"""
Local key-value resume store.

A JSON file standing in for browser localStorage: a flat mapping of string
keys to JSON values, with one "dossier_{user_id}_resume" key per user.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from dossier.contexts.storage.base import (
    DEFAULT_TITLE,
    ResumeStore,
    SavedResume,
    StorageError,
    require_user_id,
)
from dossier.contexts.storage.logger import _log_debug, _log_info, _log_warning
from dossier.utils.timestamp import now_exact

KEY_PREFIX = "dossier"


def storage_key(user_id: str, kind: str = "resume") -> str:
    return f"{KEY_PREFIX}_{user_id}_{kind}"


class LocalResumeStore(ResumeStore):
    """Resume store backed by a single JSON key-value file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            _log_warning(f"Ignoring unreadable store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            _log_warning(f"Ignoring store {self.path}: top level is not an object")
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def load(self, user_id: str) -> Optional[SavedResume]:
        if not user_id:
            return None
        record = self._read_all().get(storage_key(user_id))
        if not isinstance(record, dict) or "latexCode" not in record:
            return None
        return SavedResume(
            latex_code=record["latexCode"],
            title=record.get("title") or DEFAULT_TITLE,
            updated_at=record.get("updatedAt", ""),
        )

    def save(self, user_id: str, latex_code: str, title: Optional[str] = None) -> SavedResume:
        user_id = require_user_id(user_id)
        saved = SavedResume(latex_code=latex_code, title=title or DEFAULT_TITLE, updated_at=now_exact())

        data = self._read_all()
        data[storage_key(user_id)] = {
            "latexCode": saved.latex_code,
            "title": saved.title,
            "updatedAt": saved.updated_at,
        }
        self._write_all(data)
        _log_debug(f"Saved resume for {user_id} to {self.path}")
        return saved

    def clear(self, user_id: str) -> None:
        data = self._read_all()
        if data.pop(storage_key(user_id), None) is not None:
            self._write_all(data)
            _log_info(f"Cleared resume for {user_id}")
