"""
Storage Context

Responsibilities:
- Loads and saves the single resume source per user
- Offers a local key-value backend and a relational (SQLite) backend

Owns: Persistence of LaTeX source text and title
Never: Parses or renders documents
"""

from pathlib import Path
from typing import Optional

from dossier.config import DATA_PATH, STORAGE_BACKEND
from dossier.contexts.storage.base import (
    DEFAULT_TITLE,
    ResumeStore,
    SavedResume,
    StorageError,
)
from dossier.contexts.storage.local_store import LocalResumeStore
from dossier.contexts.storage.sqlite_store import SQLiteResumeStore

BACKENDS = {
    "local": (LocalResumeStore, "resumes.json"),
    "sqlite": (SQLiteResumeStore, "resumes.db"),
}


def get_resume_store(backend: Optional[str] = None, path: Optional[Path] = None) -> ResumeStore:
    """
    Build the configured resume store.

    Args:
        backend: "local" or "sqlite" (defaults to DOSSIER_STORAGE_BACKEND)
        path: Backing file (defaults to DOSSIER_DATA_PATH / resumes.json|resumes.db)

    Returns:
        ResumeStore instance

    Raises:
        ValueError: If backend is unknown
    """
    backend = backend or STORAGE_BACKEND
    if backend not in BACKENDS:
        raise ValueError(f"Unknown storage backend '{backend}'. Valid backends: {sorted(BACKENDS)}")

    store_class, default_file = BACKENDS[backend]
    return store_class(path or DATA_PATH / default_file)


__all__ = [
    "DEFAULT_TITLE",
    "ResumeStore",
    "SavedResume",
    "StorageError",
    "LocalResumeStore",
    "SQLiteResumeStore",
    "get_resume_store",
]
