"""
Resume store interface.

One LaTeX source per user: save overwrites, there is no version history.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

DEFAULT_TITLE = "My Resume"


class StorageError(Exception):
    """Raised when a backend fails to persist or read a document."""


@dataclass
class SavedResume:
    """
    A persisted resume source.

    Attributes:
        latex_code: LaTeX source text
        title: Document title
        updated_at: ISO 8601 timestamp of the last save
    """

    latex_code: str
    title: str = DEFAULT_TITLE
    updated_at: str = ""


class ResumeStore(ABC):
    """Load/save collaborator for the resume source text."""

    @abstractmethod
    def load(self, user_id: str) -> Optional[SavedResume]:
        """Last saved document for user_id, or None if nothing is saved."""

    @abstractmethod
    def save(self, user_id: str, latex_code: str, title: Optional[str] = None) -> SavedResume:
        """Persist latex_code for user_id, replacing any previous save."""

    @abstractmethod
    def clear(self, user_id: str) -> None:
        """Delete the saved document for user_id (no-op if none)."""


def require_user_id(user_id: str) -> str:
    if not user_id or not str(user_id).strip():
        raise ValueError("A user id is required to save a resume")
    return str(user_id)
