"""
Resume Document Tree

Defines the structured representation produced by the parser and consumed by
the preview and export renderers.

The tree is strict: DocumentTree owns Sections, Sections own Entries, Entries
own bullet strings. A fresh tree is built on every parse call and is never
persisted; only the LaTeX source text is saved.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from omegaconf import OmegaConf


@dataclass
class Entry:
    """
    One resume line-item (a job, degree, or activity).

    All text fields hold cleaned inline HTML (only <b> and <i> tags survive cleaning).

    Attributes:
        heading: Left side of the first row (e.g., company or school)
        subheading: Left side of the second row (e.g., role or degree)
        right_field_1: Right side of the first row (e.g., location)
        right_field_2: Right side of the second row (e.g., dates)
        bullets: Bullet texts in source order
    """

    heading: str = ""
    subheading: str = ""
    right_field_1: str = ""
    right_field_2: str = ""
    bullets: List[str] = field(default_factory=list)


@dataclass
class Section:
    """
    Titled group of entries (e.g., "EDUCATION", "EXPERIENCE").

    Attributes:
        title: Raw section title as written in the source (uncleaned)
        entries: Entries in source order
    """

    title: str
    entries: List[Entry] = field(default_factory=list)


@dataclass
class DocumentTree:
    """
    Root of a parsed resume.

    Attributes:
        name: Person's name (first non-empty heading line or \\name{...})
        contact: Contact line (second non-empty heading line or \\contact{...})
        sections: Sections in source order
    """

    name: str = ""
    contact: str = ""
    sections: List[Section] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return sum(len(section.entries) for section in self.sections)

    @property
    def bullet_count(self) -> int:
        return sum(
            len(entry.bullets) for section in self.sections for entry in section.entries
        )

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def to_dict(self) -> Dict[str, Any]:
        """Plain-container representation (dicts, lists, strings)."""
        return asdict(self)

    def to_yaml(self) -> str:
        """YAML representation for inspection and CLI output."""
        return OmegaConf.to_yaml(OmegaConf.create(self.to_dict()))
