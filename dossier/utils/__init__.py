"""
Shared utilities for DOSSIER.

Common functionality used across contexts:
- Logger setup
- Brace/delimiter scanning
- LaTeX command helpers
- Timestamps
"""

from dossier.utils.timestamp import format_timestamp, now_exact, session_stamp

__all__ = ["format_timestamp", "now_exact", "session_stamp"]
