"""
DOSSIER - Study-abroad application materials studio

Core of the resume studio: turns the LaTeX resume source a student edits into a
structured document tree, a live preview, and a print-ready export.

Architecture:
- Parsing Context: LaTeX subset -> DocumentTree (sections -> entries -> bullets)
- Rendering Context: live preview element tree and standalone print export
- Storage Context: load/save of the single resume source per user
- Studio Context: host session that owns the editable source text
"""

__version__ = "0.1.0"
