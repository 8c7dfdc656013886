"""
Rendering Context

Responsibilities:
- Maps a DocumentTree to the live preview element tree
- Builds the standalone print export and drives the output surface + print dialog
- Escapes user text once while keeping the parser's <b>/<i> formatting

Owns: HTML templates, render config consumption, export surfaces
Never: Parses LaTeX or persists documents
"""

from dossier.contexts.rendering.export import (
    BrowserSurface,
    ExportResult,
    build_export_document,
    export_document,
    open_browser_surface,
)
from dossier.contexts.rendering.preview import PreviewNode, render_preview

__all__ = [
    "PreviewNode",
    "render_preview",
    "ExportResult",
    "BrowserSurface",
    "build_export_document",
    "export_document",
    "open_browser_surface",
]
