"""
Resume Studio Session

Host-side component that owns the editable LaTeX source. Every edit re-parses
the source synchronously and rebuilds the preview; exports always re-derive the
tree from the current text.
"""

from typing import Optional

from omegaconf import DictConfig

from dossier.config import load_render_config
from dossier.contexts.parsing import DocumentTree, parse_document
from dossier.contexts.rendering import ExportResult, PreviewNode, export_document, render_preview
from dossier.contexts.storage import ResumeStore, SavedResume
from dossier.contexts.studio.starter_templates import DEFAULT_TEMPLATE, get_starter_template


class ResumeStudio:
    """
    Editable resume source with live preview, persistence and export.

    Attributes:
        user_id: Opaque user/session identifier passed to the store
        store: Load/save collaborator
        source: Current LaTeX source text
        title: Title used when saving
    """

    def __init__(
        self,
        user_id: str,
        store: ResumeStore,
        source: Optional[str] = None,
        config: DictConfig = None,
    ):
        self.user_id = user_id
        self.store = store
        self.config = config or load_render_config()
        self.title: Optional[str] = None
        self.source = source if source is not None else get_starter_template(DEFAULT_TEMPLATE)

    @property
    def tree(self) -> DocumentTree:
        return parse_document(self.source)

    @property
    def preview(self) -> PreviewNode:
        return render_preview(self.tree, config=self.config)

    def edit(self, source: str) -> PreviewNode:
        """Replace the source text and return the refreshed preview."""
        self.source = source
        return self.preview

    def load(self) -> Optional[SavedResume]:
        """
        Replace the source with the user's saved document, if any.

        Returns:
            The saved document, or None (source left unchanged)
        """
        saved = self.store.load(self.user_id)
        if saved is not None:
            self.source = saved.latex_code
            self.title = saved.title
        return saved

    def save(self, title: Optional[str] = None) -> SavedResume:
        """Persist the current source, overwriting the previous save."""
        if title:
            self.title = title
        saved = self.store.save(self.user_id, self.source, self.title)
        self.title = saved.title
        return saved

    def export(self, **kwargs) -> ExportResult:
        """Export the current source; kwargs are forwarded to export_document()."""
        kwargs.setdefault("config", self.config)
        return export_document(self.tree, **kwargs)
