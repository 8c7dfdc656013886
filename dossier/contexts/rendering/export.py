"""
Print Export Renderer

Builds a standalone, print-oriented HTML document from a DocumentTree, writes it
to a new output surface and hands it to the platform print dialog after a short
delay so fonts and layout can settle.
"""

import tempfile
import time
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from omegaconf import DictConfig

from dossier.config import load_render_config
from dossier.contexts.parsing.document_tree import DocumentTree
from dossier.contexts.rendering.logger import (
    _log_debug,
    _log_warning,
    log_export_result,
    log_export_start,
)
from dossier.contexts.rendering.markup import display_markup, plain_text
from dossier.contexts.rendering.registries import TemplateRegistry, get_default_registry

SURFACE_BLOCKED_MESSAGE = (
    "Could not open a new window for the export. "
    "Allow pop-ups (or check the output directory) and try again."
)
PRINT_BLOCKED_MESSAGE = (
    "Could not open the print dialog. "
    "Open the exported file in a browser and print it to save a PDF."
)


class ExportSurface(Protocol):
    """A freshly opened output surface (window, tab, file) that accepts one document."""

    path: Optional[Path]

    def write(self, markup: str) -> None: ...

    def print(self) -> bool: ...


class BrowserSurface:
    """
    Output surface backed by an HTML file shown in the default web browser.

    print() opens the file with a #print fragment; the exported document calls
    window.print() on load when it sees that fragment.
    """

    def __init__(self, path: Path):
        self.path = path

    def write(self, markup: str) -> None:
        self.path.write_text(markup, encoding="utf-8")

    def print(self) -> bool:
        url = self.path.resolve().as_uri() + "#print"
        opened = webbrowser.open_new_tab(url)
        if not opened:
            _log_warning(f"No browser available to print {self.path}")
        return opened


def open_browser_surface(directory: Optional[Path] = None) -> Optional[BrowserSurface]:
    """
    Create a new browser-backed surface.

    Args:
        directory: Where to create the HTML file (defaults to the system temp directory)

    Returns:
        BrowserSurface, or None if the backing file cannot be created
    """
    try:
        if directory is not None:
            directory.mkdir(parents=True, exist_ok=True)
        handle = tempfile.NamedTemporaryFile(
            mode="w", suffix=".html", prefix="resume_", dir=directory, delete=False
        )
        handle.close()
    except OSError as e:
        _log_warning(f"Could not create export surface: {e}")
        return None
    return BrowserSurface(Path(handle.name))


@dataclass
class ExportResult:
    """
    Result of an export attempt.

    Attributes:
        success: Whether the document was written to a surface
        markup: Generated HTML ("" when the surface could not be opened)
        path: Backing file of the surface, if any
        printed: Whether the print step reported success
        message: User-facing message for failures (including a failed print step)
    """

    success: bool
    markup: str = ""
    path: Optional[Path] = None
    printed: bool = False
    message: str = ""


def build_export_document(
    tree: DocumentTree,
    config: DictConfig = None,
    registry: TemplateRegistry = None,
) -> str:
    """
    Render a DocumentTree to a complete standalone HTML document.

    Pure: the same tree and config always produce byte-identical output.

    Args:
        tree: Parsed resume
        config: Render config (defaults to load_render_config())
        registry: Template registry (defaults to the packaged templates)

    Returns:
        HTML document string with inline CSS and a single webfont reference
    """
    config = config or load_render_config()
    registry = registry or get_default_registry()
    placeholders = config.placeholders

    name = display_markup(tree.name) or placeholders.name
    contact = display_markup(tree.contact) or placeholders.contact
    person = plain_text(tree.name) or placeholders.name

    return registry.render(
        "export",
        tree=tree,
        config=config,
        name=name,
        contact=contact,
        title=f"{person} - {config.export.title_suffix}",
    )


def export_document(
    tree: DocumentTree,
    surface_factory: Callable[[], Optional[ExportSurface]] = open_browser_surface,
    notify: Callable[[str], None] = _log_warning,
    print_delay: Optional[float] = None,
    config: DictConfig = None,
    sleep: Callable[[float], None] = time.sleep,
) -> ExportResult:
    """
    Export a DocumentTree to a new output surface and open the print dialog.

    If the surface cannot be created, notify() receives a warning and nothing
    else happens. If the print dialog cannot be opened, notify() receives a
    warning and the written file is still reported. The delay before printing is not cancellable and a failed
    attempt is never retried; the user re-invokes the export.

    Args:
        tree: Parsed resume (re-derived from the current source by the caller)
        surface_factory: Opens a new output surface, returning None when blocked
        notify: Shows a user-visible warning
        print_delay: Seconds to wait before printing (defaults to config.export.print_delay_seconds)
        config: Render config (defaults to load_render_config())
        sleep: Delay function

    Returns:
        ExportResult describing what happened
    """
    config = config or load_render_config()
    if print_delay is None:
        print_delay = config.export.print_delay_seconds

    log_export_start(plain_text(tree.name), len(tree.sections))

    surface = surface_factory()
    if surface is None:
        notify(SURFACE_BLOCKED_MESSAGE)
        result = ExportResult(success=False, message=SURFACE_BLOCKED_MESSAGE)
        log_export_result(result)
        return result

    markup = build_export_document(tree, config=config)
    surface.write(markup)

    _log_debug(f"Waiting {print_delay}s before printing")
    sleep(print_delay)
    printed = surface.print()
    if not printed:
        notify(PRINT_BLOCKED_MESSAGE)

    result = ExportResult(
        success=True,
        markup=markup,
        path=getattr(surface, "path", None),
        printed=printed,
        message="" if printed else PRINT_BLOCKED_MESSAGE,
    )
    log_export_result(result)
    return result
