"""
Live Preview Renderer

Maps a DocumentTree to an element tree the host UI lays out on screen. Pure and
synchronous: called on every edit with a freshly parsed tree.
"""

from dataclasses import dataclass, field
from typing import List

from markupsafe import Markup, escape
from omegaconf import DictConfig

from dossier.config import load_render_config
from dossier.contexts.parsing.document_tree import DocumentTree, Entry, Section
from dossier.contexts.rendering.markup import display_markup, inline_markup
from dossier.contexts.rendering.registries import TemplateRegistry, get_default_registry


@dataclass
class PreviewNode:
    """
    One on-screen layout element.

    Attributes:
        tag: HTML tag the element maps to (div, h1, ul, li, ...)
        css_class: Layout role (e.g., "entry-row", "right"), prefixed with "dossier-" in HTML
        markup: Inline content (escaped, with <b>/<i> formatting preserved)
        children: Child elements in display order
    """

    tag: str
    css_class: str
    markup: Markup = field(default_factory=Markup)
    children: List["PreviewNode"] = field(default_factory=list)

    def find_all(self, css_class: str) -> List["PreviewNode"]:
        """All descendants (including self) with the given class, depth-first."""
        found = [self] if self.css_class == css_class else []
        for child in self.children:
            found.extend(child.find_all(css_class))
        return found

    def to_html(self, registry: TemplateRegistry = None) -> str:
        """Serialize the element tree to an HTML fragment for embedding."""
        registry = registry or get_default_registry()
        return registry.render("preview", node=self)


def _row(css_class: str, left: str, right: str) -> PreviewNode:
    return PreviewNode(
        tag="div",
        css_class=css_class,
        children=[
            PreviewNode(tag="span", css_class="left", markup=inline_markup(left)),
            PreviewNode(tag="span", css_class="right", markup=inline_markup(right)),
        ],
    )


def render_entry(entry: Entry) -> PreviewNode:
    node = PreviewNode(tag="div", css_class="entry")
    node.children.append(_row("entry-row", entry.heading, entry.right_field_1))
    if entry.subheading:
        node.children.append(_row("entry-subrow", entry.subheading, entry.right_field_2))
    if entry.bullets:
        node.children.append(
            PreviewNode(
                tag="ul",
                css_class="bullets",
                children=[
                    PreviewNode(tag="li", css_class="bullet", markup=inline_markup(text))
                    for text in entry.bullets
                ],
            )
        )
    return node


def render_section(section: Section) -> PreviewNode:
    node = PreviewNode(tag="section", css_class="section")
    node.children.append(
        PreviewNode(tag="h2", css_class="section-title", markup=display_markup(section.title))
    )
    node.children.extend(render_entry(entry) for entry in section.entries)
    return node


def render_preview(tree: DocumentTree, config: DictConfig = None) -> PreviewNode:
    """
    Render a DocumentTree to a preview element tree.

    Header shows the name and contact line (placeholders when empty), followed
    by one group per section. A tree with no sections renders as a single
    placeholder message.

    Args:
        tree: Parsed resume
        config: Render config (defaults to load_render_config())

    Returns:
        Root PreviewNode (css_class "document", or "placeholder" for an empty tree)
    """
    config = config or load_render_config()
    placeholders = config.placeholders

    if tree.is_empty:
        return PreviewNode(
            tag="div", css_class="placeholder", markup=escape(placeholders.empty_document)
        )

    name = display_markup(tree.name) or escape(placeholders.name)
    contact = display_markup(tree.contact) or escape(placeholders.contact)

    header = PreviewNode(
        tag="header",
        css_class="header",
        children=[
            PreviewNode(tag="h1", css_class="name", markup=name),
            PreviewNode(tag="p", css_class="contact", markup=contact),
        ],
    )
    root = PreviewNode(tag="article", css_class="document", children=[header])
    root.children.extend(render_section(section) for section in tree.sections)
    return root
