"""
Rendering Registries

Loads and caches the HTML templates used by the preview and export renderers.
"""

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError, TemplateNotFound

from dossier.contexts.rendering.exceptions import RenderError
from dossier.contexts.rendering.markup import display_markup, inline_markup, plain_text

TEMPLATES_PATH = Path(__file__).parent / "templates"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 HTML templates.

    Templates live in dossier/contexts/rendering/templates/{name}.html.jinja.
    Autoescaping is on; field values go through the inline_markup / display
    filters so the cleaner's <b>/<i> tags survive while user text is escaped once.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding *.html.jinja files (defaults to the packaged templates)
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["inline_markup"] = inline_markup
        self.env.filters["display"] = display_markup
        self.env.filters["plain_text"] = plain_text

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'export')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.html.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template, wrapping Jinja2 failures in RenderError.

        Raises:
            TemplateNotFound: If template file doesn't exist
            RenderError: If rendering fails
        """
        template = self.get_template(template_name)
        try:
            return template.render(**context)
        except TemplateError as e:
            raise RenderError(
                f"Failed to render '{template_name}'", template_name=template_name, original_error=e
            ) from e

    def is_cached(self, name: str) -> bool:
        return name in self._cache

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()


_default_registry = None


def get_default_registry() -> TemplateRegistry:
    """Shared registry over the packaged templates."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry
