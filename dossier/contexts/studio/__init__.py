"""
Studio Context

Responsibilities:
- Owns the editable resume source text for one user
- Wires parsing -> preview on every edit and parsing -> export on request
- Provides starter templates for both supported dialects

Owns: Editing session state
Never: Implements parsing, rendering or persistence itself
"""

from dossier.contexts.studio.session import ResumeStudio
from dossier.contexts.studio.starter_templates import (
    DEFAULT_TEMPLATE,
    STARTER_TEMPLATES,
    get_starter_template,
)

__all__ = ["ResumeStudio", "DEFAULT_TEMPLATE", "STARTER_TEMPLATES", "get_starter_template"]
