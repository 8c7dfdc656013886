"""
Inline markup filters shared by the preview and export templates.

Field values arrive from the parser as cleaned inline HTML whose only tags are
<b> and <i>. Everything else in them is user text and must be escaped exactly once.
"""

from markupsafe import Markup, escape

from dossier.contexts.parsing.inline_cleaner import clean_inline

# Escaped form -> tag the cleaner is allowed to emit
ALLOWED_TAGS = {
    "&lt;b&gt;": "<b>",
    "&lt;/b&gt;": "</b>",
    "&lt;i&gt;": "<i>",
    "&lt;/i&gt;": "</i>",
}


def inline_markup(value) -> Markup:
    """
    Escape a cleaned field and re-enable its <b>/<i> tags.

    Example:
        >>> inline_markup("<b>R&D</b> <script>")
        Markup('<b>R&amp;D</b> &lt;script&gt;')
    """
    if not value:
        return Markup("")
    escaped = str(escape(value))
    for escaped_tag, tag in ALLOWED_TAGS.items():
        escaped = escaped.replace(escaped_tag, tag)
    return Markup(escaped)


def display_markup(value) -> Markup:
    """
    Clean raw LaTeX (section titles, \\name{...} values) and convert it to markup.

    Safe on already-cleaned text since cleaning is idempotent.
    """
    return inline_markup(clean_inline(value))


def plain_text(value) -> str:
    """Text content of a field with all tags removed (for <title> and logs)."""
    return display_markup(value).striptags()
