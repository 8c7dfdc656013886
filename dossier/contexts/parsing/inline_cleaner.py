"""
Inline Text Cleaner

Normalizes the LaTeX inline markup found inside a single field value into the
small HTML subset the renderers understand (<b> and <i>).

Layout removal repeats until nothing is left to remove and no other step
produces LaTeX, so cleaning already-cleaned text is a no-op.
"""

import re

from dossier.utils.latex_parsing_tools import (
    LaTeXPatterns,
    replace_command,
    replace_command_with_argument,
    strip_formatting,
)

BOLD_COMMANDS = ["textbf"]
ITALIC_COMMANDS = ["textit", "emph"]
UNWRAP_COMMANDS = ["underline"]

# Spacing and sizing switches that carry no text
SPACING_SIZING_COMMANDS = [
    "tiny",
    "scriptsize",
    "footnotesize",
    "small",
    "normalsize",
    "large",
    "Large",
    "LARGE",
    "huge",
    "Huge",
    "scshape",
    "bfseries",
    "itshape",
    "hfill",
    "quad",
    "qquad",
    "smallskip",
    "medskip",
    "bigskip",
    "noindent",
]

# Escaped characters that stand for themselves once out of LaTeX
ESCAPED_CHARACTERS = [
    (r"\&", "&"),
    (r"\%", "%"),
    (r"\$", "$"),
    (r"\#", "#"),
    (r"\_", "_"),
]


def strip_layout(text: str) -> str:
    """
    Remove spacing/sizing commands, \\\\ line breaks and braces until none are left.

    Dropping braces can join the pieces of a command (\\sm{}all -> \\small), so
    the removals repeat until the text stops changing.
    """
    result = text
    while True:
        previous = result
        result = re.sub(LaTeXPatterns.SPACING_COMMANDS, "", result)
        result = strip_formatting(result, SPACING_SIZING_COMMANDS)
        result = result.replace("\\\\", "")
        # Escaped braces go with the rest
        result = result.replace(r"\{", "").replace(r"\}", "")
        result = result.replace("{", "").replace("}", "")
        if result == previous:
            return result


def clean_inline(text: str) -> str:
    """
    Convert a field's LaTeX inline markup to cleaned inline HTML.

    Applied in order:
    - \\textbf{x} -> <b>x</b>
    - \\textit{x}, \\emph{x} -> <i>x</i>
    - \\underline{x} -> x
    - \\href{url}{text} -> text
    - spacing/sizing sequences (\\vspace{..}, \\small, \\Huge, \\scshape, ...), \\\\ line breaks
      and remaining braces removed (see strip_layout)
    - escaped specials (\\&, \\%, \\$, \\#, \\_) -> literal characters
    - $|$ -> " | "
    - whitespace collapsed, ends trimmed

    Args:
        text: Raw field text from the LaTeX source

    Returns:
        Cleaned inline HTML ("" for empty or non-string input)

    Example:
        >>> clean_inline("\\\\textbf{Acme} \\\\emph{Corp}")
        '<b>Acme</b> <i>Corp</i>'
        >>> clean_inline("555-0100 $|$ \\\\href{mailto:a@b.c}{\\\\underline{a@b.c}}")
        '555-0100 | a@b.c'
    """
    if not isinstance(text, str) or not text:
        return ""

    result = text

    for command in BOLD_COMMANDS:
        result = replace_command(result, command, "<b>", "</b>")
    for command in ITALIC_COMMANDS:
        result = replace_command(result, command, "<i>", "</i>")
    for command in UNWRAP_COMMANDS:
        result = replace_command(result, command)

    result = replace_command_with_argument(result, "href", num_args=2, keep=1)

    result = strip_layout(result)

    for escaped, literal in ESCAPED_CHARACTERS:
        result = result.replace(escaped, literal)

    result = re.sub(LaTeXPatterns.BAR_SEPARATOR, " | ", result)

    result = re.sub(LaTeXPatterns.WHITESPACE_RUN, " ", result)
    return result.strip()
