"""
LaTeX Parsing Tools

Fundamental utilities for rewriting LaTeX commands inside short text spans.

Self-contained module with no project dependencies beyond text_processing.
All LaTeX patterns are defined as constants below for visibility and maintainability.
"""

import re
from dataclasses import dataclass
from typing import List

from dossier.utils.text_processing import collect_brace_arguments, extract_balanced_delimiters


@dataclass(frozen=True)
class LaTeXPatterns:
    """
    LaTeX pattern templates for parsing and manipulation.

    These are format string templates that accept command names.
    Use .format() to substitute the command name.
    """

    # Matches \cmd not followed by more letters, plus trailing whitespace
    COMMAND_WITH_WHITESPACE: str = r"\\{command}(?![A-Za-z])\s*"
    # Matches \vspace{...}, \hspace*{...}
    SPACING_COMMANDS: str = r"\\[vh]space\*?\{[^}]*\}\s*"
    # Matches the escaped bar separator $|$
    BAR_SEPARATOR: str = r"\s*\$\s*\|\s*\$\s*"
    WHITESPACE_RUN: str = r"\s+"


def replace_command(text: str, command: str, prefix: str = "", suffix: str = "") -> str:
    """
    Replace LaTeX command with optional prefix/suffix around content.

    Handles nested braces correctly using balanced delimiter matching.
    Occurrences with unmatched braces are left untouched.

    Args:
        text: Text containing the command
        command: Command name without backslash (e.g., "textbf", "underline")
        prefix: String to insert before content (default: "")
        suffix: String to insert after content (default: "")

    Returns:
        Text with command replaced by prefix + content + suffix

    Examples:
        >>> replace_command("\\\\textbf{bold text}", "textbf")
        'bold text'
        >>> replace_command("Normal \\\\textbf{bold} text", "textbf", "<b>", "</b>")
        'Normal <b>bold</b> text'
        >>> replace_command("\\\\textbf{text \\\\textit{nested} more}", "textbf")
        'text \\\\textit{nested} more'
    """
    result = text
    command_pattern = f"\\{command}{{"
    search_from = 0

    while True:
        pos = result.find(command_pattern, search_from)
        if pos == -1:
            break

        # Position AFTER opening brace (extract_balanced_delimiters expects this)
        brace_pos = pos + len(command_pattern)

        try:
            content, end_pos = extract_balanced_delimiters(result, brace_pos)
        except ValueError:
            # Unmatched braces, skip this occurrence
            search_from = brace_pos
            continue

        result = result[:pos] + prefix + content + suffix + result[end_pos:]
        search_from = pos

    return result


def replace_command_with_argument(text: str, command: str, num_args: int, keep: int) -> str:
    """
    Replace a multi-argument command by one of its arguments.

    Args:
        text: Text containing the command
        command: Command name without backslash (e.g., "href")
        num_args: Number of {...} arguments the command takes
        keep: Index of the argument that replaces the whole command

    Returns:
        Text with each complete occurrence replaced by the kept argument

    Example:
        >>> replace_command_with_argument("see \\\\href{https://x.dev}{my site}", "href", 2, 1)
        'see my site'
    """
    result = text
    command_token = f"\\{command}"
    search_from = 0

    while True:
        pos = result.find(command_token, search_from)
        if pos == -1:
            break

        args_pos = pos + len(command_token)
        if args_pos < len(result) and result[args_pos].isalpha():
            # Longer command name sharing this prefix
            search_from = args_pos
            continue

        args, end_pos = collect_brace_arguments(result, args_pos, num_args)
        if len(args) < num_args or result[args_pos:end_pos].lstrip()[:1] != "{":
            search_from = args_pos
            continue

        result = result[:pos] + args[keep] + result[end_pos:]
        search_from = pos

    return result


def strip_formatting(text: str, commands: List[str]) -> str:
    """
    Remove LaTeX formatting commands from text.

    Commands are removed entirely (along with any trailing whitespace).
    This is for commands that don't wrap content (like \\small, \\scshape).

    Args:
        text: Text containing formatting commands
        commands: List of command names to remove (without backslash)

    Returns:
        Text with formatting commands removed

    Example:
        >>> strip_formatting("\\\\Huge \\\\scshape Jane Doe", ["Huge", "scshape"])
        'Jane Doe'
        >>> strip_formatting("\\\\smallskip text", ["small"])
        '\\\\smallskip text'
    """
    result = text
    for command in commands:
        pattern = LaTeXPatterns.COMMAND_WITH_WHITESPACE.format(command=re.escape(command))
        result = re.sub(pattern, "", result)
    return result
