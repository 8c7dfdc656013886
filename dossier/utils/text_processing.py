"""
Text processing utilities for delimiter scanning and display.
"""

from typing import List, Tuple


def extract_balanced_delimiters(
    text: str,
    start_pos: int,
    open_char: str = '{',
    close_char: str = '}',
    escape_char: str = '\\'
) -> Tuple[str, int]:
    """
    Extract content between balanced delimiters, handling escaped characters.

    Assumes start_pos is AFTER an opening delimiter. Counts nested delimiters
    to find the matching closing delimiter, skipping escaped characters.

    Args:
        text: Text containing delimited content
        start_pos: Position just after the opening delimiter
        open_char: Opening delimiter character (default: '{')
        close_char: Closing delimiter character (default: '}')
        escape_char: Character used for escaping (default: '\\')

    Returns:
        (content, end_pos) where:
        - content: Text between the delimiters (excluding delimiters themselves)
        - end_pos: Position after the closing delimiter

    Raises:
        ValueError: If delimiters are unmatched

    Example:
        >>> text = "foo {bar {nested} baz} qux"
        >>> content, end = extract_balanced_delimiters(text, 5)
        >>> content
        'bar {nested} baz'
    """
    depth = 1  # Start at 1 (already inside opening delimiter)
    pos = start_pos

    while pos < len(text) and depth > 0:
        if text[pos] == escape_char:
            # Skip escaped character
            pos += 2
            continue
        elif text[pos] == open_char:
            depth += 1
        elif text[pos] == close_char:
            depth -= 1
        pos += 1

    if depth != 0:
        raise ValueError(
            f"Unmatched {open_char}{close_char} delimiters starting at position {start_pos}"
        )

    content = text[start_pos:pos - 1]
    return content, pos


def collect_brace_arguments(text: str, start_pos: int, count: int) -> Tuple[List[str], int]:
    """
    Collect up to `count` top-level {...} arguments starting at start_pos.

    Scans the character stream with an explicit depth counter: an argument
    opens on a 0 -> 1 transition and closes when depth returns to 0, so nested
    braces from inline markup stay inside their argument. Characters between
    arguments (whitespace, line breaks) are skipped. Escaped characters
    (\\{, \\}, \\\\) never change the depth.

    An argument whose closing brace is missing is not returned, so callers can
    compare len(args) with count to detect an incomplete command.

    Args:
        text: Text following a command name
        start_pos: Position to start scanning
        count: Number of arguments wanted

    Returns:
        (arguments, end_pos) where end_pos is the position after the last
        complete argument (start_pos if none was found)

    Example:
        >>> collect_brace_arguments("{Acme}{\\textbf{Remote}} tail", 0, 2)
        (['Acme', '\\textbf{Remote}'], 23)
        >>> collect_brace_arguments("{Acme}{Rem", 0, 2)
        (['Acme'], 6)
    """
    arguments = []
    pos = start_pos
    end_pos = start_pos
    depth = 0
    arg_start = None

    while pos < len(text) and len(arguments) < count:
        char = text[pos]
        if char == '\\':
            pos += 2
            continue
        if char == '{':
            if depth == 0:
                arg_start = pos + 1
            depth += 1
        elif char == '}' and depth > 0:
            depth -= 1
            if depth == 0:
                arguments.append(text[arg_start:pos])
                end_pos = pos + 1
        pos += 1

    return arguments, end_pos


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
