"""
LaTeX Resume Parser

Converts resume LaTeX source into a DocumentTree with a single line-oriented pass.

Each line is offered to the rules in DISPATCH_RULES, in order; the first rule
that handles it wins and unmatched lines are skipped. All mutable state lives in
a ParseState created per call, so parse_document() is a pure function of its input.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dossier.contexts.parsing.document_tree import DocumentTree, Entry, Section
from dossier.contexts.parsing.inline_cleaner import clean_inline
from dossier.contexts.parsing.latex_patterns import (
    BulletPatterns,
    BulletRegex,
    EntryPatterns,
    EntryRegex,
    HeadingPatterns,
    HeadingRegex,
    PreamblePatterns,
    SectionRegex,
)
from dossier.contexts.parsing.logger import _log_debug, log_parse_failure, log_parse_summary
from dossier.utils.text_processing import collect_brace_arguments, truncate_display

# Physical lines a multi-line \resumeSubheading may span before it is dropped
MAX_COMMAND_LINES = 8


@dataclass
class ParseState:
    """
    Mutable scan state for one parse call.

    Attributes:
        lines: Source split into physical lines
        tree: Tree accumulated so far
        current_section: Insertion target for entries (None before the first section)
        current_entry: Insertion target for bullets and classic subheadings
        inside_heading_block: True between \\begin{center} and \\end{center}
        line_index: Index of the line being dispatched
        consumed: Extra lines swallowed by the current rule (multi-line commands)
    """

    lines: List[str]
    tree: DocumentTree = field(default_factory=DocumentTree)
    current_section: Optional[Section] = None
    current_entry: Optional[Entry] = None
    inside_heading_block: bool = False
    line_index: int = 0
    consumed: int = 0

    @property
    def line(self) -> str:
        return self.lines[self.line_index].strip()


def ensure_entry(state: ParseState) -> Optional[Entry]:
    """
    Return the current entry, creating an empty one in the current section if needed.

    Returns None (content dropped) when no section has started yet.
    """
    if state.current_section is None:
        return None
    if state.current_entry is None:
        state.current_entry = Entry()
        state.current_section.entries.append(state.current_entry)
    return state.current_entry


def add_bullet(state: ParseState, text: str) -> None:
    if not text:
        return
    entry = ensure_entry(state)
    if entry is not None:
        entry.bullets.append(text)


def command_arguments(line: str, command: str, num_args: int) -> Optional[List[str]]:
    """
    Arguments of `command` when the line starts with it, None otherwise.

    The command must not be a prefix of a longer command name, and all
    num_args arguments must be present on the line.
    """
    if not line.startswith(command):
        return None
    rest = line[len(command):]
    if rest[:1].isalpha():
        return None
    args, _ = collect_brace_arguments(rest, 0, num_args)
    if len(args) < num_args:
        return None
    return args


# Dispatch rules: each returns True when it handled the current line


def skip_preamble(state: ParseState) -> bool:
    return state.line.startswith(PreamblePatterns.SKIP_PREFIXES)


def heading_block(state: ParseState) -> bool:
    line = state.line
    if line.startswith(HeadingPatterns.BEGIN_BLOCK):
        state.inside_heading_block = True
        return True
    if line.startswith(HeadingPatterns.END_BLOCK):
        state.inside_heading_block = False
        return True
    if not state.inside_heading_block:
        return False

    text = clean_inline(line)
    if text:
        if not state.tree.name:
            state.tree.name = text
        elif not state.tree.contact:
            state.tree.contact = text
    return True


def heading_commands(state: ParseState) -> bool:
    match = HeadingRegex.NAME_COMMAND.match(state.line)
    if match:
        if not state.tree.name:
            state.tree.name = match.group(1)
        return True
    match = HeadingRegex.CONTACT_COMMAND.match(state.line)
    if match:
        if not state.tree.contact:
            state.tree.contact = match.group(1)
        return True
    return False


def section_start(state: ParseState) -> bool:
    match = SectionRegex.SECTION.match(state.line)
    if not match:
        return False
    args, _ = collect_brace_arguments(state.line, match.end(), 1)
    if not args:
        return False
    state.current_section = Section(title=args[0])
    state.tree.sections.append(state.current_section)
    state.current_entry = None
    return True


def subheading_command(state: ParseState) -> bool:
    """Modern-dialect \\resumeSubheading{heading}{right1}{subheading}{right2}, possibly multi-line."""
    command = EntryPatterns.SUBHEADING_COMMAND
    num_args = EntryPatterns.SUBHEADING_NUM_ARGS
    line = state.line
    if not line.startswith(command) or line[len(command):][:1].isalpha():
        return False

    text = line[len(command):]
    args, end = collect_brace_arguments(text, 0, num_args)
    extra = 0
    last_index = min(len(state.lines), state.line_index + MAX_COMMAND_LINES) - 1
    while len(args) < num_args and state.line_index + extra < last_index:
        next_line = state.lines[state.line_index + extra + 1].strip()
        # A command between arguments ends this one incomplete
        if next_line.startswith("\\") and "{" not in text[end:]:
            break
        extra += 1
        text += "\n" + next_line
        args, end = collect_brace_arguments(text, 0, num_args)

    if len(args) < num_args:
        _log_debug(
            f"Dropped incomplete {command} at line {state.line_index + 1} "
            f"({len(args)}/{num_args} arguments): {truncate_display(line, 60)}"
        )
        return True

    state.consumed = extra
    if state.current_section is None:
        return True

    heading, right_field_1, subheading, right_field_2 = (clean_inline(arg) for arg in args)
    state.current_entry = Entry(
        heading=heading,
        subheading=subheading,
        right_field_1=right_field_1,
        right_field_2=right_field_2,
    )
    state.current_section.entries.append(state.current_entry)
    return True


def classic_heading_line(state: ParseState) -> bool:
    match = EntryRegex.HEADING_LINE.match(state.line)
    if not match:
        return False
    if state.current_section is None:
        return True
    state.current_entry = Entry(
        heading=clean_inline(match.group(1)),
        right_field_1=clean_inline(match.group(2)),
    )
    state.current_section.entries.append(state.current_entry)
    return True


def classic_subheading_line(state: ParseState) -> bool:
    match = EntryRegex.SUBHEADING_LINE.match(state.line)
    if not match:
        return False
    if state.current_entry is not None:
        state.current_entry.subheading = clean_inline(match.group(1))
        state.current_entry.right_field_2 = clean_inline(match.group(2))
    return True


def bullet(state: ParseState) -> bool:
    line = state.line

    command, num_args = BulletPatterns.TITLED_ITEM
    args = command_arguments(line, command, num_args)
    if args is not None:
        title, description = (clean_inline(arg) for arg in args)
        add_bullet(state, f"<b>{title}</b>: {description}")
        return True

    command, num_args = BulletPatterns.ITEM
    args = command_arguments(line, command, num_args)
    if args is not None:
        add_bullet(state, clean_inline(args[0]))
        return True

    match = BulletRegex.SMALL_ITEM.match(line)
    if match:
        add_bullet(state, clean_inline(match.group(1)))
        return True

    if BulletPatterns.TABULAR_MARKER in line:
        return False
    match = BulletRegex.BARE_ITEM.match(line)
    if match:
        add_bullet(state, clean_inline(match.group(1)))
        return True

    return False


DISPATCH_RULES: List[Callable[[ParseState], bool]] = [
    skip_preamble,
    heading_block,
    heading_commands,
    section_start,
    subheading_command,
    classic_heading_line,
    classic_subheading_line,
    bullet,
]


def dispatch_line(state: ParseState) -> None:
    """Offer the current line to each rule until one handles it."""
    if not state.line:
        return
    for rule in DISPATCH_RULES:
        if rule(state):
            return


def parse_document(source: str) -> DocumentTree:
    """
    Parse resume LaTeX source into a DocumentTree.

    Never raises: a line whose dispatch fails unexpectedly is logged and
    skipped, and scanning continues with the next line.

    Args:
        source: LaTeX source text (anything else parses to an empty tree)

    Returns:
        Freshly built DocumentTree

    Example:
        >>> tree = parse_document("\\\\section*{EXPERIENCE}\\n\\\\resumeItem{Shipped it}")
        >>> tree.sections[0].entries[0].bullets
        ['Shipped it']
    """
    if not isinstance(source, str):
        return DocumentTree()

    state = ParseState(lines=source.splitlines())
    while state.line_index < len(state.lines):
        state.consumed = 0
        try:
            dispatch_line(state)
        except Exception:
            log_parse_failure(state.line_index, state.lines[state.line_index])
            state.consumed = 0
        state.line_index += 1 + state.consumed

    log_parse_summary(state.tree, len(state.lines))
    return state.tree
