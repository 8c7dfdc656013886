"""
LaTeX Pattern Constants

Centralized LaTeX literals and regexes recognised by the resume parser.
Organized into frozen dataclasses by category for immutability and clear grouping.

Two template dialects are covered:
- classic: \\name{...}, \\contact{...}, "\\textbf{X} \\hfill Y" line pairs, itemize
- modern: center heading block, \\resumeSubheading{4 args}, \\resumeItem, \\resumeItemWithTitle
"""

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PreamblePatterns:
    """
    Line prefixes that never carry resume content.

    Lines starting with any of these are skipped before every other rule.
    """
    SKIP_PREFIXES: Tuple[str, ...] = (
        '%',
        r'\documentclass',
        r'\usepackage',
        r'\pagestyle',
        r'\fancyhf',
        r'\fancyfoot',
        r'\renewcommand',
        r'\newcommand',
        r'\def',
        r'\setlength',
        r'\addtolength',
        r'\titleformat',
        r'\urlstyle',
        r'\raggedbottom',
        r'\raggedright',
        r'\input',
        r'\pdfgentounicode',
        r'\begin{itemize}',
        r'\end{itemize}',
        r'\resumeSubHeadingListStart',
        r'\resumeSubHeadingListEnd',
        r'\resumeItemListStart',
        r'\resumeItemListEnd',
        r'\begin{document}',
        r'\end{document}',
    )


@dataclass(frozen=True)
class HeadingPatterns:
    """
    Heading (name + contact) patterns.

    The modern dialect wraps name and contact in a center block; the classic
    dialect uses two direct commands.
    """
    BEGIN_BLOCK: str = r'\begin{center}'
    END_BLOCK: str = r'\end{center}'


class HeadingRegex:
    """Compiled regexes for classic-dialect heading commands."""
    NAME_COMMAND = re.compile(r'^\\name\{(.*)\}\s*$')
    CONTACT_COMMAND = re.compile(r'^\\contact\{(.*)\}\s*$')


class SectionRegex:
    """Compiled regex for section starts (numbered or starred); the title is brace-collected after the match."""
    SECTION = re.compile(r'^\\section\*?(?=\{)')


@dataclass(frozen=True)
class EntryPatterns:
    """Modern-dialect entry macro (heading, right field, subheading, right field)."""
    SUBHEADING_COMMAND: str = r'\resumeSubheading'
    SUBHEADING_NUM_ARGS: int = 4


class EntryRegex:
    """Compiled regexes for classic-dialect entry line pairs."""
    # \textbf{Acme Corp} \hfill Remote
    HEADING_LINE = re.compile(r'^\\textbf\{(.*)\}\s*\\hfill\s*(.*)$')
    # \textit{Engineer} \hfill 2020--2022
    SUBHEADING_LINE = re.compile(r'^\\textit\{(.*)\}\s*\\hfill\s*(.*)$')


@dataclass(frozen=True)
class BulletPatterns:
    """Bullet macros as (command, number of arguments)."""
    TITLED_ITEM: Tuple[str, int] = (r'\resumeItemWithTitle', 2)
    ITEM: Tuple[str, int] = (r'\resumeItem', 1)
    # Tabular rows inside \item lines are layout scaffolding, not bullets
    TABULAR_MARKER: str = 'tabular'


class BulletRegex:
    """Compiled regexes for generic list items, tried in declaration order."""
    SMALL_ITEM = re.compile(r'^\\item\s*\\small\s*\{(.*)\}\s*$')
    # \item Text, \item[--] Text
    BARE_ITEM = re.compile(r'^\\item(?![A-Za-z])\s*(?:\[[^\]]*\])?\s*(.*)$')
