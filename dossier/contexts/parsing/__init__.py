"""
Parsing Context

Responsibilities:
- Converts resume LaTeX source (classic and modern template dialects) into a DocumentTree
- Normalizes inline markup inside field values to <b>/<i> HTML

Owns: DocumentTree data model, line-dispatch parser, inline cleaner
Never: Renders output or touches storage
"""

from dossier.contexts.parsing.document_tree import DocumentTree, Entry, Section
from dossier.contexts.parsing.inline_cleaner import clean_inline
from dossier.contexts.parsing.parser import parse_document

__all__ = [
    "DocumentTree",
    "Section",
    "Entry",
    "clean_inline",
    "parse_document",
]
