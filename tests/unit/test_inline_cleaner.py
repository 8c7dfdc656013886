"""
Unit tests for the inline text cleaner.

Tests LaTeX inline markup -> <b>/<i> HTML conversion in
dossier.contexts.parsing.inline_cleaner.
"""

import pytest

from dossier.contexts.parsing.inline_cleaner import clean_inline

IDEMPOTENCE_SAMPLES = [
    r"\textbf{Acme} \emph{Corp}",
    r"\textbf{\Huge \scshape Jane Doe} \\ \vspace{1pt}",
    r"\small 555-0100 $|$ \href{mailto:a@b.c}{\underline{a@b.c}} $|$ Berlin",
    r"R\&D at 40\% \$5 \#1 snake\_case",
    r"\textbf{open {braces} \textit{nested \textbf{deep}}}",
    r"\textbf{unclosed",
    r"\\$|$ \$|\$ stray \ backslash",
    "<b>already</b> <i>clean</i>",
    r"x \sm{}all Jane",
    r"a \hf{}ill b \\{}\\ c",
    "",
    "   ",
]


@pytest.mark.unit
class TestCleanInline:
    """Tests for clean_inline transformations."""

    def test_bold(self):
        assert clean_inline(r"\textbf{Acme Corp}") == "<b>Acme Corp</b>"

    def test_italic_and_emph(self):
        assert clean_inline(r"\textit{Engineer} and \emph{lead}") == "<i>Engineer</i> and <i>lead</i>"

    def test_nested_markup(self):
        assert clean_inline(r"\textbf{a \textit{b}}") == "<b>a <i>b</i></b>"

    def test_underline_unwrapped(self):
        assert clean_inline(r"\underline{portfolio}") == "portfolio"

    def test_href_keeps_visible_text(self):
        assert clean_inline(r"\href{https://github.com/jane}{github.com/jane}") == "github.com/jane"

    def test_contact_line(self):
        line = r"\small 555-0100 $|$ \href{mailto:a@b.c}{\underline{a@b.c}} $|$ Berlin"
        assert clean_inline(line) == "555-0100 | a@b.c | Berlin"

    def test_sizing_inside_bold(self):
        assert clean_inline(r"\textbf{\Huge \scshape Jane Doe} \\ \vspace{1pt}") == "<b>Jane Doe</b>"

    def test_spacing_commands_removed(self):
        assert clean_inline(r"Left\hspace{4pt}Right \vspace*{-2pt}") == "LeftRight"

    def test_line_break_removed(self):
        assert clean_inline(r"first \\ second") == "first second"

    def test_escaped_specials(self):
        assert clean_inline(r"R\&D at 40\% for \$5") == "R&D at 40% for $5"

    def test_command_rejoined_by_brace_removal(self):
        assert clean_inline(r"x \sm{}all Jane") == "x Jane"
        assert clean_inline(r"a \hf{}ill b") == "a b"

    def test_braces_stripped(self):
        assert clean_inline("{PyTorch} and {JAX}") == "PyTorch and JAX"

    def test_whitespace_trimmed_and_collapsed(self):
        assert clean_inline("  Acme \n   Corp  ") == "Acme Corp"

    def test_plain_text_unchanged(self):
        assert clean_inline("2020–2022") == "2020–2022"

    def test_empty_and_non_string(self):
        assert clean_inline("") == ""
        assert clean_inline(None) == ""
        assert clean_inline(42) == ""

    @pytest.mark.parametrize("sample", IDEMPOTENCE_SAMPLES)
    def test_idempotent(self, sample):
        once = clean_inline(sample)
        assert clean_inline(once) == once
