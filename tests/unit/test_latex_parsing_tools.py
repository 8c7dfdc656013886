"""
Unit tests for LaTeX parsing tools.

Tests command rewriting utilities in dossier.utils.latex_parsing_tools.
"""

import pytest

from dossier.utils.latex_parsing_tools import (
    replace_command,
    replace_command_with_argument,
    strip_formatting,
)


@pytest.mark.unit
class TestReplaceCommand:
    """Tests for replace_command function."""

    def test_unwrap(self):
        assert replace_command(r"\textbf{bold text}", "textbf") == "bold text"

    def test_prefix_suffix(self):
        result = replace_command(r"Normal \textbf{bold} text", "textbf", "<b>", "</b>")
        assert result == "Normal <b>bold</b> text"

    def test_nested_other_command_kept(self):
        result = replace_command(r"\textbf{text \textit{nested} more}", "textbf")
        assert result == r"text \textit{nested} more"

    def test_nested_same_command(self):
        result = replace_command(r"\textbf{a \textbf{b}}", "textbf", "<b>", "</b>")
        assert result == "<b>a <b>b</b></b>"

    def test_multiple_occurrences(self):
        result = replace_command(r"\emph{one} and \emph{two}", "emph", "<i>", "</i>")
        assert result == "<i>one</i> and <i>two</i>"

    def test_unmatched_occurrence_left_alone(self):
        result = replace_command(r"\textbf{open \textbf{done}", "textbf", "<b>", "</b>")
        assert result == r"\textbf{open <b>done</b>"

    def test_no_occurrence(self):
        assert replace_command("plain", "textbf") == "plain"


@pytest.mark.unit
class TestReplaceCommandWithArgument:
    """Tests for replace_command_with_argument function."""

    def test_href_keeps_visible_text(self):
        result = replace_command_with_argument(r"see \href{https://x.dev}{my site}", "href", 2, 1)
        assert result == "see my site"

    def test_missing_argument_left_alone(self):
        text = r"\href{https://x.dev}"
        assert replace_command_with_argument(text, "href", 2, 1) == text

    def test_longer_command_name_not_matched(self):
        text = r"\hrefx{a}{b}"
        assert replace_command_with_argument(text, "href", 2, 1) == text

    def test_nested_markup_in_kept_argument(self):
        result = replace_command_with_argument(r"\href{mailto:a@b.c}{\underline{a@b.c}}", "href", 2, 1)
        assert result == r"\underline{a@b.c}"


@pytest.mark.unit
class TestStripFormatting:
    """Tests for strip_formatting function."""

    def test_removes_commands_and_trailing_space(self):
        assert strip_formatting(r"\Huge \scshape Jane Doe", ["Huge", "scshape"]) == "Jane Doe"

    def test_longer_command_not_stripped(self):
        assert strip_formatting(r"\smallskip text", ["small"]) == r"\smallskip text"

    def test_command_inside_text(self):
        assert strip_formatting(r"Jane \small Doe", ["small"]) == "Jane Doe"
