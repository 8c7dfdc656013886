"""
Integration test for the resume studio CLI.
Tests: new -> parse / preview / export, save -> load, error exits.
"""

import pytest
from typer.testing import CliRunner

from dossier import cli
from dossier.contexts import storage
from dossier.contexts.rendering import export
from dossier.utils.logger import reset_logger

runner = CliRunner()

SOURCE = "\n".join([
    r"\name{Jane Doe}",
    r"\contact{jane@example.com}",
    r"\section{Skills}",
    r"\resumeItemWithTitle{Languages}{Python \& Go}",
])


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "resume.tex"
    path.write_text(SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    path = tmp_path / "data"
    monkeypatch.setattr(storage, "DATA_PATH", path)
    return path


@pytest.fixture
def export_env(tmp_path, monkeypatch):
    """Route export logs to tmp_path and restore loguru sinks afterwards."""
    monkeypatch.setattr(cli, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setattr(export.webbrowser, "open_new_tab", lambda url: False)
    yield tmp_path
    reset_logger()


@pytest.mark.integration
def test_no_command_shows_help():
    """Test that running without a command prints help."""
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert "parse" in result.output
    assert "export" in result.output


@pytest.mark.integration
def test_new_writes_template(tmp_path):
    """Test writing a starter template to a file."""
    output = tmp_path / "starter.tex"
    result = runner.invoke(cli.app, ["new", "--template", "modern", "--output", str(output)])

    assert result.exit_code == 0
    assert r"\resumeSubheading" in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_new_unknown_template():
    """Test rejecting an unknown template name."""
    result = runner.invoke(cli.app, ["new", "-t", "fancy"])

    assert result.exit_code == 1
    assert "Unknown template" in result.output


@pytest.mark.integration
def test_parse_prints_yaml(resume_file):
    """Test printing the document tree."""
    result = runner.invoke(cli.app, ["parse", str(resume_file)])

    assert result.exit_code == 0
    assert "name: Jane Doe" in result.output
    assert "title: Skills" in result.output
    assert "<b>Languages</b>: Python & Go" in result.output


@pytest.mark.integration
def test_parse_missing_file(tmp_path):
    """Test the error exit for a missing source file."""
    result = runner.invoke(cli.app, ["parse", str(tmp_path / "missing.tex")])

    assert result.exit_code == 1
    assert "file not found" in result.output


@pytest.mark.integration
def test_preview_writes_fragment(resume_file, tmp_path):
    """Test writing the preview fragment."""
    output = tmp_path / "preview.html"
    result = runner.invoke(cli.app, ["preview", str(resume_file), "-o", str(output)])

    assert result.exit_code == 0
    html = output.read_text(encoding="utf-8")
    assert '<h1 class="dossier-name">Jane Doe</h1>' in html
    assert "<b>Languages</b>: Python &amp; Go" in html


@pytest.mark.integration
def test_export_writes_document(resume_file, export_env):
    """Test exporting to a browser surface in a chosen directory."""
    exports = export_env / "exports"

    result = runner.invoke(cli.app, ["export", str(resume_file), "--dir", str(exports), "--delay", "0"])

    assert result.exit_code == 0
    files = list(exports.glob("resume_*.html"))
    assert len(files) == 1
    assert "<title>Jane Doe - Resume</title>" in files[0].read_text(encoding="utf-8")
    assert "Could not open the print dialog" in result.output
    assert list((export_env / "logs").glob("export_*/render.log"))


@pytest.mark.integration
def test_export_blocked_surface(resume_file, export_env, monkeypatch):
    """Test that a blocked surface warns the user and exits with an error."""
    monkeypatch.setattr(cli, "open_browser_surface", lambda directory: None)

    result = runner.invoke(cli.app, ["export", str(resume_file), "--delay", "0"])

    assert result.exit_code == 1
    assert "Warning:" in result.output


@pytest.mark.integration
@pytest.mark.parametrize("backend", ["local", "sqlite"])
def test_save_then_load(resume_file, data_dir, backend):
    """Test storing a resume and reading it back."""
    saved = runner.invoke(
        cli.app, ["save", "jane", str(resume_file), "--title", "Backend CV", "--backend", backend]
    )
    assert saved.exit_code == 0
    assert "Saved 'Backend CV' for jane" in saved.output

    loaded = runner.invoke(cli.app, ["load", "jane", "--backend", backend])
    assert loaded.exit_code == 0
    assert SOURCE in loaded.output


@pytest.mark.integration
def test_load_nothing_saved(data_dir):
    """Test the error exit when the user has no saved resume."""
    result = runner.invoke(cli.app, ["load", "nobody", "-b", "local"])

    assert result.exit_code == 1
    assert "No saved resume for nobody" in result.output


@pytest.mark.integration
def test_unknown_backend(resume_file, data_dir):
    """Test rejecting an unknown storage backend."""
    result = runner.invoke(cli.app, ["save", "jane", str(resume_file), "-b", "cloud"])

    assert result.exit_code == 1
    assert "Unknown storage backend" in result.output
