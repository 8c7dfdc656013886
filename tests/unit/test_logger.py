"""Unit tests for logger setup utilities."""

import pytest
from loguru import logger

from dossier.contexts.rendering.logger import _log_warning, setup_rendering_logger
from dossier.utils.logger import provenance_lines, reset_logger, session_log_dir, setup_logger


@pytest.fixture(autouse=True)
def restore_sinks():
    yield
    reset_logger()


@pytest.mark.unit
def test_session_log_dir(tmp_path):
    path = session_log_dir(tmp_path, "export")

    assert path.parent == tmp_path
    assert path.name.startswith("export_")


@pytest.mark.unit
def test_provenance_lines():
    lines = provenance_lines({"Surface": "browser"})

    assert lines[0] == lines[-1] == "=" * 80
    assert any(line.startswith("Python: ") for line in lines)
    assert "Surface: browser" in lines


@pytest.mark.unit
def test_setup_logger_writes_file(tmp_path):
    log_file = setup_logger("parse", tmp_path / "session")
    logger.debug("debug detail")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert log_file.name == "parse.log"
    assert "Working directory:" in text
    assert "debug detail" in text


@pytest.mark.unit
def test_context_prefix(tmp_path):
    log_file = setup_rendering_logger(tmp_path)
    _log_warning("surface blocked")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "Surface: browser" in text
    assert "[render] surface blocked" in text
