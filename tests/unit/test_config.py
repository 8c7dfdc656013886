"""Unit tests for render configuration loading."""

import pytest
from omegaconf.errors import ReadonlyConfigError

from dossier import config as dossier_config
from dossier.config import load_render_config


@pytest.fixture(autouse=True)
def no_environment_overrides(monkeypatch):
    monkeypatch.setattr(dossier_config, "RENDER_CONFIG_PATH", None)
    monkeypatch.setattr(dossier_config, "PRINT_DELAY", None)


@pytest.mark.unit
def test_defaults():
    config = load_render_config()

    assert config.placeholders.name == "YOUR NAME"
    assert config.placeholders.contact == "email@example.com | Phone | Location"
    assert config.export.print_delay_seconds == 0.5
    assert config.page.size == "letter"


@pytest.mark.unit
def test_override_file_merges(tmp_path):
    override = tmp_path / "render.yaml"
    override.write_text("placeholders:\n  name: Your Name Here\nexport:\n  title_suffix: CV\n")

    config = load_render_config(override)

    assert config.placeholders.name == "Your Name Here"
    assert config.placeholders.contact == "email@example.com | Phone | Location"
    assert config.export.title_suffix == "CV"
    assert config.export.print_delay_seconds == 0.5


@pytest.mark.unit
def test_override_from_environment(tmp_path, monkeypatch):
    override = tmp_path / "render.yaml"
    override.write_text("colors:\n  text: '#000000'\n")
    monkeypatch.setattr(dossier_config, "RENDER_CONFIG_PATH", str(override))

    assert load_render_config().colors.text == "#000000"


@pytest.mark.unit
def test_missing_override_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Render config not found"):
        load_render_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_print_delay_environment(monkeypatch):
    monkeypatch.setattr(dossier_config, "PRINT_DELAY", "2")

    assert load_render_config().export.print_delay_seconds == 2.0


@pytest.mark.unit
def test_config_is_read_only():
    config = load_render_config()

    with pytest.raises(ReadonlyConfigError):
        config.placeholders.name = "changed"
