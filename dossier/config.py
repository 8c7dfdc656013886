"""
Configuration

Environment-driven settings (loaded from .env via python-dotenv) and the
OmegaConf render configuration shared by the preview and export renderers.

Environment variables:
    DOSSIER_LOGS_PATH        Directory for CLI log sessions (default: outs/logs)
    DOSSIER_DATA_PATH        Directory for saved resumes (default: data)
    DOSSIER_STORAGE_BACKEND  "local" or "sqlite" (default: local)
    DOSSIER_RENDER_CONFIG    Optional YAML file overriding render_defaults.yaml
    DOSSIER_PRINT_DELAY      Seconds to wait before printing an export
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

LOGS_PATH = Path(os.getenv("DOSSIER_LOGS_PATH", "outs/logs"))
DATA_PATH = Path(os.getenv("DOSSIER_DATA_PATH", "data"))
STORAGE_BACKEND = os.getenv("DOSSIER_STORAGE_BACKEND", "local")
RENDER_CONFIG_PATH = os.getenv("DOSSIER_RENDER_CONFIG")
PRINT_DELAY = os.getenv("DOSSIER_PRINT_DELAY")

RENDER_DEFAULTS_PATH = Path(__file__).parent / "contexts" / "rendering" / "render_defaults.yaml"


def load_render_config(override_path: Optional[Union[str, Path]] = None) -> DictConfig:
    """
    Load render configuration: packaged defaults merged with an optional override.

    Later sources win: render_defaults.yaml < override file < DOSSIER_PRINT_DELAY.

    Args:
        override_path: YAML file with partial overrides (defaults to DOSSIER_RENDER_CONFIG)

    Returns:
        Read-only DictConfig with placeholders, fonts, page, colors, export keys

    Raises:
        FileNotFoundError: If the override file does not exist
    """
    config = OmegaConf.load(RENDER_DEFAULTS_PATH)

    if override_path is None:
        override_path = RENDER_CONFIG_PATH
    if override_path:
        override_path = Path(override_path)
        if not override_path.exists():
            raise FileNotFoundError(f"Render config not found: {override_path}")
        config = OmegaConf.merge(config, OmegaConf.load(override_path))

    if PRINT_DELAY is not None:
        config = OmegaConf.merge(config, {"export": {"print_delay_seconds": float(PRINT_DELAY)}})

    OmegaConf.set_readonly(config, True)
    return config
