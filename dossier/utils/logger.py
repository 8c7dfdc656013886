"""
Logger setup shared by the CLI commands.

Library modules only emit through loguru (via contexts/{context}/logger.py
wrappers); sinks are configured here, once per CLI run. Console output goes to
stderr so that stdout stays clean for YAML/HTML/LaTeX the commands print.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from dossier.utils.timestamp import session_stamp

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(logs_root: Path, command: str) -> Path:
    """
    Directory for one CLI run, e.g. outs/logs/export_20261017_142501.

    Args:
        logs_root: Root logs directory (DOSSIER_LOGS_PATH)
        command: CLI command name
    """
    return Path(logs_root) / f"{command}_{session_stamp()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru to a per-session log file (DEBUG) and to stderr.

    Args:
        context_name: Context identifier, used as the log file name ("render" -> render.log)
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level shown on stderr

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=session_log_dir(LOGS_PATH, "export"),
            extra_provenance={"Surface": "browser"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    for line in provenance_lines(extra_provenance):
        logger.info(line)

    return log_file


def reset_logger() -> None:
    """Drop every configured sink and restore loguru's default stderr sink."""
    logger.remove()
    logger.add(sys.stderr)


def provenance_lines(extra_context: Optional[Dict[str, str]] = None) -> List[str]:
    """
    Header lines identifying the run (command line, working directory, Python).

    Args:
        extra_context: Additional key-value pairs appended after the standard ones
    """
    rule = "=" * 80
    lines = [
        rule,
        f"Command: {' '.join(sys.argv)}",
        f"Working directory: {Path.cwd()}",
        f"Python: {sys.version.split()[0]}",
    ]
    lines.extend(f"{key}: {value}" for key, value in (extra_context or {}).items())
    lines.append(rule)
    return lines
