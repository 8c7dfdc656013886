"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[parse]"


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_parse_failure(line_index: int, line: str) -> None:
    """Log an unexpected exception raised while dispatching a line (with traceback)."""
    logger.opt(exception=True).error(
        f"{CONTEXT_PREFIX} Skipping line {line_index + 1} after unexpected error: {line!r}"
    )


def log_parse_summary(tree, num_lines: int) -> None:
    """Log per-call statistics for a finished parse."""
    _log_debug(
        f"Parsed {num_lines} lines into {len(tree.sections)} sections, "
        f"{tree.entry_count} entries, {tree.bullet_count} bullets"
    )
