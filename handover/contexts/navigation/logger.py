"""
Navigation context logger.

Provides logging interface for navigation context with automatic [nav] prefix.
All navigation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from handover.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[nav]"


def setup_navigation_logger(log_dir: Path, catalog_path: Optional[Path] = None) -> Path:
    """
    Setup logger for navigation context.

    Args:
        log_dir: Directory for this browsing session
        catalog_path: Catalog file in use, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from handover.contexts.navigation.logger import setup_navigation_logger

        log_file = setup_navigation_logger(Path("outs/logs/browse_20261019"))
    """
    return _setup_logger(
        context_name="nav",
        log_dir=log_dir,
        extra_provenance={"Catalog": catalog_path or "bundled default"},
    )


# Wrapper functions with automatic [nav] prefix


def _log_info(message: str) -> None:
    """Log info message with [nav] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [nav] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level navigation logging helpers


def log_catalog_loaded(config_path: Path, section_count: int, landing: str) -> None:
    """Log a successfully loaded catalog."""
    _log_info(f"Loaded {section_count} sections from {config_path}")
    _log_debug(f"Landing section: {landing}")


def log_navigation(previous: str, current: str) -> None:
    """Log a direct transition between sections."""
    if previous == current:
        _log_debug(f"Stayed on '{current}'")
    else:
        _log_debug(f"Navigated '{previous}' -> '{current}'")


def log_resolution(query: str, match) -> None:
    """
    Log the outcome of a search resolution.

    Args:
        query: Raw query as typed
        match: SectionMatch, or None on a miss
    """
    if match is None:
        # A miss is a normal outcome
        _log_debug(f'No section matches "{query}"')
    else:
        _log_debug(
            f'"{query}" resolved to \'{match.section_id.value}\' '
            f"({match.rule.value}: {match.matched_text})"
        )
