"""
Session logging for HANDOVER tools.

Guide sessions (e.g. `guide.py browse`) can keep a log of every navigation and
search. Each session gets its own directory under LOGS_PATH, named after the
tool and the start time, holding one log file per context.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

import handover

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(tool_name: str, base_dir: Path = None) -> Path:
    """
    Build a fresh log directory path for one session.

    Args:
        tool_name: Short tool/command name (e.g., "browse")
        base_dir: Parent directory (defaults to LOGS_PATH env variable)

    Returns:
        Path like outs/logs/browse_20261019_101500 (not created yet)
    """
    if base_dir is None:
        base_dir = LOGS_PATH
    return Path(base_dir) / f"{tool_name}_{datetime.now():%Y%m%d_%H%M%S}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: Optional[str] = "WARNING",
) -> Path:
    """
    Route loguru output for a session to a log file (and optionally stderr).

    Replaces any existing handlers. The file records everything from DEBUG up,
    so misses and transitions that are only logged at debug level are kept.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "nav")
        log_dir: Directory for this session (created if missing)
        extra_provenance: Additional key-value pairs for the session header
        console_level: Minimum level echoed to stderr, or None for file only.
                       stderr keeps log lines out of the guide text on stdout

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")

    if console_level is not None:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write a session header: handover version, command line, working directory
    and Python version, plus any extra context.

    Logged at DEBUG so it lands in the file without cluttering the console.
    """
    logger.debug("=" * 80)
    logger.debug(f"handover {handover.__version__}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
