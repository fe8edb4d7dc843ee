"""
Shared utilities for HANDOVER.

Common functionality used across contexts:
- Session log directories and logger setup
"""

from handover.utils.logger import log_provenance, session_log_dir, setup_logger

__all__ = ["log_provenance", "session_log_dir", "setup_logger"]
