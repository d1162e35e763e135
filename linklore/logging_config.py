"""Centralized logging configuration for linklore."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
) -> None:
    """
    Configure logging for linklore.

    Args:
        level: Logging level or level name (default WARNING)
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=format_string, handlers=[logging.StreamHandler(sys.stderr)], force=True)
