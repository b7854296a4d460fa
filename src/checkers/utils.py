"""
Utilities Module for the checkers engine
Logging setup and parsing helpers shared by the front-ends.
"""

import re
import sys
import logging
from pathlib import Path
from typing import Optional, Union

from .config import LOG_FORMAT, LOG_FORMAT_DETAILED, LOG_DATE_FORMAT
from .types import Position


# =============================================================================
# LOGGING UTILITIES
# =============================================================================

def setup_logger(
    name: str = "checkers",
    log_file: Optional[str] = None,
    level: Union[int, str] = logging.INFO
) -> logging.Logger:
    """
    Setup a logger with console and optional file output.
    Uses centralized log format configuration.

    Args:
        name: Logger name
        log_file: Path to log file (optional)
        level: Logging level (number or name such as "DEBUG")

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    # Console handler - uses simpler format
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler - uses detailed format
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_format = logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT)
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


# =============================================================================
# INPUT UTILITIES
# =============================================================================

_SQUARE_RE = re.compile(r"^\s*\(?\s*(\d)\s*[, ]\s*(\d)\s*\)?\s*$")


def parse_square(text: str) -> Optional[Position]:
    """
    Parse a square typed as "row col", "row,col" or "(row, col)".

    Returns:
        (row, col) tuple, or None if the text is not a square
    """
    match = _SQUARE_RE.match(text)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))
