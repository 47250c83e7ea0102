"""
Centralized logging configuration for Garten.

Logs INFO and DEBUG to stdout, WARNING and ERROR to stderr.
Log level is configurable via LOG_LEVEL environment variable.
"""

import logging
import sys
from garten.config import LOG_LEVEL


class LevelFilter(logging.Filter):
    """Filter log records by level range."""

    def __init__(self, level_min: int, level_max: int):
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max

    def filter(self, record: logging.LogRecord) -> bool:
        return self.level_min <= record.levelno <= self.level_max


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configure the garten logger with split stdout/stderr output.

    Args:
        level: Logger level name (defaults to LOG_LEVEL)

    Returns:
        Logger instance for garten
    """
    logger = logging.getLogger("garten")
    logger.setLevel(level)

    # Keep uvicorn's root handlers from printing our records twice
    logger.propagate = False

    # Reload safety
    logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(LevelFilter(logging.DEBUG, logging.INFO))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    # Format: "2025-01-15 14:30:45 - garten - INFO - Message"
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

    return logger


# Global logger instance
logger = setup_logging()
