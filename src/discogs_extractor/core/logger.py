"""
Logging for the Discogs Metadata Extractor.

All records go through the ``discogs_extractor`` logger to stderr. Stdout is
reserved for notes rendered to the terminal.
"""

import logging
import sys
from typing import Optional, TextIO

from .config import LOGGING_CONFIG

ROOT_LOGGER_NAME = "discogs_extractor"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Third-party loggers that are only useful when something is badly wrong
NOISY_LOGGERS = ("urllib3", "requests")


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (any case) to its number, defaulting to INFO."""
    name = (level or LOGGING_CONFIG["LEVEL"]).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Calling this again replaces the previous handler.

    Args:
        level: Level name; falls back to DISCOGS_EXTRACTOR_LOG_LEVEL
        enable_console: Attach a stream handler
        stream: Destination for records (default: stderr)

    Returns:
        The package logger
    """
    log_level = resolve_level(level)
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    if enable_console:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    return package_logger


def set_level(level: str) -> None:
    """Change the level of an already configured package logger (e.g. for --verbose)."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """Child logger ``discogs_extractor.<name>``; configures the package logger on first use."""
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        setup_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
