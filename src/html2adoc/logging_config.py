"""Logging setup for html2adoc."""

import logging
import sys
from typing import Optional, TextIO

from .models.config import Html2AdocConfig

LOGGER_NAME = "html2adoc"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    force: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Set up the html2adoc logger.

    Converted AsciiDoc goes to stdout, so the console handler writes to
    stderr unless another stream is given. The log file, when set, gets
    timestamped records.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging output
        format_string: Optional format for console records
        force: If True, reconfigure even if handlers exist
        stream: Console stream (stderr if None)

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    if logger.handlers and not force:
        return logger

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def configure_logging(config: Html2AdocConfig, stream: Optional[TextIO] = None) -> logging.Logger:
    """Apply the logging section of a loaded configuration, replacing earlier handlers."""
    return setup_logging(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
        force=True,
        stream=stream,
    )
