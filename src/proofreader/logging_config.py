"""Logging setup for the proofreader command line."""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "proofreader"

DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"
# Per-unit analysis runs on pool threads; show which one at DEBUG
DEBUG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the ``proofreader`` logger.

    Records go to stderr so printed reports on stdout stay parseable.
    Calling again without ``force`` only changes the level.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Also write records to this file
        stream: Console stream (stderr if None)
        force: Replace handlers installed by an earlier call

    Returns:
        The package logger
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.propagate = False

    if logger.handlers and not force:
        for handler in logger.handlers:
            handler.setLevel(numeric_level)
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DEBUG_FORMAT if numeric_level <= logging.DEBUG else DEFAULT_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
