"""Logging configuration for linespin.

Library modules obtain loggers through get_logger(__name__) and only emit
DEBUG records; the CLI calls setup_logging() once per command to attach a
stderr handler with a level derived from its --verbose/--quiet flags.
"""

import logging
import sys

PACKAGE_LOGGER = "linespin"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the package logger.

    Verbose takes precedence over quiet. Calling this again replaces the
    previously installed handler instead of adding a second one.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log warnings and errors.

    Returns:
        The configured package logger.
    """
    global _handler

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _handler.setLevel(level)

    logger.addHandler(_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
