"""
Logging for the oceanvision package.

Every module logs through ``get_logger(__name__)``; records go to stderr
under the ``oceanvision`` logger, which starts at WARNING until the CLI
applies ``--verbose`` or ``[logging].level``.
"""

import logging
import sys

PACKAGE_NAME = "oceanvision"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, installing the package handler first."""
    _ensure_configured()
    return logging.getLogger(name)


def _ensure_configured() -> None:
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    _configured = True


def set_level(name: str) -> None:
    """
    Set the package log level from a name such as "DEBUG" or "info".

    Unknown names fall back to WARNING.
    """
    _ensure_configured()
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.getLogger(PACKAGE_NAME).setLevel(level)
