"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - The package logger carries a ``NullHandler`` so library use stays silent
      until an application configures logging.
    - :func:`configure` is idempotent; repeated calls never stack handlers.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging

__all__ = ["PACKAGE_LOGGER", "get_logger", "configure"]

PACKAGE_LOGGER = "randomdata"
_HANDLER_NAME = "randomdata-cli"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger for module ``name``."""

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger when ``verbose`` is set.

    Any handler installed by an earlier call is replaced, so the handler always
    writes to the current ``sys.stderr``.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(handler)
    if not verbose:
        logger.setLevel(logging.NOTSET)
        return logger

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
