"""Logging utilities for the crossword engine and its CLI."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "crossgrid"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Send log records to ``stream`` (stderr by default) with a compact format.

    Navigation runs once per keystroke, so per-event transitions are logged at
    ``DEBUG`` and stay silent under the default level. Calling this again
    replaces the previous handler instead of stacking another one.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crossgrid`` namespace.

    Names outside the namespace (for example ``__main__``) are nested below it.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
