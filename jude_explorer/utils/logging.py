"""Logging helpers for jude_explorer.

Library modules only ever call :func:`get_logger`; the launcher
(``run_app.py``) calls :func:`configure_logging` once at start-up.
"""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_ROOT_NAME = "jude_explorer"


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Attach a stderr handler to the ``jude_explorer`` logger.

    Parameters
    ----------
    level : str or int, optional
        Logging level. Defaults to the ``JUDE_LOG_LEVEL`` environment
        variable, or ``"INFO"``.
    force : bool
        Replace existing handlers instead of keeping the first one.
    """
    if level is None:
        level = os.environ.get("JUDE_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(_ROOT_NAME)
    logger.setLevel(level)

    if force:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
    elif any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=DEFAULT_FMT, datefmt=DEFAULT_DATEFMT))
    logger.addHandler(console)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``logging.getLogger(name)``, defaulting to the package logger."""
    return logging.getLogger(name or _ROOT_NAME)
