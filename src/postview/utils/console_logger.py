from __future__ import annotations

import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Loggers of libraries that are chatty at INFO.
_NOISY = ("httpx", "httpcore")


def level_from_name(name: str | int) -> int:
    """Map ``"DEBUG"``/``"info"``/``20`` to a logging level, WARNING if unknown."""
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def ensure_console_logger(
    logger: logging.Logger,
    handler_name: str,
    *,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a named console handler to *logger* unless one is already there.

    Calling it again only adjusts the level, so the CLI callback and the GUI
    entry point can both call it without duplicating output.
    """
    numeric = level_from_name(level)
    logger.setLevel(numeric)
    for noisy in _NOISY:
        logging.getLogger(noisy).setLevel(max(numeric, logging.WARNING))

    for existing in logger.handlers:
        if existing.get_name() == handler_name:
            return existing

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(handler_name)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return handler
