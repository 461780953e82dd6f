"""Logging configuration.

The package logs through module loggers under "revolver". Nothing is
emitted unless configure_logging() is called, and records never go to the
REPL's own terminal device.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "revolver"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level state
_handler: Optional[logging.Handler] = None


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Path] = None,
) -> logging.Handler:
    """Attach a formatted handler to the package logger.

    Replaces any handler installed by a previous call.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        log_file: Append to this file; log to stderr if None

    Returns:
        The installed handler.
    """
    global _handler

    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    close_logging()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)

    _handler = handler
    return handler


def close_logging() -> None:
    """Detach and close the handler installed by configure_logging()."""
    global _handler

    if _handler is not None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None
