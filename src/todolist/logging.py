"""Logging configuration for todolist."""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from . import __version__

if TYPE_CHECKING:
    from .config import Settings

LOGGER_NAME = "todolist"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed by the last setup_logging call
_installed_handlers: list[logging.Handler] = []


def level_for(verbose: int) -> int:
    """Map a -v count to a log level (file-only logging runs at INFO)."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    # The TUI owns the terminal, so stderr is only useful when redirected
    if settings.verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))
    return handlers


def _remove_installed(logger: logging.Logger) -> None:
    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()


def setup_logging(settings: Settings) -> logging.Logger | None:
    """Configure the ``todolist`` logger from settings.

    Logging stays off unless ``settings.verbose`` is set or a log file is
    given. Calling this again replaces the handlers from the previous call
    instead of stacking new ones.

    Args:
        settings: Application settings (``verbose`` and ``log_file`` are used)

    Returns:
        The configured logger, or None if logging is off
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_installed(logger)

    handlers = _build_handlers(settings)
    if not handlers:
        return None

    level = level_for(settings.verbose)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed_handlers.append(handler)

    started = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info(
        "todolist %s starting | %s | level=%s | log_file=%s",
        __version__,
        started,
        logging.getLevelName(level),
        settings.log_file or "-",
    )
    return logger
