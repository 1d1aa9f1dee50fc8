"""Logging setup for the ``gmocoin`` logger tree.

Only the package logger is touched; the root logger and handlers installed by
an embedding application are left alone.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

LOGGER_NAME = "gmocoin"
LOG_LEVEL_ENV = "GMOCOIN_LOG_LEVEL"
LOG_FILE_NAME = "gmocoin.log"

_OWNED = "_gmocoin_owned"


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {name!r}")
    return resolved


def configure_logging(log_dir: Path | None = None, level: str | int | None = None) -> logging.Logger:
    """Send ``gmocoin.*`` records to stderr and, with ``log_dir``, a rotating file.

    Calling it again replaces the handlers from the previous call.

    Raises:
        ValueError: If the level (argument or ``GMOCOIN_LOG_LEVEL``) is unknown
    """
    resolved = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)
    logger.propagate = False

    for handler in logger.handlers[:]:
        if getattr(handler, _OWNED, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # stderr keeps command output on stdout parseable
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_dir / LOG_FILE_NAME,
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        setattr(handler, _OWNED, True)
        handler.setLevel(resolved)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
