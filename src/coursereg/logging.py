"""Logging configuration for coursereg.

Everything under the ``coursereg`` logger goes to one rotating log file.
The interactive shell owns the terminal, so console output is opt-in.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "coursereg"
LOG_DIR_ENV = "COURSEREG_LOG_DIR"
LOG_LEVEL_ENV = "COURSEREG_LOG_LEVEL"

LOG_DIR = "logs"
LOG_FILE = "coursereg.log"
MAX_BYTES = 1024 * 1024  # 1MB
BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(verbose: bool = False) -> int:
    """Pick the log level: DEBUG when verbose, else $COURSEREG_LOG_LEVEL, else INFO."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, "INFO")
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_dir: str | Path | None = None,
    verbose: bool = False,
    console: bool = False,
) -> logging.Logger:
    """Send coursereg logs to ``<log_dir>/coursereg.log``.

    Args:
        log_dir: Directory for the log file. Defaults to $COURSEREG_LOG_DIR,
                 then ./logs. Created if missing.
        verbose: Log at DEBUG regardless of $COURSEREG_LOG_LEVEL.
        console: Also write log records to stderr.

    Returns:
        The root coursereg logger.
    """
    log_path = Path(log_dir or os.environ.get(LOG_DIR_ENV, LOG_DIR)) / LOG_FILE
    log_path.parent.mkdir(parents=True, exist_ok=True)

    level = resolve_level(verbose)
    logger = reset_logging()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging to %s at %s", log_path, logging.getLevelName(level))
    return logger


def reset_logging() -> logging.Logger:
    """Detach and close every handler on the coursereg logger.

    Returns:
        The root coursereg logger, left with no handlers and level NOTSET.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component, e.g. ``get_logger("shell")``."""
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
