"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "solanum"
_LOG_FILE = "solanum.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

# Three threads log concurrently, so every record names its thread.
_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(threadName)-16s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Return the root ``solanum`` logger, initialising it on first call.

    Modules log through ``logging.getLogger(__name__)``; their records
    propagate here. The terminal belongs to the renderer, so only a file
    handler is installed. Thread start/stop records are DEBUG, so the file
    keeps everything down to that level.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    if not _has_file_handler(logger):
        logger.addHandler(_file_handler(Path(user_log_dir(_APP_NAME))))

    _logger = logger
    return _logger


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        for handler in logger.handlers
    )


def _file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler
