"""Logging setup for the CLI and for applications embedding the adapters.

``VENUEKIT_LOG_LEVEL`` sets the root level. ``VENUEKIT_LOG_LEVEL__<NAME>``
sets the level of one venuekit logger, where ``<NAME>`` is the dotted module
path below ``venuekit`` written with ``__``: ``VENUEKIT_LOG_LEVEL__EXCHANGES__NASH=DEBUG``
traces the Nash adapter only.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

LOG_LEVEL_ENV = "VENUEKIT_LOG_LEVEL"
LOG_FILE_NAME = "venuekit.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(value: str, default: int = logging.INFO) -> int:
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def logger_levels(environ: dict[str, str] | None = None) -> dict[str, int]:
    """Per-logger levels from ``VENUEKIT_LOG_LEVEL__<NAME>`` variables."""
    environ = dict(os.environ) if environ is None else environ
    prefix = f"{LOG_LEVEL_ENV}__"
    levels = {}
    for key, value in environ.items():
        if not key.startswith(prefix):
            continue
        parts = [part.lower() for part in key[len(prefix) :].split("__") if part]
        if parts:
            levels[".".join(["venuekit", *parts])] = _level(value)
    return levels


def configure_logging(log_dir: Path | None = None) -> None:
    """Configure a console handler and, given a directory, a rotating ``venuekit.log``.

    Handlers carry no level of their own so that a logger raised above the
    root level by ``VENUEKIT_LOG_LEVEL__<NAME>`` still reaches them.
    """
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(_level(os.environ.get(LOG_LEVEL_ENV, "INFO")))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name, level in logger_levels().items():
        logging.getLogger(name).setLevel(level)
