"""Logging setup for the quadratic solver.

Every module logs through ``get_logger(<module>)``, a child of the
``quadratic`` logger. Nothing is printed until ``setup_logging`` attaches
handlers (the CLI does this on start-up); library users may instead
configure the ``quadratic`` logger themselves.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

from .config import LOG_LEVEL

ROOT_LOGGER = "quadratic"


class StructuredFormatter(logging.Formatter):
    """``<UTC timestamp> [LEVEL] logger: message``, plus the traceback if any.

    Timestamps are UTC to line up with the ``created_at`` values stored in
    the history.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
            timespec="milliseconds"
        )
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def _resolve_level(level: str | None) -> int:
    name = (level or LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``quadratic`` logger.

    Calling it again replaces the previous handlers, so repeated CLI runs in
    one process do not duplicate output.

    Args:
        level: Level name; defaults to QUADRATIC_LOG_LEVEL (WARNING)
        log_file: Also append log lines to this file (UTF-8)
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(_resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``quadratic.<name>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
