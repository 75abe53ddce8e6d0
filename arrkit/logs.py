"""Loguru setup for scripts and applications embedding arrkit.

Library modules only bind loggers; nothing is emitted to a sink until an
application calls `configure_logging`.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

__all__ = ["configure_logging"]

# Loggers used by httpx and its connection layer.
_STDLIB_LOGGERS = ("httpx", "httpcore")


class _LoguruInterceptHandler(logging.Handler):
    """Bridge standard-library logging records into Loguru."""

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - thin wrapper
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(exception=record.exc_info).log(level, record.getMessage())


def _configure_stdlib_logging(level: str) -> None:
    """Route stdlib logging (including httpx) through Loguru."""

    handler: logging.Handler = _LoguruInterceptHandler()

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in _STDLIB_LOGGERS:
        lib_logger = logging.getLogger(name)
        lib_logger.handlers = [handler]
        lib_logger.propagate = False
        lib_logger.setLevel(level)

    logging.captureWarnings(True)


def configure_logging(level: str | None = "INFO") -> str:
    """Install a stderr sink at `level` and bridge stdlib logging. Returns the level used."""

    resolved = (level or "INFO").strip().upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=resolved,
        backtrace=False,
        diagnose=False,
    )
    _configure_stdlib_logging(resolved)
    logger.bind(module="logs").debug("Logging initialised at level {}", resolved)
    return resolved
