# === FILE: sitemapper/logger.py ===
"""Logging for Sitemapper.

The crawler accepts any :class:`logging.Logger` and only calls ``debug`` and
``warning`` on it. The project logger is left unconfigured until the CLI (or
the caller) runs :func:`init_logging`; :func:`null_logger` gives a silent one.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "Sitemapper"
_NULL_LOGGER_NAME: Final[str] = "Sitemapper.null"

_LevelT = Union[int, str]


def _with_format(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Send project log records to stdout and, optionally, a rotating logfile."""
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    if replace_handlers:
        lg.handlers.clear()

    lg.addHandler(_with_format(logging.StreamHandler(sys.stdout), log_format))
    if log_file is not None:
        rotating = RotatingFileHandler(
            filename=str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        lg.addHandler(_with_format(rotating, log_format))

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


def null_logger() -> logging.Logger:
    """Logger that drops every record (crawl with ``--verbose`` off)."""
    lg = logging.getLogger(_NULL_LOGGER_NAME)
    if not lg.handlers:
        lg.addHandler(logging.NullHandler())
    lg.propagate = False
    lg.disabled = True
    return lg


logger: logging.Logger = logging.getLogger(_LOGGER_NAME)

__all__ = ["logger", "configure", "init_logging", "null_logger"]
