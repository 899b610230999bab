"""Logging setup for the MOVIECAT command line.

Two handlers hang off the root logger:

* a Rich console handler on stderr whose level follows ``-v``/``-q``;
* an optional "flight recorder", a memory buffer that always collects DEBUG
  records and dumps them to a file the moment a WARNING (or worse) shows up,
  or on shutdown when asked to.

On the console, records from other libraries are tagged with the library's
top-level package name, e.g. ``[sqlalchemy]``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

OWN_PACKAGE = "moviecat"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class LibraryPrefix(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set ``record.prefix`` to ``[package]`` for foreign loggers, ``""`` for ours."""

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == OWN_PACKAGE else f"[{package}]"
        return True


def console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Rich handler on stderr.

    In debug mode everything down to DEBUG is shown together with timestamps,
    logger names and source locations, and the library prefix is dropped.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(LibraryPrefix())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Memory buffer of ``capacity`` records in front of a file at ``path``.

    The file is truncated when the handler is built, so it only ever holds
    the current run.
    """
    sink = logging.FileHandler(path, mode="w", encoding="utf-8")
    sink.setLevel(logging.DEBUG)
    sink.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=flush_level,
        target=sink,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool,
    color: bool,
    log_path: Path | None,
    flight_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> list[logging.Handler]:
    """Replace the root logger's handlers and apply per-logger levels.

    The root logger is opened up to DEBUG so the flight recorder sees
    everything; the console handler does its own level filtering. Entries in
    ``logger_levels`` are set on the named loggers and so apply to both
    handlers. Passing ``log_path=None`` leaves the flight recorder out.

    Returns:
        The handlers installed on the root logger, console first.
    """
    handlers: list[logging.Handler] = [console_handler(level, debug_mode, color)]
    if log_path is not None:
        handlers.append(
            flight_recorder(log_path, capacity=flight_capacity, flush_on_close=force_flush)
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, logger_level in logger_levels.items():
        logging.getLogger(name).setLevel(logger_level)
    return handlers


def _diagnostics(handlers: list[logging.Handler]) -> dict[str, object]:
    return {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "SQLAlchemy": sqlalchemy.__version__,
        "Alembic": alembic.__version__,
        "Handlers": [type(h).__name__ for h in handlers],
    }


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """One INFO line saying what is configured, then DEBUG detail about the
    environment for the flight recorder.
    """
    logger.info(
        "MOVIECAT %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "OFF" if log_path is None else "ON",
    )
    for label, value in _diagnostics(handlers).items():
        logger.debug("%s: %s", label, value)
    if log_path is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path,
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
