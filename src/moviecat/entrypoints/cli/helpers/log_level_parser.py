"""The ``-L/--logger-level`` option callback.

Accepts ``NAME=LEVEL`` items either as repeated flags or as one string
separated by commas and/or whitespace (the MOVIECAT_LOGGER_LEVEL form).
"""

import logging
import re

import click

# SQLAlchemy and Alembic are chatty below WARNING.
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = (value,) if isinstance(value, str) else value
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {name}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Turn ``NAME=LEVEL`` items into ``{logger name: numeric level}``.

    The result always includes DEFAULT_LIB_LEVELS; items given later win.

    Raises:
        click.BadParameter: An item lacks ``=`` or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split(value):
        name, sep, level_name = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _level(level_name)
    return levels
