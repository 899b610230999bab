"""The ``moviecat`` command.

The top-level group only sets up logging; the work happens in its
subgroups:

    moviecat db upgrade --force && moviecat db seed
    moviecat actors country France --year 2017
    moviecat directors by-actor "Brad Pitt"
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from moviecat import __version__
from moviecat.logging import configure_logging, log_startup

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .queries import actors as actors_group
from .queries import directors as directors_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("moviecat", appauthor=False, ensure_exists=True)) / "latest.log"
)
DEFAULT_LOGGER_LEVELS = ("sqlalchemy=WARNING", "alembic=WARNING")
FLIGHT_RECORDER_CAPACITY = 2000


def console_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING shifted one level per -v (down) or -q (up), kept in DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


@clickx.extra_group(
    version=__version__,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose", "-v", "verbose_count", count=True, help="More console output (repeatable)."
)
@click.option(
    "--quiet", "-q", "quiet_count", count=True, help="Less console output (repeatable)."
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Prefix console records with time, logger and source location.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="MOVIECAT_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="MOVIECAT_FLIGHT_RECORDER_CAPACITY",
    help="Records the flight recorder holds before it flushes.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    envvar="MOVIECAT_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer DEBUG records regardless of -v/-q and dump them to --log-path "
        "as soon as something goes wrong."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    envvar="MOVIECAT_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Dump the flight recorder on exit even if nothing went wrong.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=DEFAULT_LOGGER_LEVELS,
    envvar="MOVIECAT_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
    help="Minimum level for one logger, as NAME=LEVEL. Repeatable.",
)
@clickx.pass_context
def moviecat(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Query a catalog of actors, their roles, and the films, countries and
    directors behind them.
    """
    level = console_level(verbose_count, quiet_count)
    recorder_path = log_path if flight_recorder else None

    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=recorder_path,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=recorder_path,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


for _group in (db_group, actors_group, directors_group):
    moviecat.add_command(_group)
