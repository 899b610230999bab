"""``moviecat db``: create the catalog schema, seed it and inspect it.

Alembic does the schema work; its own output goes to stdout while MOVIECAT's
notices go to stderr. Only forward migrations are exposed. ``seed`` is safe to
repeat: a catalog that already has actors is left alone, and a script that
fails part-way leaves nothing behind.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import inspect
from sqlalchemy.exc import DBAPIError, OperationalError, ProgrammingError

from moviecat import config
from moviecat.adapters.db.schema import CATALOG_TABLES
from moviecat.bootstrap import bootstrap
from moviecat.interfaces.errors import SeedError

from .helpers import error, resolve_db_url, sanitize_url, success, warn
from .helpers.db_url import CANNOT_CONNECT_MSG

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'moviecat db upgrade' to update the schema."

SCHEMA_MISSING_MSG = (
    "The catalog tables do not exist yet.\n" + UPGRADE_SCHEMA_INSTRUCTIONS
)

QUERY_FAILED_MSG = "The database rejected the request: {error}"

verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Pass Alembic's verbose flag through."
)


class MigrationStatus(Enum):
    """How the database revision compares to the packaged head."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Manage the catalog database."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Print the revision the database is at."""
    command.current(
        config.build_alembic_config(resolve_db_url(), stdout=sys.stdout),
        verbose=verbose,
    )


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Print the newest packaged revision(s)."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@verbose_option
@click.option(
    "--indicate-current",
    "-i",
    is_flag=True,
    help="Mark the revision the database is at (needs MOVIECAT_DB_URL).",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """List every packaged revision."""
    url = resolve_db_url() if indicate_current else None
    command.history(
        config.build_alembic_config(url, stdout=sys.stdout),
        verbose=verbose,
        indicate_current=indicate_current,
    )


@db.command()
@click.option("--sql", is_flag=True, help="Print the migration SQL instead of running it.")
@click.option("--force", is_flag=True, help="Skip the confirmation prompt.")
def upgrade(sql: bool, force: bool) -> None:
    """Create or update the catalog tables."""
    url = resolve_db_url()
    if not (force or sql):
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(
        config.build_alembic_config(url, stdout=sys.stdout), revision="head", sql=sql
    )
    success("Upgrade complete!")


def explain_db_error(engine: Engine, exc: DBAPIError) -> click.ClickException:
    """Guidance for a catalog statement the database refused.

    The database is inspected afresh: if it cannot be reached the user is
    told so, if any catalog table is absent they are pointed at
    ``db upgrade``, and anything else (a locked file, a permission problem)
    is passed on with the driver's own message.
    """
    try:
        present = set(inspect(engine).get_table_names())
    except OperationalError:
        logger.debug("Inspection after a failed statement also failed", exc_info=True)
        return click.ClickException(CANNOT_CONNECT_MSG)
    if any(table.name not in present for table in CATALOG_TABLES):
        return click.ClickException(SCHEMA_MISSING_MSG)
    return click.ClickException(QUERY_FAILED_MSG.format(error=exc.orig))


@db.command()
@click.option(
    "--script",
    "script_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar=config.SEED_SCRIPT_ENV,
    show_envvar=True,
    help="SQL script to load instead of the bundled sample catalog.",
)
def seed(script_path: Path | None) -> None:
    """Fill an empty catalog from a seed script."""
    with bootstrap(resolve_db_url()) as app:
        try:
            result = app.seed(script_path)
        except SeedError as e:
            raise click.ClickException(str(e)) from e
        except (OperationalError, ProgrammingError) as e:
            raise explain_db_error(app.engine, e) from e

    if result.skipped:
        warn("Catalog already seeded; nothing to do.")
    else:
        success(f"Seed loaded ({result.executed} statements).")


def schema_status(engine: Engine, url: str) -> tuple[str | None, MigrationStatus]:
    """The database's revision and how it compares to the packaged head."""
    with engine.connect() as conn:
        revision = MigrationContext.configure(conn).get_current_revision()
    heads_ = ScriptDirectory.from_config(config.build_alembic_config(url)).get_heads()

    if revision is None:
        return None, MigrationStatus.UNINITIALIZED
    if revision in heads_:
        return revision, MigrationStatus.UP_TO_DATE
    return revision, MigrationStatus.OUT_OF_DATE  # pragma: nocover


@db.command()
def status() -> None:
    """Report connectivity, schema revision and per-table row counts."""
    try:
        url = resolve_db_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        return

    with bootstrap(url) as app:
        try:
            revision, state = schema_status(app.engine, url)
        except OperationalError as e:
            raise click.ClickException(CANNOT_CONNECT_MSG) from e

        success("Database reachable")
        click.echo(f"Backend : {app.engine.dialect.name}")
        click.echo(f"URL     : {sanitize_url(url)}")
        shown = state.value if revision is None else f"{revision} ({state.value})"
        click.echo(f"Schema  : {shown}")
        if state is not MigrationStatus.UP_TO_DATE:
            warn(UPGRADE_SCHEMA_INSTRUCTIONS)
            return

        with app.uow() as uow:
            try:
                counts = uow.catalog.entity_counts()
            except (OperationalError, ProgrammingError) as e:
                raise explain_db_error(app.engine, e) from e

    click.echo("Rows    : " + ", ".join(f"{k}={v}" for k, v in counts.items()))
    if counts["actor"] == 0:
        warn("Catalog is empty. Run 'moviecat db seed' to load it.")
