"""Alembic environment for the movie catalog schema.

The database URL is taken from, in order: ``-x url=...`` on the alembic
command line, ``sqlalchemy.url`` on the (programmatic) config, and finally
the MOVIECAT_DB_URL environment variable.
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

import moviecat.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from moviecat.adapters.db.engine import is_sqlite
from moviecat.adapters.db.metadata import metadata

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTS = {"compare_type": True, "compare_server_default": True}


def catalog_url() -> str:
    """The URL migrations should run against."""
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option("sqlalchemy.url"),
        os.environ.get("MOVIECAT_DB_URL"),
    )
    for url in candidates:
        # an unexpanded %(...)s placeholder counts as unset
        if url and "%(" not in url:
            return url
    raise RuntimeError("No catalog database configured; set MOVIECAT_DB_URL.")


def run_offline(url: str) -> None:
    """Render the migration SQL to the script output instead of executing it."""
    context.configure(
        url=url,
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online(url: str) -> None:
    """Apply migrations over a short-lived, unpooled connection."""
    engine = engine_from_config(
        {"sqlalchemy.url": url}, prefix="sqlalchemy.", poolclass=pool.NullPool
    )
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=is_sqlite(url),
            **COMPARE_OPTS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline(catalog_url())
else:
    run_online(catalog_url())
