"""Where MOVIECAT finds its database, its seed data and its migrations.

Everything here is read lazily from the environment so that tests and the
CLI can change the environment right up to the moment a value is needed.
"""

import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import TextIO

from alembic.config import Config

DB_URL_ENV = "MOVIECAT_DB_URL"
SEED_SCRIPT_ENV = "MOVIECAT_SEED_SCRIPT"

ALEMBIC_URL_KEY = "sqlalchemy.url"
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"

BUNDLED_SEED = "data.sql"


class DatabaseUrlNotSetError(Exception):
    """MOVIECAT_DB_URL is missing or empty."""


def get_db_url() -> str:
    """The catalog database URL, taken from MOVIECAT_DB_URL.

    Raises:
        DatabaseUrlNotSetError: The variable is unset or empty.
    """
    url = os.environ.get(DB_URL_ENV, "")
    if not url:
        raise DatabaseUrlNotSetError
    return url


def get_seed_script_path() -> Path:
    """Path of the SQL script `db seed` loads.

    MOVIECAT_SEED_SCRIPT overrides the sample catalog shipped in
    ``moviecat/data``.
    """
    override = os.environ.get(SEED_SCRIPT_ENV)
    if override:
        return Path(override)
    return Path(str(files("moviecat.data").joinpath(BUNDLED_SEED)))


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """An Alembic config that needs no ``alembic.ini``.

    ``script_location`` always points at the migrations packaged with
    MOVIECAT. ``sqlalchemy.url`` is only set when ``db_url`` is given, which
    is enough for commands like ``heads`` that never connect.

    Args:
        db_url: Database to migrate, if any.
        stdout: Stream Alembic prints its status lines to.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY, str(files("moviecat.adapters.db.alembic"))
    )
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    return cfg
