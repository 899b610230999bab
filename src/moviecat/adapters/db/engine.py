"""Engine construction for the catalog database.

`make_engine` is the single place engines are built. It refuses backends
other than SQLite and PostgreSQL up front, and on SQLite it installs a
connect hook so every pooled connection enforces foreign keys (the catalog
link tables depend on them) and uses WAL journaling.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

from moviecat.adapters.db.dialects import DialectName

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_PRAGMAS = (
    "foreign_keys=ON",
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "temp_store=MEMORY",
)


def is_sqlite(url: str | URL) -> bool:
    """True when ``url`` points at an SQLite database (any driver)."""
    return make_url(str(url)).get_backend_name() == DialectName.SQLITE.value


def _apply_sqlite_pragmas(dbapi_conn, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {pragma};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Build an Engine for ``url``.

    Args:
        url: SQLAlchemy database URL.
        echo: Echo emitted SQL through the ``sqlalchemy.engine`` logger.

    Raises:
        UnsupportedDialect: The URL names neither SQLite nor PostgreSQL.
    """
    backend = DialectName.from_string(make_url(str(url)).get_backend_name())
    engine = create_engine(url, echo=echo)

    if backend is DialectName.SQLITE:
        event.listen(engine, "connect", _apply_sqlite_pragmas)

    logger.debug("Engine ready: backend=%s url=%r", backend.value, engine.url)
    return engine
