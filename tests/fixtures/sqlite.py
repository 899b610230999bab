"""sqlite-specific fixtures"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from alembic import command
from sqlalchemy.engine import URL

from moviecat import config
from moviecat.adapters.db.engine import make_engine
from moviecat.adapters.db.metadata import metadata

# Registers the catalog tables on `metadata`
import moviecat.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import,wrong-import-order

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


@pytest.fixture
def sqlite_engine_memory() -> Iterator[Engine]:
    """In-memory SQLite engine for unit-style tests.

    Uses `make_engine()` so SQLite PRAGMAs are applied.
    Creates/drops tables with `metadata.create_all()` / `drop_all()`.

    Note: No Alembic migrations are run here; the schema comes straight from
    the table definitions in `moviecat.adapters.db.schema`.

    Yields:
        Engine: SQLAlchemy engine bound to an in-memory DB.
    """
    url = "sqlite+pysqlite:///:memory:"
    test_engine = make_engine(url)
    metadata.create_all(test_engine)
    yield test_engine
    metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def sqlite_url_file(tmp_path: Path) -> str:
    """URL of a fresh, empty, file-backed SQLite database (no schema)."""
    return str(URL.create("sqlite+pysqlite", database=str(tmp_path / "test.db")))


@pytest.fixture
def sqlite_engine_file(sqlite_url_file: str) -> Iterator[Engine]:  # pylint: disable=redefined-outer-name
    """File-backed SQLite engine migrated via Alembic (per test).

    For SQLite we prefer a temp *file* (not :memory:) so Alembic's schema
    changes persist across connections. This fixture:
      - runs `alembic upgrade head` for a URL under the test's temp dir,
      - returns an Engine from `make_engine()` (so PRAGMAs apply),
      - disposes the engine at teardown.

    We do **not** downgrade on teardown; each test uses its own DB file.

    Yields:
        Engine: SQLAlchemy engine pointing at a temp file DB.
    """
    cfg = config.build_alembic_config(sqlite_url_file)
    command.upgrade(cfg, "head")
    test_engine = make_engine(sqlite_url_file)
    try:
        yield test_engine
    finally:
        test_engine.dispose()
