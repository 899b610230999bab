"""Tests for the naming convention applied via `metadata`.

The catalog tables get their constraint and index names from the convention
in `moviecat.adapters.db.metadata`; the Alembic migration spells the same
names out explicitly. Reflecting both schemas and comparing names keeps the
two from drifting apart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import inspect

from moviecat.adapters.db.schema import CATALOG_TABLES

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

TABLE_NAMES = [t.name for t in CATALOG_TABLES]


def _names(engine: Engine, table: str) -> dict[str, set[str]]:
    insp = inspect(engine)
    return {
        "indexes": {ix["name"] for ix in insp.get_indexes(table)},
        "foreign_keys": {fk["name"] for fk in insp.get_foreign_keys(table)},
    }


def test_role_names_follow_convention(sqlite_engine_memory: Engine):
    """Indexes and foreign keys on `role` are named by convention."""
    names = _names(sqlite_engine_memory, "role")
    assert names["indexes"] == {
        "ix_role_name",
        "ix_role_actor_id",
        "ix_role_film_id",
    }
    assert names["foreign_keys"] == {
        "fk_role_actor_id_actor",
        "fk_role_film_id_film",
    }


@pytest.mark.parametrize("table", TABLE_NAMES)
def test_migration_matches_metadata(
    sqlite_engine_memory: Engine, sqlite_engine_file: Engine, table: str
):
    """`create_all` and `alembic upgrade head` produce the same names."""
    assert _names(sqlite_engine_memory, table) == _names(sqlite_engine_file, table)


@pytest.mark.parametrize("table", TABLE_NAMES)
def test_migration_matches_metadata_columns(
    sqlite_engine_memory: Engine, sqlite_engine_file: Engine, table: str
):
    """Both schemas expose the same columns and nullability."""

    def columns(engine: Engine) -> dict[str, bool]:
        return {c["name"]: c["nullable"] for c in inspect(engine).get_columns(table)}

    assert columns(sqlite_engine_memory) == columns(sqlite_engine_file)
