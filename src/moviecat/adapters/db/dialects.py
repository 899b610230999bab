"""Database backends MOVIECAT knows how to talk to.

Only SQLite and PostgreSQL are supported. `DialectName` turns whatever
SQLAlchemy (or a user-supplied URL) calls a backend into one of those two,
and carries the little backend-specific knowledge the queries need.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

_ALIASES = {
    "postgresql": "postgresql",
    "postgres": "postgresql",
    "pg": "postgresql",
    "sqlite": "sqlite",
}


class UnsupportedDialect(Exception):
    """The database backend is neither SQLite nor PostgreSQL."""


class DialectName(str, Enum):
    """A supported backend, named as SQLAlchemy names it."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Resolve a backend name such as ``"postgres"`` or ``"sqlite+pysqlite"``.

        Case, surrounding whitespace and any ``+driver`` suffix are ignored.

        Raises:
            UnsupportedDialect: For empty or unknown names.
        """
        backend = (dialect_str or "").strip().lower().partition("+")[0]
        try:
            return cls(_ALIASES[backend])
        except KeyError:
            raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}") from None

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Resolve the backend of an Engine or Connection (via ``.dialect.name``)."""
        name = getattr(getattr(obj, "dialect", None), "name", None)
        if name is None:
            raise UnsupportedDialect(
                f"{type(obj).__name__} has no dialect name to inspect"
            )
        return cls.from_string(name)

    @property
    def binary_collation(self) -> str:
        """Collation comparing strings by their encoded bytes."""
        return "C" if self is DialectName.POSTGRES else "binary"
