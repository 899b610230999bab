"""Read-only unit of work over a single SQLAlchemy connection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from moviecat.adapters.movie_catalog import SqlAlchemyMovieCatalog
from moviecat.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """Checks out one connection per ``with`` block and hands the catalog
    queries that connection. Leaving the block rolls back and returns the
    connection to the pool, whether or not the block raised.
    """

    connection: Connection

    def __init__(self, engine: Engine):
        self.engine = engine

    def __enter__(self):
        self.connection = self.engine.connect()
        self.catalog = SqlAlchemyMovieCatalog(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def rollback(self):
        self.connection.rollback()
