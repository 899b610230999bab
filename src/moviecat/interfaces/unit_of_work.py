"""Unit of Work interface for MOVIECAT.

Defines the AbstractUnitOfWork contract: a context-managed, read-only session
exposing a MovieCatalog. Resources acquired on entry are released on every
exit path.
"""

from __future__ import annotations

import abc

from .movie_catalog import MovieCatalog


class AbstractUnitOfWork(abc.ABC):
    """Contract for a read-only unit of work."""

    catalog: MovieCatalog

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Nothing is ever written, so the default behavior is to roll back.
        """
        self.rollback()

    @abc.abstractmethod
    def rollback(self):
        """End the read transaction and clean up transactional resources."""
