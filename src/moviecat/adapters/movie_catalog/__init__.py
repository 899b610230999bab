"""SQLAlchemy adapter for the MovieCatalog port."""

from .sqlalchemy_catalog import SqlAlchemyMovieCatalog

__all__ = ["SqlAlchemyMovieCatalog"]
