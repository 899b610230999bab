"""Interfaces (application boundary) for MOVIECAT.

Defines framework-free application contracts: the movie catalog port, the
read-only unit of work, the entity snapshots they return and the error
types raised at the boundary.

Dependency rule: this package is independent: do not import from any other
`moviecat.*` modules. It may be imported by `moviecat.adapters`,
`moviecat.bootstrap` and `moviecat.entrypoints`.
"""

from .errors import SeedError, SeedLoadError, SeedScriptNotFound
from .movie_catalog import Actor, Director, MovieCatalog
from .unit_of_work import AbstractUnitOfWork

__all__ = [
    "AbstractUnitOfWork",
    "Actor",
    "Director",
    "MovieCatalog",
    "SeedError",
    "SeedLoadError",
    "SeedScriptNotFound",
]
