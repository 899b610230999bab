"""MOVIECAT

A small, read-only query layer over a movie catalog: actors, the roles they
played, the films those roles belong to, and the countries and directors of
each film.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
