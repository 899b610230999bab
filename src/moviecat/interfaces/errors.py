"""Exceptions raised while seeding the movie catalog."""

from __future__ import annotations

from pathlib import Path


class SeedError(Exception):
    """Base class for seed-loading errors."""


class SeedScriptNotFound(SeedError):
    """The seed script could not be located or read.

    Attributes:
        path (Path): The path that was tried.
    """

    def __init__(self, path: Path):
        super().__init__(f"Seed script '{path}' could not be read.")
        self.path = path


class SeedLoadError(SeedError):
    """A statement of the seed script failed; nothing was persisted.

    Attributes:
        index (int): 1-based position of the failing statement in the script.
        statement (str): The failing statement.
    """

    def __init__(self, index: int, statement: str):
        excerpt = " ".join(statement.split())[:80]
        super().__init__(f"Seed statement #{index} failed: {excerpt!r}")
        self.index = index
        self.statement = statement
