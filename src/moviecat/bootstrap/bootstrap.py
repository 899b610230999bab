"""Build the application container around a single engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from moviecat import config
from moviecat.adapters.db.engine import make_engine
from moviecat.adapters.db.seed import SeedResult, load_seed, read_seed_script
from moviecat.adapters.unit_of_work import SqlAlchemyUnitOfWork

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from moviecat.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Holds the engine shared by every unit of work.

    Use as a context manager (or call `close()`) so the engine's connection
    pool is released at shutdown.
    """

    engine: Engine

    def uow(self) -> AbstractUnitOfWork:
        """Build a new read-only unit of work bound to the shared engine."""
        return SqlAlchemyUnitOfWork(self.engine)

    def seed(self, script_path: Path | str | None = None) -> SeedResult:
        """Load the seed script into the catalog unless it is already seeded."""
        return load_seed(self.engine, read_seed_script(script_path))

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        logger.debug("Disposing engine for %r", self.engine.url)
        self.engine.dispose()

    def __enter__(self) -> AppContainer:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def bootstrap(url: str | None = None) -> AppContainer:
    """Build the application container.

    Args:
        url: Database URL. Defaults to `config.get_db_url()`.

    Returns:
        AppContainer: Container owning a freshly created engine.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and `MOVIECAT_DB_URL` is unset.
    """
    engine = make_engine(url if url is not None else config.get_db_url())
    return AppContainer(engine=engine)
