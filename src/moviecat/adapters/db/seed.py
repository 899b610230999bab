"""Bulk seed loading for the movie catalog.

The seed script is a flat file of ``;``-separated SQL statements. It is
executed in file order inside a single transaction, guarded by an existence
check on the ``actor`` table:

- if any actor row exists, nothing is executed (loading is idempotent);
- if any statement fails, the whole transaction rolls back and
  ``SeedLoadError`` is raised, so no partial seed state persists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError

from moviecat import config
from moviecat.adapters.db.schema import actor
from moviecat.interfaces.errors import SeedLoadError, SeedScriptNotFound

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedResult:
    """Outcome of a seed load.

    Attributes:
        executed: Number of statements executed (0 when skipped).
        skipped: True when the catalog already held actors.
    """

    executed: int
    skipped: bool


def read_seed_script(path: Path | str | None = None) -> str:
    """Read a seed script as UTF-8 text.

    Args:
        path: Script location. Defaults to `config.get_seed_script_path()`.

    Returns:
        str: The script contents.

    Raises:
        SeedScriptNotFound: If the file is missing or cannot be read.
    """
    script_path = Path(path) if path is not None else config.get_seed_script_path()
    try:
        return script_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedScriptNotFound(script_path) from e


def split_statements(script: str) -> list[str]:
    """Split a script into individual statements.

    Splits on ``;`` outside single-quoted literals (``''`` escapes are
    honored) and drops ``--`` line comments. Blank fragments, such as the one
    after the final ``;``, are discarded.

    Args:
        script: The raw script text.

    Returns:
        list[str]: Stripped statements, in file order.
    """
    fragments: list[str] = []
    current: list[str] = []
    in_literal = False
    i = 0
    while i < len(script):
        char = script[i]
        if in_literal:
            current.append(char)
            if char == "'":
                in_literal = False
        elif char == "'":
            in_literal = True
            current.append(char)
        elif script.startswith("--", i):
            end = script.find("\n", i)
            i = len(script) if end == -1 else end
            continue
        elif char == ";":
            fragments.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    fragments.append("".join(current))
    return [fragment.strip() for fragment in fragments if fragment.strip()]


def _has_actors(conn: Connection) -> bool:
    stmt = select(func.count()).select_from(actor)
    return conn.execute(stmt).scalar_one() > 0


def load_seed(engine: Engine, script: str) -> SeedResult:
    """Execute a seed script once, all-or-nothing.

    Args:
        engine: Engine bound to a database whose schema is already in place.
        script: Seed script text (see `read_seed_script`).

    Returns:
        SeedResult: How many statements ran, or that loading was skipped.

    Raises:
        SeedLoadError: If a statement fails. The transaction is rolled back.
    """
    statements = split_statements(script)
    with engine.begin() as conn:
        if _has_actors(conn):
            logger.info("Catalog already seeded; skipping seed load")
            return SeedResult(executed=0, skipped=True)

        logger.info("Seeding catalog (%d statements)", len(statements))
        for index, statement in enumerate(statements, start=1):
            try:
                conn.exec_driver_sql(
                    statement, execution_options={"no_parameters": True}
                )
            except DBAPIError as e:
                logger.error("Seed statement #%d failed; rolling back", index)
                raise SeedLoadError(index, statement) from e

    logger.debug("Seed load committed")
    return SeedResult(executed=len(statements), skipped=False)
