"""Implementation of MovieCatalog using SQLAlchemy Core."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import extract, func, select

from moviecat.adapters.db import schema
from moviecat.adapters.db.dialects import DialectName
from moviecat.interfaces.movie_catalog import Actor, Director, MovieCatalog

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Row
    from sqlalchemy.sql import Select

logger = logging.getLogger(__name__)

actor = schema.actor
role = schema.role
film = schema.film

ACTOR_COLUMNS = (actor.c.id, actor.c.identity, actor.c.birth_date)
DIRECTOR_COLUMNS = (schema.director.c.id, schema.director.c.identity)

# Inner join chains; rows without a match on every hop are excluded.
ACTOR_ROLE = actor.join(role, role.c.actor_id == actor.c.id)
ACTOR_ROLE_FILM = ACTOR_ROLE.join(film, film.c.id == role.c.film_id)
ACTOR_ROLE_FILM_COUNTRY = ACTOR_ROLE_FILM.join(
    schema.film_country, schema.film_country.c.film_id == film.c.id
).join(schema.country, schema.country.c.id == schema.film_country.c.country_id)
ACTOR_ROLE_FILM_DIRECTOR = ACTOR_ROLE_FILM.join(
    schema.film_director, schema.film_director.c.film_id == film.c.id
).join(schema.director, schema.director.c.id == schema.film_director.c.director_id)


def _to_actor(row: Row) -> Actor:
    return Actor(id=int(row.id), identity=row.identity, birth_date=row.birth_date)


def _to_director(row: Row) -> Director:
    return Director(id=int(row.id), identity=row.identity)


class SqlAlchemyMovieCatalog(MovieCatalog):
    """MovieCatalog implementation that supports both Postgres and SQLite."""

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = DialectName.from_sqlalchemy(connection)

    def _actors(self, stmt: Select) -> list[Actor]:
        logger.debug("Actor query: %s", stmt)
        return [_to_actor(row) for row in self.connection.execute(stmt)]

    # --- actor queries ---

    def all_actors(self) -> list[Actor]:
        # binary collation so ordering is identical on every backend
        stmt = select(*ACTOR_COLUMNS).order_by(
            actor.c.identity.collate(self.dialect.binary_collation)
        )
        return self._actors(stmt)

    def actors_by_identity(self, identity: str) -> list[Actor]:
        stmt = select(*ACTOR_COLUMNS).where(actor.c.identity == identity)
        return self._actors(stmt)

    def actors_by_birth_year(self, year: int) -> list[Actor]:
        stmt = select(*ACTOR_COLUMNS).where(
            extract("year", actor.c.birth_date) == year
        )
        return self._actors(stmt)

    def actors_by_role(self, role_name: str) -> list[Actor]:
        stmt = (
            select(*ACTOR_COLUMNS)
            .select_from(ACTOR_ROLE)
            .where(role.c.name == role_name)
        )
        return self._actors(stmt)

    def actors_by_film_year(self, year: int) -> list[Actor]:
        stmt = (
            select(*ACTOR_COLUMNS)
            .select_from(ACTOR_ROLE_FILM)
            .where(film.c.year == year)
        )
        return self._actors(stmt)

    def actors_by_film_country(self, country: str) -> list[Actor]:
        stmt = (
            select(*ACTOR_COLUMNS)
            .select_from(ACTOR_ROLE_FILM_COUNTRY)
            .where(schema.country.c.name == country)
        )
        return self._actors(stmt)

    def actors_by_film_country_and_year(self, country: str, year: int) -> list[Actor]:
        stmt = (
            select(*ACTOR_COLUMNS)
            .select_from(ACTOR_ROLE_FILM_COUNTRY)
            .where(schema.country.c.name == country, film.c.year == year)
        )
        return self._actors(stmt)

    def actors_by_director_between_years(
        self, director: str, first_year: int, last_year: int
    ) -> list[Actor]:
        stmt = (
            select(*ACTOR_COLUMNS)
            .select_from(ACTOR_ROLE_FILM_DIRECTOR)
            .where(
                schema.director.c.identity == director,
                film.c.year.between(first_year, last_year),
            )
        )
        return self._actors(stmt)

    # --- director queries ---

    def directors_by_actor(self, actor_identity: str) -> list[Director]:
        stmt = (
            select(*DIRECTOR_COLUMNS)
            .select_from(ACTOR_ROLE_FILM_DIRECTOR)
            .where(actor.c.identity == actor_identity)
        )
        logger.debug("Director query: %s", stmt)
        return [_to_director(row) for row in self.connection.execute(stmt)]

    # --- bookkeeping ---

    def entity_counts(self) -> dict[str, int]:
        return {
            table.name: self.connection.execute(
                select(func.count()).select_from(table)
            ).scalar_one()
            for table in schema.CATALOG_TABLES
        }
