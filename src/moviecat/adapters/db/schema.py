"""Movie catalog schema.

Five entity tables and two many-to-many link tables:

| Table           | Purpose                                                   |
|-----------------|-----------------------------------------------------------|
| `actor`         | People credited with roles (identity + birth date)        |
| `film`          | Films (title + release year)                              |
| `role`          | A named character played by one actor in one film         |
| `country`       | Countries of origin                                       |
| `director`      | People credited as directors                              |
| `film_country`  | Film ↔ Country link                                       |
| `film_director` | Film ↔ Director link                                      |

Constraints (enforced here):

| Constraint                        | Purpose                                |
|-----------------------------------|----------------------------------------|
| role.actor_id NOT NULL, FK actor  | every role belongs to exactly one actor |
| role.film_id NOT NULL, FK film    | every role belongs to exactly one film  |
| PK(film_id, country_id)           | a country is linked to a film once      |
| PK(film_id, director_id)          | a director is linked to a film once     |

`actor.identity` is the natural lookup key but is deliberately not unique.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
)

from moviecat.adapters.db.metadata import metadata
from moviecat.adapters.db.sa_types import BIGINT_ID

__all__ = [
    "actor",
    "country",
    "director",
    "film",
    "film_country",
    "film_director",
    "role",
    "CATALOG_TABLES",
]

actor = Table(
    "actor",
    metadata,
    Column("id", BIGINT_ID, primary_key=True, comment="Actor identifier."),
    Column(
        "identity",
        String(255),
        nullable=False,
        comment="Full display name; used as a lookup key.",
    ),
    Column("birth_date", Date, nullable=True, comment="Date of birth, if known."),
    Index(None, "identity"),
    comment="Actors. One row per person credited with at least one role.",
)

film = Table(
    "film",
    metadata,
    Column("id", BIGINT_ID, primary_key=True, comment="Film identifier."),
    Column("title", String(255), nullable=False, comment="Film title."),
    Column("year", Integer, nullable=True, comment="Release year."),
    Index(None, "year"),
    comment="Films.",
)

country = Table(
    "country",
    metadata,
    Column("id", BIGINT_ID, primary_key=True, comment="Country identifier."),
    Column("name", String(100), nullable=False, comment="Country name."),
    Index(None, "name"),
    comment="Countries of origin of films.",
)

director = Table(
    "director",
    metadata,
    Column("id", BIGINT_ID, primary_key=True, comment="Director identifier."),
    Column(
        "identity",
        String(255),
        nullable=False,
        comment="Full display name; used as a lookup key.",
    ),
    Index(None, "identity"),
    comment="Film directors.",
)

role = Table(
    "role",
    metadata,
    Column("id", BIGINT_ID, primary_key=True, comment="Role identifier."),
    Column("name", String(255), nullable=False, comment="Character name."),
    Column(
        "actor_id",
        BigInteger,
        ForeignKey("actor.id"),
        nullable=False,
        comment="Actor playing the character.",
    ),
    Column(
        "film_id",
        BigInteger,
        ForeignKey("film.id"),
        nullable=False,
        comment="Film the character appears in.",
    ),
    Index(None, "name"),
    Index(None, "actor_id"),
    Index(None, "film_id"),
    comment="Characters played by an actor in a film (actor ↔ film association).",
)

film_country = Table(
    "film_country",
    metadata,
    Column("film_id", BigInteger, ForeignKey("film.id"), primary_key=True),
    Column("country_id", BigInteger, ForeignKey("country.id"), primary_key=True),
    comment="Countries of origin of each film.",
)

film_director = Table(
    "film_director",
    metadata,
    Column("film_id", BigInteger, ForeignKey("film.id"), primary_key=True),
    Column("director_id", BigInteger, ForeignKey("director.id"), primary_key=True),
    comment="Directors of each film.",
)

#: Every catalog table, parents before children.
CATALOG_TABLES = (
    actor,
    film,
    country,
    director,
    role,
    film_country,
    film_director,
)
