"""MOVIECAT query commands.

``moviecat actors ...`` and ``moviecat directors ...`` map one-to-one onto
the MovieCatalog operations. Results go to **stdout**, one identity per line
in the order the database returned them (rows are not de-duplicated), or as a
single number with ``--count``.

Examples
    $ moviecat actors role "Harley Quinn"
    Margot Robbie
    $ moviecat directors by-actor "Brad Pitt" --count
    6
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from sqlalchemy.exc import OperationalError, ProgrammingError

from moviecat.bootstrap import bootstrap

from .db import explain_db_error
from .helpers import resolve_db_url

if TYPE_CHECKING:
    from moviecat.interfaces.movie_catalog import Actor, Director, MovieCatalog

logger = logging.getLogger(__name__)

count_option = click.option(
    "--count",
    "count_only",
    is_flag=True,
    help="Print only the number of rows.",
)


def _run(
    query: Callable[[MovieCatalog], Sequence[Actor | Director]], count_only: bool
) -> None:
    """Run ``query`` inside a unit of work and print its rows."""
    with bootstrap(resolve_db_url()) as app, app.uow() as uow:
        try:
            rows = query(uow.catalog)
        except (OperationalError, ProgrammingError) as e:
            raise explain_db_error(app.engine, e) from e
    logger.info("Query returned %d row(s)", len(rows))
    if count_only:
        click.echo(len(rows))
        return
    for row in rows:
        click.echo(row.identity)


@click.group(cls=clickx.ExtraGroup)
def actors() -> None:
    """Query actors."""


@actors.command(name="all")
@count_option
def all_actors(count_only: bool) -> None:
    """List every actor, sorted by name."""
    _run(lambda catalog: catalog.all_actors(), count_only)


@actors.command()
@click.argument("identity")
@count_option
def named(identity: str, count_only: bool) -> None:
    """Find the actor whose name is exactly IDENTITY."""
    _run(lambda catalog: catalog.actors_by_identity(identity), count_only)


@actors.command()
@click.argument("year", type=int)
@count_option
def born(year: int, count_only: bool) -> None:
    """Find actors born in YEAR."""
    _run(lambda catalog: catalog.actors_by_birth_year(year), count_only)


@actors.command()
@click.argument("role_name")
@count_option
def role(role_name: str, count_only: bool) -> None:
    """Find actors who played the role ROLE_NAME."""
    _run(lambda catalog: catalog.actors_by_role(role_name), count_only)


@actors.command(name="film-year")
@click.argument("year", type=int)
@count_option
def film_year(year: int, count_only: bool) -> None:
    """Find actors with a role in a film released in YEAR."""
    _run(lambda catalog: catalog.actors_by_film_year(year), count_only)


@actors.command()
@click.argument("country_name")
@click.option("--year", type=int, default=None, help="Also require this release year.")
@count_option
def country(country_name: str, year: int | None, count_only: bool) -> None:
    """Find actors with a role in a film from COUNTRY_NAME."""
    if year is None:
        _run(lambda catalog: catalog.actors_by_film_country(country_name), count_only)
    else:
        _run(
            lambda catalog: catalog.actors_by_film_country_and_year(country_name, year),
            count_only,
        )


@actors.command()
@click.argument("director_name")
@click.option(
    "--from", "first_year", type=int, required=True, help="First year (inclusive)."
)
@click.option(
    "--to", "last_year", type=int, required=True, help="Last year (inclusive)."
)
@count_option
def director(
    director_name: str, first_year: int, last_year: int, count_only: bool
) -> None:
    """Find actors in films by DIRECTOR_NAME released between two years."""
    _run(
        lambda catalog: catalog.actors_by_director_between_years(
            director_name, first_year, last_year
        ),
        count_only,
    )


@click.group(cls=clickx.ExtraGroup)
def directors() -> None:
    """Query directors."""


@directors.command(name="by-actor")
@click.argument("actor_identity")
@count_option
def by_actor(actor_identity: str, count_only: bool) -> None:
    """Find the directors of every film ACTOR_IDENTITY played in."""
    _run(lambda catalog: catalog.directors_by_actor(actor_identity), count_only)
