"""Interfaces for read-only queries over the movie catalog.

Defines the entity snapshots returned by queries and the `MovieCatalog`
abstraction. Every filtered query is an inner join chain over
actor → role → film → (country | director); join cardinality is preserved,
so an actor appears once per qualifying role (no de-duplication).
"""

from __future__ import annotations

import abc
import datetime
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Actor:
    """Snapshot of an actor row."""

    id: int
    identity: str  # full display name, e.g. "Marion Cotillard"
    birth_date: datetime.date | None


@dataclass(frozen=True, slots=True)
class Director:
    """Snapshot of a director row."""

    id: int
    identity: str


class MovieCatalog(abc.ABC):
    """Parameterized read queries over actors, roles, films, countries and directors."""

    @abc.abstractmethod
    def all_actors(self) -> list[Actor]:
        """Return every actor, ordered by identity (byte-wise ascending)."""

    @abc.abstractmethod
    def actors_by_identity(self, identity: str) -> list[Actor]:
        """Return the actor(s) whose identity equals ``identity`` exactly.

        Identities are treated as unique in practice, so the result holds zero
        or one actor. The match is case-sensitive.

        Args:
            identity: The full display name to look up.

        Returns:
            list[Actor]: The matching actors; empty when the name is unknown.
        """

    @abc.abstractmethod
    def actors_by_birth_year(self, year: int) -> list[Actor]:
        """Return the actors born during calendar year ``year``.

        Actors without a birth date never match.
        """

    @abc.abstractmethod
    def actors_by_role(self, role_name: str) -> list[Actor]:
        """Return the actors who played a role named exactly ``role_name``.

        An actor who played the same-named role in several films appears once
        per role.
        """

    @abc.abstractmethod
    def actors_by_film_year(self, year: int) -> list[Actor]:
        """Return one actor row per role in a film released in ``year``."""

    @abc.abstractmethod
    def actors_by_film_country(self, country: str) -> list[Actor]:
        """Return one actor row per role in a film from ``country``."""

    @abc.abstractmethod
    def actors_by_film_country_and_year(self, country: str, year: int) -> list[Actor]:
        """Return one actor row per role in a film from ``country`` released in ``year``."""

    @abc.abstractmethod
    def actors_by_director_between_years(
        self, director: str, first_year: int, last_year: int
    ) -> list[Actor]:
        """Return actors from films by ``director`` released within a year range.

        Both bounds are inclusive. A reversed range (``first_year > last_year``)
        matches nothing.

        Args:
            director: Identity of the director.
            first_year: Earliest release year (inclusive).
            last_year: Latest release year (inclusive).

        Returns:
            list[Actor]: One actor row per qualifying role.
        """

    @abc.abstractmethod
    def directors_by_actor(self, actor_identity: str) -> list[Director]:
        """Return the directors of every film ``actor_identity`` played in.

        A director appears once per role the actor played in one of their
        films.
        """

    @abc.abstractmethod
    def entity_counts(self) -> dict[str, int]:
        """Return the number of rows in each catalog table, keyed by table name."""
