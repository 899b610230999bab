"""create movie catalog

Revision ID: 3c1f8a2d9b47
Revises:
Create Date: 2026-10-19 09:12:41.508113

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c1f8a2d9b47"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "actor",
        sa.Column("id", ID, nullable=False, comment="Actor identifier."),
        sa.Column(
            "identity",
            sa.String(length=255),
            nullable=False,
            comment="Full display name; used as a lookup key.",
        ),
        sa.Column(
            "birth_date", sa.Date(), nullable=True, comment="Date of birth, if known."
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_actor")),
        comment="Actors. One row per person credited with at least one role.",
    )
    op.create_index(op.f("ix_actor_identity"), "actor", ["identity"])

    op.create_table(
        "film",
        sa.Column("id", ID, nullable=False, comment="Film identifier."),
        sa.Column(
            "title", sa.String(length=255), nullable=False, comment="Film title."
        ),
        sa.Column("year", sa.Integer(), nullable=True, comment="Release year."),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_film")),
        comment="Films.",
    )
    op.create_index(op.f("ix_film_year"), "film", ["year"])

    op.create_table(
        "country",
        sa.Column("id", ID, nullable=False, comment="Country identifier."),
        sa.Column(
            "name", sa.String(length=100), nullable=False, comment="Country name."
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_country")),
        comment="Countries of origin of films.",
    )
    op.create_index(op.f("ix_country_name"), "country", ["name"])

    op.create_table(
        "director",
        sa.Column("id", ID, nullable=False, comment="Director identifier."),
        sa.Column(
            "identity",
            sa.String(length=255),
            nullable=False,
            comment="Full display name; used as a lookup key.",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_director")),
        comment="Film directors.",
    )
    op.create_index(op.f("ix_director_identity"), "director", ["identity"])

    op.create_table(
        "role",
        sa.Column("id", ID, nullable=False, comment="Role identifier."),
        sa.Column(
            "name", sa.String(length=255), nullable=False, comment="Character name."
        ),
        sa.Column(
            "actor_id",
            sa.BigInteger(),
            nullable=False,
            comment="Actor playing the character.",
        ),
        sa.Column(
            "film_id",
            sa.BigInteger(),
            nullable=False,
            comment="Film the character appears in.",
        ),
        sa.ForeignKeyConstraint(
            ["actor_id"], ["actor.id"], name=op.f("fk_role_actor_id_actor")
        ),
        sa.ForeignKeyConstraint(
            ["film_id"], ["film.id"], name=op.f("fk_role_film_id_film")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_role")),
        comment="Characters played by an actor in a film (actor ↔ film association).",
    )
    op.create_index(op.f("ix_role_name"), "role", ["name"])
    op.create_index(op.f("ix_role_actor_id"), "role", ["actor_id"])
    op.create_index(op.f("ix_role_film_id"), "role", ["film_id"])

    op.create_table(
        "film_country",
        sa.Column("film_id", sa.BigInteger(), nullable=False),
        sa.Column("country_id", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(
            ["film_id"], ["film.id"], name=op.f("fk_film_country_film_id_film")
        ),
        sa.ForeignKeyConstraint(
            ["country_id"],
            ["country.id"],
            name=op.f("fk_film_country_country_id_country"),
        ),
        sa.PrimaryKeyConstraint("film_id", "country_id", name=op.f("pk_film_country")),
        comment="Countries of origin of each film.",
    )

    op.create_table(
        "film_director",
        sa.Column("film_id", sa.BigInteger(), nullable=False),
        sa.Column("director_id", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(
            ["film_id"], ["film.id"], name=op.f("fk_film_director_film_id_film")
        ),
        sa.ForeignKeyConstraint(
            ["director_id"],
            ["director.id"],
            name=op.f("fk_film_director_director_id_director"),
        ),
        sa.PrimaryKeyConstraint(
            "film_id", "director_id", name=op.f("pk_film_director")
        ),
        comment="Directors of each film.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("film_director")
    op.drop_table("film_country")
    op.drop_index(op.f("ix_role_film_id"), table_name="role")
    op.drop_index(op.f("ix_role_actor_id"), table_name="role")
    op.drop_index(op.f("ix_role_name"), table_name="role")
    op.drop_table("role")
    op.drop_index(op.f("ix_director_identity"), table_name="director")
    op.drop_table("director")
    op.drop_index(op.f("ix_country_name"), table_name="country")
    op.drop_table("country")
    op.drop_index(op.f("ix_film_year"), table_name="film")
    op.drop_table("film")
    op.drop_index(op.f("ix_actor_identity"), table_name="actor")
    op.drop_table("actor")
