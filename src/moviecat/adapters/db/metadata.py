"""The `MetaData` every catalog table is attached to.

Constraint and index names are derived from the naming convention below, so
the migration scripts can spell them out and stay in step with the tables:

    ix_actor_identity, fk_role_actor_id_actor, pk_film_country, ...
"""

from sqlalchemy import MetaData

CONVENTION = {
    "pk": "pk_%(table_name)s",
    "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
}

metadata = MetaData(naming_convention=CONVENTION)
