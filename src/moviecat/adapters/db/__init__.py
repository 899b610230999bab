"""Database plumbing shared by the SQLAlchemy adapters.

Engine factory, dialect helpers, the shared `MetaData`, the table schema,
Alembic migrations and the seed loader.
"""
