"""Adapters (infrastructure) for MOVIECAT.

Provide concrete implementations of the interfaces (the SQLAlchemy movie
catalog and unit of work), plus persistence wiring: engines, metadata, the
table schema, migrations and the seed loader.

Dependency rule: may import `moviecat.interfaces`; the interfaces must not
import this package.
"""
