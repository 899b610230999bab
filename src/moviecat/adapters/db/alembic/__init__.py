"""Alembic migration scripts for MOVIECAT."""
