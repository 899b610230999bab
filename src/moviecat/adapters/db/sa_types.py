"""Portable column types for MOVIECAT tables."""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer

__all__ = ["BIGINT_ID"]


# BIGINT on Postgres; plain INTEGER on SQLite so the column aliases the rowid.
BIGINT_ID = BigInteger().with_variant(Integer(), "sqlite")
