"""Bundled data files (the default seed script)."""
