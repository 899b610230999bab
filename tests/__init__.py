"""MOVIECAT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a database (SQLite files, Postgres).
- functional/   : The ``moviecat`` CLI driven as a user would drive it.
- contract/     : MovieCatalog behavior shared by every backend.
- e2e/          : Top-level CLI options (logging, flight recorder).
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O).
- Catalog expectations are written against the bundled sample catalog
  (``moviecat/data/data.sql``), see ``tests/fixtures/catalog.py``.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, functional, contract, e2e, property, slow
"""
