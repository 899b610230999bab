"""MovieCatalog contract tests."""
