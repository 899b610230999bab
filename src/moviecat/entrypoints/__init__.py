"""Entrypoints (inbound adapters) for MOVIECAT.

Expose the application to the outside world through the command line. Parse
and validate inputs, call the catalog through the composition root, and
present results.

Dependency rule: may import `moviecat.bootstrap` and `moviecat.interfaces`;
avoid importing `moviecat.adapters` directly.
"""
