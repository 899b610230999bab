"""Bootstrap (composition root) for MOVIECAT.

Assembles the application at runtime: builds the single SQLAlchemy engine,
hands it to units of work, reads configuration, and owns the engine's
lifecycle (created at startup, disposed at shutdown).

Import rules:
- Entry points import *this* package rather than wiring adapters themselves.
- This package may import: `moviecat.adapters`, `moviecat.interfaces` and
  `moviecat.config`.
- Inner layers must not import `moviecat.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
