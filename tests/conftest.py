"""Global pytest fixtures for MOVIECAT."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.catalog",
]


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize(
            "engine",
            ["sqlite_engine_file", pytest.param("postgres_engine", marks=pytest.mark.postgres)],
            indirect=True,
        )
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)


# Default marks by top-level folder (tests/<folder>/...)
FOLDER_MARKERS = {
    "unit": "unit",
    "integration": "integration",
    "contract": "contract",
    "functional": "functional",
    "e2e": "e2e",
}
TESTS_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each item after the folder it lives in, unless already marked."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        marker = FOLDER_MARKERS.get(folder)
        if marker and item.get_closest_marker(marker) is None:
            item.add_marker(getattr(pytest.mark, marker))
