"""Fixtures for end-to-end CLI logging tests.

Registers a test-only ``log-demo`` subcommand on the top-level ``moviecat``
group. It logs one message per level on a MOVIECAT logger and a few on a
third-party logger, so the console and flight-recorder output can be checked
for each combination of global options.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from moviecat.entrypoints.cli.main import moviecat

# pylint: disable=redefined-outer-name

OWN_LOGGER = "moviecat.demo"
THIRD_PARTY_LOGGER = "some.thirdparty"


@click.command()
def log_demo():
    """Log one message per level, then a trailing DEBUG message."""
    own = logging.getLogger(OWN_LOGGER)
    other = logging.getLogger(THIRD_PARTY_LOGGER)
    own.debug("demo debug message")
    own.info("demo info message")
    other.debug("third-party debug message")
    other.info("third-party info message")
    own.warning("demo warning message")
    own.error("demo error message")
    own.critical("demo critical message")
    own.debug("demo trailing debug message")


def _unregister(group: click.Group, name: str) -> None:
    """Drop ``name`` from the group and from any click-extra help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Make ``moviecat log-demo`` available for the duration of a test."""
    moviecat.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(moviecat, "log-demo")


@pytest.fixture
def runner():
    """A CliRunner with no MOVIECAT_* logging variables set."""
    return CliRunner(
        env={
            "MOVIECAT_LOGGER_LEVEL": None,
            "MOVIECAT_FLIGHT_RECORDER": None,
            "MOVIECAT_FORCE_FLUSH_FLIGHT_RECORDER": None,
            "MOVIECAT_LOG_PATH": None,
        }
    )


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's isolated filesystem."""
    with runner.isolated_filesystem():
        yield
