"""End-to-end tests for the global options of the ``moviecat`` command.

Each test invokes the ``log-demo`` command (see conftest) under a combination
of verbosity flags, logger-level overrides and flight-recorder settings, then
inspects the console output or the flight-recorder file.
"""

import re
from pathlib import Path

import pytest

from moviecat.entrypoints.cli.main import moviecat

# pylint: disable=unused-argument,redefined-outer-name

RECORDER = "flight_recorder.log"


def found(pattern: str, text: str) -> bool:
    """True if the regex ``pattern`` occurs anywhere in ``text``."""
    return re.search(pattern, text, re.MULTILINE) is not None


def read_recorder(path: str = RECORDER) -> str:
    """Contents of the flight-recorder file."""
    return Path(path).read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "flags, shown, hidden",
    [
        ([], "WARNING", "INFO"),
        (["-v"], "INFO", "DEBUG"),
        (["-vv"], "DEBUG", None),
        (["-q"], "ERROR", "WARNING"),
        (["-qq"], "CRITICAL", "ERROR"),
    ],
    ids=["default", "v", "vv", "q", "qq"],
)
def test_console_verbosity(registered_log_demo, runner, fs, flags, shown, hidden):
    """-v lowers and -q raises the console threshold one level per repetition."""
    result = runner.invoke(moviecat, flags + ["log-demo"])
    assert result.exit_code == 0, result.output
    assert found(shown, result.output)
    if hidden is not None:
        assert not found(hidden, result.output)


@pytest.mark.parametrize(
    "env, flags",
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"MOVIECAT_LOGGER_LEVEL": "some.thirdparty=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_override(registered_log_demo, runner, fs, env, flags):
    """A per-logger level hides that logger's DEBUG records but keeps INFO."""
    result = runner.invoke(moviecat, flags + ["log-demo"], env=env)
    assert result.exit_code == 0, result.output
    assert "third-party debug message" not in result.output
    assert "third-party info message" in result.output
    assert "demo debug message" in result.output


def test_third_party_records_are_prefixed(registered_log_demo, runner, fs):
    """Records from other libraries carry a [library] prefix on the console."""
    result = runner.invoke(moviecat, ["-v", "log-demo"])
    assert result.exit_code == 0, result.output
    assert found(r"\[some\] third-party info message", result.output)
    assert not found(r"\[moviecat\]", result.output)


def test_debug_mode_shows_source_location(registered_log_demo, runner, fs):
    """--debug adds the source file and line to console records."""
    result = runner.invoke(moviecat, ["--debug", "log-demo"])
    assert result.exit_code == 0, result.output
    assert found(r"conftest\.py:\d+\b", result.output)


def test_source_location_hidden_by_default(registered_log_demo, runner, fs):
    """Without --debug no source locations are printed."""
    result = runner.invoke(moviecat, ["log-demo"])
    assert result.exit_code == 0, result.output
    assert not found(r"conftest\.py:\d+\b", result.output)


def test_flight_recorder_flushes_on_warning(registered_log_demo, runner, fs):
    """Buffered DEBUG records reach the file once a WARNING is logged."""
    result = runner.invoke(
        moviecat, ["--log-path", RECORDER, "-L", "some.thirdparty=INFO", "log-demo"]
    )
    assert result.exit_code == 0, result.output
    content = read_recorder()
    assert "demo debug message" in content
    assert "third-party info message" in content
    assert "third-party debug message" not in content
    for level in ("warning", "error", "critical"):
        assert f"demo {level} message" in content
    # logged after the last flush and never flushed
    assert "demo trailing debug message" not in content


@pytest.mark.parametrize(
    "env, flags",
    [({}, ["--force-flush"]), ({"MOVIECAT_FORCE_FLUSH_FLIGHT_RECORDER": "true"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_force_flush_writes_remaining_records(registered_log_demo, runner, fs, env, flags):
    """With force-flush the trailing DEBUG record is written on exit."""
    result = runner.invoke(moviecat, ["--log-path", RECORDER] + flags + ["log-demo"], env=env)
    assert result.exit_code == 0, result.output
    assert "demo trailing debug message" in read_recorder()


@pytest.mark.parametrize(
    "env, flags",
    [({}, ["--no-flight-recorder"]), ({"MOVIECAT_FLIGHT_RECORDER": "0"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_can_be_disabled(registered_log_demo, runner, fs, env, flags):
    """A disabled flight recorder never creates its file."""
    result = runner.invoke(moviecat, ["--log-path", RECORDER] + flags + ["log-demo"], env=env)
    assert result.exit_code == 0, result.output
    assert not Path(RECORDER).exists()


def test_flight_recorder_truncates_between_runs(registered_log_demo, runner, fs):
    """Each run starts a fresh file instead of appending."""
    sizes = []
    for _ in range(2):
        result = runner.invoke(moviecat, ["--log-path", RECORDER, "log-demo"])
        assert result.exit_code == 0, result.output
        sizes.append(len(read_recorder().splitlines()))
    assert sizes[0] == sizes[1]


def test_startup_diagnostics(registered_log_demo, runner, fs):
    """The startup summary and diagnostics land in the flight recorder."""
    result = runner.invoke(
        moviecat,
        ["--log-path", "startup.log", "--flight-recorder", "--force-flush", "log-demo"],
        env={"MOVIECAT_LOGGER_LEVEL": "some.thirdparty=INFO"},
    )
    assert result.exit_code == 0, result.output
    content = read_recorder("startup.log")
    for pattern in (
        r"MOVIECAT \d+\.\d+\.\d+ - console=WARNING, flight-recorder=ON",
        r"Python: \d+\.\d+\.\d+",
        r"Platform: .+",
        r"PID: \d+",
        r"CWD: .+",
        r"SQLAlchemy: \d+\.\d+\.\d+",
        r"Alembic: \d+\.\d+\.\d+",
        r"Handlers: \['RichHandler', 'MemoryHandler'\]",
        r"Flight recorder: path=startup\.log, capacity=2000, flush_on_close=True",
        r"Per-logger overrides: \{'sqlalchemy': 'WARNING', 'alembic': 'WARNING', "
        r"'some\.thirdparty': 'INFO'\}",
    ):
        assert found(pattern, content), pattern
