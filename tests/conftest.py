"""
Pytest configuration and fixtures for wacc-extras tests.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from wacc_extras.runner import RunResult


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point WACC_EXTRAS_HOME at an empty directory and clear env overrides."""
    home = temp_dir / ".wacc-extras"
    home.mkdir()
    monkeypatch.setenv("WACC_EXTRAS_HOME", str(home))
    for name in ("RUNNER_PATH", "WIZARD_VARIANT", "LOGGING_LEVEL", "LOGGING_FILE"):
        monkeypatch.delenv(f"WACC_EXTRAS_{name}", raising=False)
    return home


@pytest.fixture
def sample_config() -> dict:
    """Provide a sample configuration dictionary."""
    return {
        "runner": {
            "path": "/opt/tests/test_compiler",
        },
        "wizard": {
            "variant": "save_only",
        },
        "logging": {
            "level": "debug",
        },
    }


class RecordingLauncher:
    """Launcher stand-in that records the flags it was asked to run with."""

    def __init__(self, exit_code: int = 0, error: Exception | None = None) -> None:
        self.calls: list[list[str]] = []
        self.exit_code = exit_code
        self.error = error

    def run(self, flags: list[str]) -> RunResult:
        self.calls.append(list(flags))
        if self.error is not None:
            raise self.error
        return RunResult(command=["test_compiler", *flags], exit_code=self.exit_code)


@pytest.fixture
def recording_launcher() -> RecordingLauncher:
    """Provide a launcher that records calls instead of spawning a process."""
    return RecordingLauncher()


@pytest.fixture
def failing_launcher() -> RecordingLauncher:
    """Provide a launcher whose executable cannot be started."""
    from wacc_extras.errors import RunnerLaunchError

    return RecordingLauncher(
        error=RunnerLaunchError("Failed to execute test_compiler: not found")
    )
