"""
Test runner launcher.

Builds the runner command line from the selected feature flags and runs it
attached to the current terminal, so its output is shown live.
"""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from wacc_extras.errors import RunnerLaunchError

if TYPE_CHECKING:
    from wacc_extras.config.schema import RunnerConfig

logger = logging.getLogger(__name__)

DEFAULT_RUNNER_PATH = "../../rust/writing-a-c-compiler-tests/test_compiler"


@dataclass
class RunResult:
    """Outcome of a completed runner process."""

    command: list[str]
    exit_code: int


class RunnerLauncher:
    """Launches the external test runner with feature flags appended."""

    def __init__(self, path: str | Path = DEFAULT_RUNNER_PATH) -> None:
        """
        Initialize the launcher.

        Args:
            path: Runner executable. Relative paths resolve against the working directory.
        """
        self.path = str(path)

    @classmethod
    def from_config(cls, config: "RunnerConfig") -> "RunnerLauncher":
        """Create a launcher from the runner configuration section."""
        return cls(path=config.path)

    def build_command(self, flags: Sequence[str]) -> list[str]:
        """Runner executable followed by the flags, in the given order."""
        return [self.path, *flags]

    def run(self, flags: Sequence[str]) -> RunResult:
        """
        Run the test runner to completion.

        Standard streams are inherited from this process. The runner's exit
        status is reported but not interpreted.

        Args:
            flags: Feature flags, in catalog order.

        Returns:
            RunResult with the command and its exit code.

        Raises:
            RunnerLaunchError: If the executable cannot be started.
        """
        command = self.build_command(flags)
        logger.info("Launching test runner: %s", " ".join(command))

        try:
            completed = subprocess.run(command, check=False)
        except OSError as e:
            logger.error("Failed to launch %s: %s", self.path, e)
            raise RunnerLaunchError(
                f"Failed to execute {Path(self.path).name}: {e}", command=command
            ) from e

        logger.info("Test runner exited with status %d", completed.returncode)
        return RunResult(command=command, exit_code=completed.returncode)
