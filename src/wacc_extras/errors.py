"""
Exceptions for wacc-extras.

Every error here is fatal to the wizard: the session reports the message
and the process exits with a non-zero status.
"""

from pathlib import Path


class WaccExtrasError(Exception):
    """Base exception for wizard failures."""

    pass


class SettingsEncodeError(WaccExtrasError):
    """Selected feature kinds could not be serialized."""

    pass


class SettingsDecodeError(WaccExtrasError, ValueError):
    """Settings content could not be parsed back into feature kinds."""

    pass


class SettingsWriteError(WaccExtrasError):
    """The settings file could not be written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class RunnerLaunchError(WaccExtrasError):
    """The external test runner could not be started."""

    def __init__(self, message: str, command: list[str] | None = None):
        super().__init__(message)
        self.command = command or []
