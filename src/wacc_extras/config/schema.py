"""
Pydantic configuration schema for wacc-extras.

This module defines all configuration models with validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wacc_extras.runner import DEFAULT_RUNNER_PATH
from wacc_extras.wizard.state import FlowVariant


class RunnerConfig(BaseModel):
    """External test runner configuration."""

    model_config = ConfigDict(extra="forbid")

    path: str = Field(
        default=DEFAULT_RUNNER_PATH,
        min_length=1,
        description="Test runner executable, relative to the working directory",
    )


class WizardConfig(BaseModel):
    """Wizard flow configuration."""

    model_config = ConfigDict(extra="forbid")

    variant: FlowVariant = FlowVariant.RUN


class LoggingConfig(BaseModel):
    """Log output configuration. Records are written to a file only."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Config(BaseModel):
    """
    Root configuration model for wacc-extras.

    Loaded from the global YAML file and environment variables, then
    adjusted by CLI flags.
    """

    model_config = ConfigDict(extra="forbid")

    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    wizard: WizardConfig = Field(default_factory=WizardConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
