"""
Configuration for wacc-extras.

Layered loading of the pydantic ``Config`` model from YAML and the
environment.
"""

from wacc_extras.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    load_config,
    load_yaml_file,
)
from wacc_extras.config.merger import deep_merge, get_nested_value, set_nested_value
from wacc_extras.config.schema import Config, LoggingConfig, RunnerConfig, WizardConfig

__all__ = [
    "Config",
    "ConfigurationError",
    "LoggingConfig",
    "RunnerConfig",
    "WizardConfig",
    "apply_env_overrides",
    "deep_merge",
    "get_nested_value",
    "load_config",
    "load_yaml_file",
    "set_nested_value",
]
