"""
Configuration loader for wacc-extras.

Loads and merges configuration from multiple sources:
1. Default values
2. Global config (~/.wacc-extras/config.yaml)
3. Environment variables (WACC_EXTRAS_*)

CLI flags are applied on top by the command that launches the wizard.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from wacc_extras.config.merger import deep_merge, set_nested_value
from wacc_extras.config.schema import Config
from wacc_extras.storage.paths import HOME_ENV_VAR, get_global_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "WACC_EXTRAS_"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary. Missing files yield an empty dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return content


def _known_key_paths() -> dict[str, str]:
    """Map of environment variable name to config key path for every setting."""
    paths: dict[str, str] = {}
    for section, section_field in Config.model_fields.items():
        for name in section_field.annotation.model_fields:  # type: ignore[union-attr]
            key_path = f"{section}.{name}"
            env_name = ENV_PREFIX + key_path.replace(".", "_").upper()
            paths[env_name] = key_path
    return paths


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Environment variables follow the pattern WACC_EXTRAS_<SECTION>_<KEY>,
    e.g. WACC_EXTRAS_RUNNER_PATH sets ``runner.path``. Unknown variables
    under the prefix are ignored.

    Args:
        config: Configuration dictionary to modify.

    Returns:
        Configuration with environment overrides applied.
    """
    known = _known_key_paths()

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key == HOME_ENV_VAR:
            continue

        key_path = known.get(key)
        if key_path is None:
            logger.debug("Ignoring unknown environment variable %s", key)
            continue

        config = set_nested_value(config, key_path, value)

    return config


def load_config(config_path: Path | None = None, skip_env: bool = False) -> Config:
    """
    Load and merge configuration from all sources.

    Loading order (later overrides earlier):
    1. Default values from Config model
    2. Global config file
    3. Environment variables (WACC_EXTRAS_*)

    Args:
        config_path: Config file to read. Defaults to the global config path.
        skip_env: Skip environment variable overrides.

    Returns:
        Merged and validated Config object.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict = Config().model_dump(mode="json")

    path = config_path or get_global_config_path()
    if path.exists():
        config_dict = deep_merge(config_dict, load_yaml_file(path))
        logger.debug("Loaded configuration from %s", path)

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
