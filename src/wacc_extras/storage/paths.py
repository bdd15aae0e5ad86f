"""
Path utilities for wacc-extras.

Provides consistent path resolution for the configuration directory and
user-supplied paths.
"""

import os
from pathlib import Path

HOME_ENV_VAR = "WACC_EXTRAS_HOME"


def get_wacc_extras_home() -> Path:
    """
    Get the wacc-extras home directory.

    Resolution order:
    1. WACC_EXTRAS_HOME environment variable
    2. Default: ~/.wacc-extras

    Returns:
        Path to the home directory.
    """
    env_home = os.environ.get(HOME_ENV_VAR)
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".wacc-extras"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.wacc-extras/config.yaml
    """
    return get_wacc_extras_home() / "config.yaml"


def expand_path(path: str | Path) -> Path:
    """
    Expand a path string, handling ~ and environment variables.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded Path. Relative paths stay relative.
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    return Path(path)
