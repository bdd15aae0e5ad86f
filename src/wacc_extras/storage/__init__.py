"""Storage utilities for wacc-extras."""

from wacc_extras.storage.paths import (
    expand_path,
    get_global_config_path,
    get_wacc_extras_home,
)

__all__ = [
    "expand_path",
    "get_global_config_path",
    "get_wacc_extras_home",
]
