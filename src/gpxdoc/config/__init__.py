"""
gpxdoc.config - Configuration loading and defaults
"""

from gpxdoc.config.defaults import DEFAULT_CONFIG
from gpxdoc.config.loader import (
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    load_config,
    merge_configs,
)

__all__ = [
    "load_config",
    "find_config_file",
    "merge_configs",
    "DEFAULT_CONFIG",
    "_apply_env_overrides",
    "_try_parse_env_value",
]
