"""
gpxdoc.config.loader - Locate, load, and merge configuration.

Configuration is read from a `.gpxdoc.toml` file, merged over the
defaults, and finally overridden by GPXDOC_<SECTION>_<KEY> environment
variables.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from gpxdoc.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG, ENV_PREFIX
from gpxdoc.errors import InvalidInputError

logger = logging.getLogger(__name__)


def find_config_file(start: Path) -> Optional[Path]:
    """Find the nearest config file in start or any parent directory.

    Args:
        start: Directory (or file) to begin the search from.

    Returns:
        Path to the config file, or None if there is none.
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge override into a copy of base; override wins on conflicts."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(value: str) -> Any:
    """Interpret an environment variable value.

    JSON arrays and objects, booleans, and numbers are converted; any
    other value (including malformed JSON) is returned unchanged.
    """
    stripped = value.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    for cast in (int, float):
        try:
            return cast(stripped)
        except ValueError:
            pass
    return value


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply GPXDOC_<SECTION>_<KEY> environment variables to config.

    The first underscore-separated word after the prefix names the
    section; the remainder names the key.
    """
    for var, raw in os.environ.items():
        if not var.startswith(ENV_PREFIX):
            continue
        section, _, key = var[len(ENV_PREFIX) :].lower().partition("_")
        if not section or not key:
            continue
        target = config.setdefault(section, {})
        if not isinstance(target, dict):
            continue
        target[key] = _try_parse_env_value(raw)
        logger.debug("Config override from %s: %s.%s", var, section, key)
    return config


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration, falling back to defaults.

    Args:
        config_path: Explicit config file, or None to use defaults only.

    Returns:
        Merged configuration dictionary.

    Raises:
        InvalidInputError: If the file cannot be read or is not valid TOML.
    """
    user_config: Dict[str, Any] = {}
    if config_path is not None:
        try:
            content = Path(config_path).read_text(encoding="utf-8")
            user_config = tomlkit.parse(content).unwrap()
        except OSError as e:
            raise InvalidInputError(f"Cannot read config {config_path}: {e}") from e
        except TOMLKitError as e:
            raise InvalidInputError(f"Invalid TOML in {config_path}: {e}") from e

    config = merge_configs(DEFAULT_CONFIG, user_config)
    return _apply_env_overrides(config)
