"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.docalign/config.yaml)
  3. Project config   (./docalign.yaml searched upward, or an explicit file)
  4. Environment variables (DOCALIGN_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from docalign.config.defaults import get_defaults
from docalign.config.loader import load_yaml

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".docalign" / "config.yaml"
_PROJECT_CONFIG_NAME = "docalign.yaml"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "DOCALIGN_TAGS": "tags",
    "DOCALIGN_RULE": "rule",
    "DOCALIGN_EXTENSIONS": "extensions",
    "DOCALIGN_MAX_FIX_PASSES": "max_fix_passes",
    "DOCALIGN_MAX_WORKERS": "max_workers",
    "DOCALIGN_LOG_LEVEL": "log_level",
}

# Keys that should be parsed as specific types
_TYPE_MAP: dict[str, type] = {
    "max_fix_passes": int,
    "max_workers": int,
}

# Keys holding comma separated lists
_LIST_KEYS = {"tags", "extensions"}


def load_config_hierarchy(
    config_path: str | Path | None = None, **runtime_overrides: Any
) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    An explicit ``config_path`` replaces the project config search and must
    exist. Returns a merged dict with the final resolved values.
    """
    config = get_defaults()

    # Layer 2: Global config
    global_cfg = _load_yaml_config(_GLOBAL_CONFIG_PATH)
    if global_cfg:
        config.update(global_cfg)

    # Layer 3: Project config (explicit, or search from cwd upward)
    if config_path is not None:
        config.update(load_yaml(config_path))
    elif project_path := _find_project_config():
        project_cfg = _load_yaml_config(project_path)
        if project_cfg:
            config.update(project_cfg)

    # Layer 4: Environment variables
    env_cfg = _load_env_vars()
    config.update(env_cfg)

    # Layer 5: Runtime arguments (highest priority)
    # Filter out None and empty tuples from click multi-options
    for key, value in runtime_overrides.items():
        if value is None or value == ():
            continue
        config[key] = list(value) if isinstance(value, tuple) else value

    return config


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load a YAML config file if it exists."""
    if not path.exists() or not path.is_file():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        if isinstance(data, dict):
            return data
        logger.warning("Config file %s is not a mapping, ignoring", path)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
    return None


def _find_project_config() -> Path | None:
    """Search for docalign.yaml from cwd upward."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.exists():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read DOCALIGN_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        result[config_key] = _coerce_env_value(config_key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    """Coerce an environment variable string to the appropriate type."""
    if key in _LIST_KEYS:
        return [item.strip() for item in value.split(",") if item.strip()]

    target_type = _TYPE_MAP.get(key)
    if target_type:
        try:
            return target_type(value)
        except (ValueError, TypeError):
            logger.warning(
                "Cannot convert env var for '%s' to %s: %s", key, target_type.__name__, value
            )
            return value

    return value
