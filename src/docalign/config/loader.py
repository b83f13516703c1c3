"""Explicit YAML config loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from docalign.config.schema import AlignConfig


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load any YAML file safely."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Expected YAML mapping, got {type(raw).__name__} in {path}")

    return raw


def load_config_yaml(path: str | Path) -> AlignConfig:
    """Load a config YAML file and return a validated AlignConfig."""
    return AlignConfig.from_mapping(load_yaml(path))
