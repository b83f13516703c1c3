"""Configuration — defaults, layered hierarchy, and validation."""

from docalign.config.hierarchy import load_config_hierarchy
from docalign.config.loader import load_config_yaml
from docalign.config.schema import AlignConfig

__all__ = ["AlignConfig", "load_config_hierarchy", "load_config_yaml"]
