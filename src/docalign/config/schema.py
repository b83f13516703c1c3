"""Pydantic model for the resolved docalign configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from docalign.config.defaults import (
    DEFAULT_EXTENSIONS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_FIX_PASSES,
    DEFAULT_MAX_WORKERS,
    DEFAULT_TAGS,
)
from docalign.errors.exceptions import ConfigError
from docalign.types import RuleName

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AlignConfig(BaseModel):
    tags: list[str] = Field(default_factory=lambda: list(DEFAULT_TAGS))
    rule: RuleName = RuleName.LINES_ALIGNMENT
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    max_fix_passes: int = Field(default=DEFAULT_MAX_FIX_PASSES, ge=1)
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("tags")
    @classmethod
    def _strip_tags(cls, value: list[str]) -> list[str]:
        # "@param" and "param" are the same tag
        tags = [tag.strip().lstrip("@") for tag in value]
        tags = [tag for tag in tags if tag]
        if not tags:
            raise ValueError("at least one tag is required")
        return list(dict.fromkeys(tags))

    @field_validator("extensions")
    @classmethod
    def _dot_extensions(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> AlignConfig:
        """Validate a merged config dict, ignoring keys this model doesn't know."""
        known = {key: value for key, value in data.items() if key in cls.model_fields}
        try:
            return cls(**known)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigError(f"Invalid configuration: {e}", key=key or None) from e
