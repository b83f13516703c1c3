"""Error handling — exception hierarchy for alignment and configuration."""

from docalign.errors.exceptions import (
    AlignmentInvariantError,
    CommentLevelError,
    ConfigError,
    DocAlignError,
)

__all__ = [
    "DocAlignError",
    "AlignmentInvariantError",
    "CommentLevelError",
    "ConfigError",
]
