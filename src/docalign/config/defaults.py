"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Tag keywords checked for alignment (primary keyword plus aliases)
DEFAULT_TAGS = ["param", "arg", "argument", "property", "prop"]

# Rule used when none is configured
DEFAULT_RULE = "lines-alignment"

# Source files picked up when a directory is given
DEFAULT_EXTENSIONS = [".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"]

# Fix settings
DEFAULT_MAX_FIX_PASSES = 10

# Default concurrency settings
DEFAULT_MAX_WORKERS = 4

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "tags": list(DEFAULT_TAGS),
        "rule": DEFAULT_RULE,
        "extensions": list(DEFAULT_EXTENSIONS),
        "max_fix_passes": DEFAULT_MAX_FIX_PASSES,
        "max_workers": DEFAULT_MAX_WORKERS,
        "log_level": DEFAULT_LOG_LEVEL,
    }
