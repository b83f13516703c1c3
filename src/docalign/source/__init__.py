"""Source buffers: comment discovery and fix application."""

from docalign.source.fixer import apply_fixes
from docalign.source.scanner import find_block_comments

__all__ = ["apply_fixes", "find_block_comments"]
