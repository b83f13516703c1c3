"""Check and fix column alignment of JSDoc tag lines."""

from docalign.align.engine import align_lines, fix_lines
from docalign.config.schema import AlignConfig
from docalign.core import fix_source, lint_file, lint_source
from docalign.types import CommentBlock, Diagnostic, FileReport

__version__ = "0.1.0"

__all__ = [
    "AlignConfig",
    "CommentBlock",
    "Diagnostic",
    "FileReport",
    "align_lines",
    "fix_lines",
    "fix_source",
    "lint_file",
    "lint_source",
]
