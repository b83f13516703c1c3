"""Column alignment of documentation tag lines."""

from docalign.align.columns import column_widths, expected_offsets, is_misaligned
from docalign.align.engine import AlignmentResult, align_lines, fix_lines
from docalign.align.rewriter import rewrite_comment
from docalign.align.selector import build_line_pattern, select_tag_lines
from docalign.align.tokenizer import Token, build_token_matrix, tokenize_line

__all__ = [
    "AlignmentResult",
    "Token",
    "align_lines",
    "build_line_pattern",
    "build_token_matrix",
    "column_widths",
    "expected_offsets",
    "fix_lines",
    "is_misaligned",
    "rewrite_comment",
    "select_tag_lines",
    "tokenize_line",
]
