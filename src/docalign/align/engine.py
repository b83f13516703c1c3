"""Alignment pipeline for one comment: select → tokenize → measure → check → rewrite."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from docalign.align.columns import column_widths, expected_offsets, is_misaligned
from docalign.align.rewriter import leading_indentation, rewrite_comment
from docalign.align.selector import build_line_pattern, select_tag_lines
from docalign.align.tokenizer import TokenMatrix, build_token_matrix

logger = logging.getLogger(__name__)


@dataclass
class AlignmentResult:
    """Everything measured for one group of tag lines."""

    lines: list[str]
    matrix: TokenMatrix
    widths: list[int]
    expected: list[int]
    misaligned: bool
    indentation: str = ""
    replacement: str | None = None
    tags: list[str] = field(default_factory=list)


def align_lines(value: str, tags: Iterable[str]) -> AlignmentResult | None:
    """Check one group of tag lines in a comment body and build its fix.

    Args:
        value: Comment text between the ``/*`` and ``*/`` delimiters.
        tags: Tag keywords aligned together as one group.

    Returns:
        None when the comment has no matching tag lines, otherwise the
        measurements and, when misaligned, the full replacement body.
    """
    tags = list(tags)
    pattern = build_line_pattern(tags)
    lines = select_tag_lines(value, pattern)
    if not lines:
        return None

    matrix = build_token_matrix(lines)
    widths = column_widths(matrix)
    expected = expected_offsets(matrix, widths)
    indentation = leading_indentation(lines[0])

    result = AlignmentResult(
        lines=lines,
        matrix=matrix,
        widths=widths,
        expected=expected,
        misaligned=is_misaligned(matrix, expected),
        indentation=indentation,
        tags=tags,
    )

    logger.debug(
        "Tags %s: %d lines, widths=%s, expected=%s, misaligned=%s",
        tags, len(lines), widths, expected, result.misaligned,
    )

    if result.misaligned:
        result.replacement = rewrite_comment(value, pattern, expected, matrix, indentation)

    return result


def fix_lines(value: str, tags: Iterable[str]) -> str:
    """Return ``value`` with the tag group aligned (unchanged when already aligned)."""
    result = align_lines(value, tags)
    if result is None or result.replacement is None:
        return value
    return result.replacement
