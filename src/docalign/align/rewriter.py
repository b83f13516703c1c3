"""Regenerate tag lines at their expected column offsets."""

from __future__ import annotations

import re

from docalign.align.tokenizer import TokenMatrix, TokenRow
from docalign.errors.exceptions import AlignmentInvariantError

_INDENT_RE = re.compile(r"^\s*")


def create_sequence(char: str, length: int) -> str:
    """Repeat ``char`` ``length`` times; negative lengths are a defect."""
    if length < 0:
        raise AlignmentInvariantError(f"Cannot pad with a negative length ({length})")
    return char * length


def leading_indentation(line: str) -> str:
    """Return the whitespace prefix of ``line``."""
    return _INDENT_RE.match(line).group(0)  # type: ignore[union-attr]


def render_line(row: TokenRow, expected: list[int], indentation: str) -> str:
    """Rebuild one tag line: indentation, then each token at its offset."""
    rendered = ""
    for column in sorted(row):
        token = row[column]
        if column == 0:
            rendered = indentation
        else:
            rendered += create_sequence(" ", expected[column] - len(rendered))
        rendered += token.text
    return rendered


def rewrite_comment(
    value: str,
    pattern: re.Pattern[str],
    expected: list[int],
    matrix: TokenMatrix,
    indentation: str,
) -> str:
    """Replace every tag line of ``value`` with its aligned rendering.

    All other comment content is left untouched. The whole replacement is
    built before anything is returned, so a failure never leaks a partial
    rewrite.
    """
    rendered = [render_line(row, expected, indentation) for row in matrix]

    matches = list(pattern.finditer(value))
    if len(matches) != len(rendered):
        raise AlignmentInvariantError(
            f"Pattern matched {len(matches)} lines but {len(rendered)} were measured"
        )

    parts: list[str] = []
    cursor = 0
    for match, line in zip(matches, rendered, strict=True):
        parts.append(value[cursor : match.start()])
        parts.append(line)
        cursor = match.end()
    parts.append(value[cursor:])

    return "".join(parts)
