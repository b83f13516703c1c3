"""Split tag lines into column tokens and build the sparse token matrix."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from docalign.errors.exceptions import AlignmentInvariantError

# Columns: 0 marker ("*"), 1 tag ("@param"), 2 type, 3 name, 4 description.
MAX_COLUMNS = 5
DESCRIPTION_COLUMN = MAX_COLUMNS - 1

_PART_RE = re.compile(r"\S+")

# Exactly four runs, then the rest of the line from the fifth run onward.
_DESCRIPTION_RE = re.compile(r"\S+\s+\S+\s+\S+\s+\S+\s+(\S.*)")


@dataclass(frozen=True)
class Token:
    """One column of a tag line."""

    column: int
    offset: int
    text: str


# One row per tag line, keyed by column index. Rows are jagged: a line
# without a description simply has no key 4.
TokenRow = dict[int, Token]
TokenMatrix = list[TokenRow]


def iter_bounded(
    pattern: re.Pattern[str], string: str, limit: int | None = None
) -> Iterator[tuple[int, re.Match[str]]]:
    """Yield ``(index, match)`` pairs, stopping after ``limit`` matches."""
    for index, match in enumerate(pattern.finditer(string)):
        if limit is not None and index >= limit:
            return
        yield index, match


def full_description(line: str) -> str | None:
    """Return the description part of a tag line, internal spacing intact."""
    match = _DESCRIPTION_RE.search(line)
    return match.group(1) if match else None


def tokenize_line(line: str) -> TokenRow:
    """Tokenize one tag line into at most five column tokens.

    Malformed lines (no type or no name) yield fewer columns; the missing ones
    are absent from the row rather than zero-width.
    """
    row: TokenRow = {}
    for column, match in iter_bounded(_PART_RE, line, MAX_COLUMNS):
        text = match.group(0)
        if column == DESCRIPTION_COLUMN:
            description = full_description(line)
            if description is None:
                raise AlignmentInvariantError(
                    "Description run found but could not be captured",
                    line_text=line,
                    column=column,
                )
            text = description
        row[column] = Token(column=column, offset=match.start(), text=text)

    if not row:
        raise AlignmentInvariantError("Tag line produced no tokens", line_text=line)

    return row


def build_token_matrix(lines: list[str]) -> TokenMatrix:
    """Tokenize every selected line, preserving line order."""
    return [tokenize_line(line) for line in lines]
