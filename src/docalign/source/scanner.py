"""Locate block comments in JavaScript / TypeScript source text."""

from __future__ import annotations

import logging
import re

from docalign.types import CommentBlock

logger = logging.getLogger(__name__)

# Strings and line comments are matched only so their contents are skipped.
# Regex literals are not recognised.
_SOURCE_RE = re.compile(
    r"""
    (?P<string>
        "(?:\\.|[^"\\\n])*"
      | '(?:\\.|[^'\\\n])*'
      | `(?:\\.|[^`\\])*`
    )
    | (?P<line_comment>//[^\n]*)
    | (?P<block>/\*(?P<value>[\s\S]*?)\*/)
    """,
    re.VERBOSE,
)


def _position(source: str, offset: int) -> tuple[int, int]:
    """1-based line and column of ``offset``."""
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def find_block_comments(source: str) -> list[CommentBlock]:
    """Return every ``/* ... */`` comment in ``source``, in order."""
    comments: list[CommentBlock] = []
    for match in _SOURCE_RE.finditer(source):
        if match.group("block") is None:
            continue
        line, column = _position(source, match.start())
        comments.append(
            CommentBlock(
                value=match.group("value"),
                start=match.start(),
                end=match.end(),
                line=line,
                column=column,
            )
        )

    logger.debug("Found %d block comments", len(comments))
    return comments
