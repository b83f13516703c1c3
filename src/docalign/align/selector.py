"""Select tag lines (``@param``, ``@prop`` ...) from a comment body."""

from __future__ import annotations

import re
from collections.abc import Iterable


def build_line_pattern(tags: Iterable[str]) -> re.Pattern[str]:
    """Build the multiline pattern matching a whole tag line.

    The line must contain ``@<tag>`` followed by horizontal whitespace and at
    least one more token on the same line. Leading whitespace is part of the
    match so token offsets stay relative to the start of the line.
    """
    names = [re.escape(tag) for tag in tags if tag]
    if not names:
        raise ValueError("At least one tag is required to build a line pattern")

    alternation = "|".join(names)
    return re.compile(rf"^[^\r\n]*@(?:{alternation})[ \t]+\S[^\r\n]*", re.MULTILINE)


def select_tag_lines(value: str, pattern: re.Pattern[str]) -> list[str]:
    """Return the matching lines in order of appearance.

    An empty list means the comment has nothing to align.
    """
    return [match.group(0) for match in pattern.finditer(value)]
