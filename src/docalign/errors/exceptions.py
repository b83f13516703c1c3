"""Custom exception hierarchy for docalign."""

from __future__ import annotations

from typing import Any


class DocAlignError(Exception):
    """Base exception for all docalign errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class AlignmentInvariantError(DocAlignError):
    """Internal invariant broken while aligning a comment; abort that comment.

    Examples: a selected tag line yields no tokens, negative padding, the
    rewrite pattern matches a different number of lines than were measured.
    """

    def __init__(
        self,
        message: str = "",
        line_text: str | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.line_text = line_text
        self.column = column


class CommentLevelError(DocAlignError):
    """Error isolated to a single comment block; other comments continue."""

    def __init__(
        self,
        message: str = "",
        line: int = 0,
        inner: DocAlignError | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.inner = inner


class ConfigError(DocAlignError):
    """Invalid configuration, fail fast.

    Examples: unknown rule name, empty tag set, non-positive pass limit.
    """

    def __init__(self, message: str = "", key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
