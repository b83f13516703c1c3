"""Shared Pydantic models for docalign."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# ── Enums ──


class RuleName(StrEnum):
    LINES_ALIGNMENT = "lines-alignment"
    PARAMS_ALIGNMENT = "params-alignment"


# ── Source models ──


class CommentBlock(BaseModel):
    """One ``/* ... */`` comment located in a source buffer."""

    model_config = ConfigDict(frozen=True)

    value: str
    start: int = 0
    end: int = 0
    line: int = 1
    column: int = 1

    @property
    def is_doc(self) -> bool:
        """True for ``/** ... */`` documentation comments."""
        return self.value.startswith("*") and not self.value.startswith("**")

    @property
    def text(self) -> str:
        return f"/*{self.value}*/"


class Diagnostic(BaseModel):
    """A misaligned comment plus the body that fixes it."""

    model_config = ConfigDict(frozen=True)

    rule: RuleName
    message: str
    comment: CommentBlock
    replacement: str
    tag: str | None = None

    @property
    def line(self) -> int:
        return self.comment.line

    @property
    def column(self) -> int:
        return self.comment.column

    @property
    def replacement_text(self) -> str:
        return f"/*{self.replacement}*/"


class CommentFailure(BaseModel):
    """A comment that could not be processed."""

    line: int
    message: str


class FileReport(BaseModel):
    path: Path | None = None
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    errors: list[CommentFailure] = Field(default_factory=list)
    comments_checked: int = 0
    fixed: bool = False
    failed: bool = False
    error: str | None = None

    @property
    def has_problems(self) -> bool:
        return bool(self.diagnostics or self.errors or self.failed)


class RuleInfo(BaseModel):
    name: RuleName
    description: str
    message: str
    fixable: bool = True
