"""Rule: each tag family in a block comment must be column aligned."""

from __future__ import annotations

from docalign.align.engine import align_lines
from docalign.rules.base import register_rule
from docalign.types import CommentBlock, Diagnostic, RuleName

MESSAGE = "JSDoc lines should be aligned"


@register_rule(
    RuleName.LINES_ALIGNMENT,
    description="Check lines alignment in JSDoc blocks, one tag family at a time.",
    message=MESSAGE,
)
def check_lines_alignment(comment: CommentBlock, tags: list[str]) -> list[Diagnostic]:
    """Report one diagnostic per misaligned tag family.

    ``@param`` lines are aligned among themselves, ``@prop`` lines among
    themselves, and so on. Replacements are computed from ``comment`` as
    given, independently of each other.
    """
    diagnostics: list[Diagnostic] = []
    for tag in tags:
        result = align_lines(comment.value, [tag])
        if result is None or not result.misaligned:
            continue
        diagnostics.append(
            Diagnostic(
                rule=RuleName.LINES_ALIGNMENT,
                message=MESSAGE,
                comment=comment,
                replacement=result.replacement,
                tag=tag,
            )
        )
    return diagnostics
