"""Rule: all tag lines of a doc comment must share one set of columns."""

from __future__ import annotations

from docalign.align.engine import align_lines
from docalign.rules.base import register_rule
from docalign.types import CommentBlock, Diagnostic, RuleName

MESSAGE = "JSDoc params should be aligned"


@register_rule(
    RuleName.PARAMS_ALIGNMENT,
    description="Validate alignment of every tag line in a JSDoc block in one pass.",
    message=MESSAGE,
)
def check_params_alignment(comment: CommentBlock, tags: list[str]) -> list[Diagnostic]:
    # Plain /* */ comments are not documentation.
    if not comment.is_doc:
        return []

    result = align_lines(comment.value, tags)
    if result is None or not result.misaligned:
        return []

    return [
        Diagnostic(
            rule=RuleName.PARAMS_ALIGNMENT,
            message=MESSAGE,
            comment=comment,
            replacement=result.replacement,
        )
    ]
