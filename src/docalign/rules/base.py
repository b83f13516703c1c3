"""Rule registry and the shared comment-fixing loop."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from docalign.types import CommentBlock, Diagnostic, RuleInfo, RuleName

logger = logging.getLogger(__name__)

CheckFn = Callable[[CommentBlock, list[str]], list[Diagnostic]]


@dataclass(frozen=True)
class Rule:
    info: RuleInfo
    check: CheckFn


# Registry of alignment rules
_RULE_REGISTRY: dict[RuleName, Rule] = {}


def register_rule(
    name: RuleName, description: str, message: str, fixable: bool = True
) -> Callable[[CheckFn], CheckFn]:
    """Decorator to register a rule's check function."""

    def decorator(fn: CheckFn) -> CheckFn:
        info = RuleInfo(name=name, description=description, message=message, fixable=fixable)
        _RULE_REGISTRY[name] = Rule(info=info, check=fn)
        return fn

    return decorator


def get_rule(name: str | RuleName) -> Rule | None:
    try:
        return _RULE_REGISTRY.get(RuleName(name))
    except ValueError:
        return None


def list_rules() -> list[RuleInfo]:
    return [rule.info for rule in _RULE_REGISTRY.values()]


def fix_comment(comment: CommentBlock, rule: Rule, tags: list[str]) -> str:
    """Apply a rule's fixes to one comment until it reports nothing.

    Each diagnostic carries a whole-comment replacement, so they are applied
    one at a time and the comment is re-checked in between. The loop is
    bounded by the number of tag groups the rule can report on.
    """
    current = comment
    for _ in range(len(tags) + 1):
        diagnostics = rule.check(current, tags)
        if not diagnostics:
            break
        current = current.model_copy(update={"value": diagnostics[0].replacement})
    else:
        logger.warning(
            "Comment at line %d still misaligned after %d fixes", comment.line, len(tags) + 1
        )
    return current.value
