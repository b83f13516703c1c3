"""Built-in alignment rules — auto-registered on import."""

from docalign.rules.base import Rule, fix_comment, get_rule, list_rules, register_rule
from docalign.rules.lines_alignment import check_lines_alignment
from docalign.rules.params_alignment import check_params_alignment

__all__ = [
    "Rule",
    "check_lines_alignment",
    "check_params_alignment",
    "fix_comment",
    "get_rule",
    "list_rules",
    "register_rule",
]
