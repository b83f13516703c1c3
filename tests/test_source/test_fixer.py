"""Tests for applying comment replacements to a source buffer."""

from docalign.source.fixer import apply_fixes
from docalign.source.scanner import find_block_comments
from docalign.types import Diagnostic, RuleName


def _diagnostic(comment, replacement):
    return Diagnostic(
        rule=RuleName.LINES_ALIGNMENT,
        message="JSDoc lines should be aligned",
        comment=comment,
        replacement=replacement,
    )


class TestApplyFixes:
    def test_no_fixes(self):
        assert apply_fixes("const a = 1;", []) == "const a = 1;"

    def test_replaces_comment_only(self):
        source = "a();\n/* old */\nb();\n"
        comment = find_block_comments(source)[0]
        assert apply_fixes(source, [_diagnostic(comment, " new ")]) == "a();\n/* new */\nb();\n"

    def test_multiple_fixes_any_order(self):
        source = "/* one */ x /* two */"
        first, second = find_block_comments(source)
        fixed = apply_fixes(source, [_diagnostic(second, "2"), _diagnostic(first, "1")])
        assert fixed == "/*1*/ x /*2*/"

    def test_overlapping_fix_skipped(self):
        source = "/* one */ x"
        comment = find_block_comments(source)[0]
        fixed = apply_fixes(source, [_diagnostic(comment, "A"), _diagnostic(comment, "B")])
        assert fixed == "/*A*/ x"
