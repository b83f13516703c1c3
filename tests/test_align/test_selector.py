"""Tests for tag line selection."""

import pytest

from docalign.align.selector import build_line_pattern, select_tag_lines

BODY = (
    "*\n"
    " * Function description.\n"
    " *\n"
    " * @param {string} lorem Description.\n"
    " * @param {int} sit\n"
    " * @returns {void}\n"
    " "
)


class TestBuildLinePattern:
    def test_requires_a_tag(self):
        with pytest.raises(ValueError):
            build_line_pattern([])

    def test_escapes_tag_names(self):
        pattern = build_line_pattern(["a.b"])
        assert pattern.search(" * @a.b {x} y")
        assert not pattern.search(" * @axb {x} y")

    def test_tag_needs_following_token(self):
        pattern = build_line_pattern(["param"])
        assert not pattern.search(" * @param")
        assert not pattern.search(" * @param   ")

    def test_longer_tag_name_not_matched(self):
        pattern = build_line_pattern(["param"])
        assert not pattern.search(" * @params {x} y")


class TestSelectTagLines:
    def test_selects_in_order(self):
        lines = select_tag_lines(BODY, build_line_pattern(["param"]))
        assert lines == [
            " * @param {string} lorem Description.",
            " * @param {int} sit",
        ]

    def test_keeps_leading_whitespace(self):
        lines = select_tag_lines("*\n     * @arg {a} b\n", build_line_pattern(["arg"]))
        assert lines == ["     * @arg {a} b"]

    def test_multiple_tags(self):
        lines = select_tag_lines(BODY, build_line_pattern(["param", "returns"]))
        assert len(lines) == 3
        assert lines[-1] == " * @returns {void}"

    def test_no_match_returns_empty(self):
        assert select_tag_lines("*\n * No params.\n ", build_line_pattern(["param"])) == []

    def test_carriage_return_not_captured(self):
        body = "*\r\n * @param {a} b\r\n * @param {c} d\r\n "
        lines = select_tag_lines(body, build_line_pattern(["param"]))
        assert lines == [" * @param {a} b", " * @param {c} d"]
