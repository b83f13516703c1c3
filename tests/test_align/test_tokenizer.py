"""Tests for tag line tokenization."""

import re

import pytest

from docalign.align.tokenizer import (
    Token,
    build_token_matrix,
    full_description,
    iter_bounded,
    tokenize_line,
)
from docalign.errors.exceptions import AlignmentInvariantError


class TestIterBounded:
    def test_stops_at_limit(self):
        matches = list(iter_bounded(re.compile(r"\d"), "123456", 3))
        assert [index for index, _ in matches] == [0, 1, 2]
        assert [m.group(0) for _, m in matches] == ["1", "2", "3"]

    def test_no_limit(self):
        assert len(list(iter_bounded(re.compile(r"\d"), "123456"))) == 6

    def test_fewer_matches_than_limit(self):
        assert len(list(iter_bounded(re.compile(r"\d"), "1a2", 5))) == 2


class TestFullDescription:
    def test_multi_word(self):
        line = " * @param {int}    sit   Description multi words."
        assert full_description(line) == "Description multi words."

    def test_dash_prefixed(self):
        assert full_description("* @param {string} lorem - Description.") == "- Description."

    def test_no_description(self):
        assert full_description(" * @param {int} sit") is None


class TestTokenizeLine:
    def test_full_line(self):
        row = tokenize_line(" * @param {string} lorem Description.")
        assert row == {
            0: Token(column=0, offset=1, text="*"),
            1: Token(column=1, offset=3, text="@param"),
            2: Token(column=2, offset=10, text="{string}"),
            3: Token(column=3, offset=19, text="lorem"),
            4: Token(column=4, offset=25, text="Description."),
        }

    def test_description_keeps_internal_spacing(self):
        row = tokenize_line(" * @param {int} sit Description,   multi  words.")
        assert row[4].text == "Description,   multi  words."
        assert row[4].offset == 20
        assert len(row) == 5

    def test_missing_description(self):
        row = tokenize_line(" * @param {int} sit")
        assert sorted(row) == [0, 1, 2, 3]

    def test_missing_name(self):
        row = tokenize_line(" * @param {int}")
        assert sorted(row) == [0, 1, 2]
        assert row[2].text == "{int}"

    def test_offsets_increase(self):
        row = tokenize_line("   *  @prop  {Object}  options  The options.")
        offsets = [row[c].offset for c in sorted(row)]
        assert offsets == sorted(offsets)
        assert len(set(offsets)) == len(offsets)

    def test_empty_line_is_invariant_violation(self):
        with pytest.raises(AlignmentInvariantError) as exc_info:
            tokenize_line("    ")
        assert exc_info.value.line_text == "    "


class TestBuildTokenMatrix:
    def test_jagged_rows(self):
        matrix = build_token_matrix([
            " * @param {string} lorem Description.",
            " * @param {int}",
        ])
        assert len(matrix) == 2
        assert len(matrix[0]) == 5
        assert len(matrix[1]) == 3
        assert 3 not in matrix[1]

    def test_empty(self):
        assert build_token_matrix([]) == []
