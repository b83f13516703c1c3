"""Tests for column widths, expected offsets and the misalignment check."""

from docalign.align.columns import column_widths, expected_offsets, is_misaligned
from docalign.align.tokenizer import build_token_matrix

MISALIGNED = [
    " * @param {string} lorem Description.",
    " * @param {int} sit Description multi words.",
]

ALIGNED = [
    " * @param {string} lorem Description.",
    " * @param {int}    sit   Description multi words.",
]


class TestColumnWidths:
    def test_max_per_column(self):
        widths = column_widths(build_token_matrix(MISALIGNED))
        assert widths == [1, 6, 8, 5, len("Description multi words.")]

    def test_absent_columns_use_present_lines_only(self):
        matrix = build_token_matrix([" * @param {int}", " * @param {x} name"])
        assert column_widths(matrix) == [1, 6, 5, 4]

    def test_empty_matrix(self):
        assert column_widths([]) == []

    def test_width_covers_every_token(self):
        matrix = build_token_matrix(MISALIGNED)
        widths = column_widths(matrix)
        for row in matrix:
            for column, token in row.items():
                assert widths[column] >= len(token.text)


class TestExpectedOffsets:
    def test_recurrence(self):
        matrix = build_token_matrix(MISALIGNED)
        widths = column_widths(matrix)
        expected = expected_offsets(matrix, widths)
        assert expected == [1, 3, 10, 19, 25]
        for c in range(len(expected) - 1):
            assert expected[c + 1] - expected[c] - 1 == widths[c]

    def test_base_from_first_line(self):
        matrix = build_token_matrix(["     * @arg {a} b", " * @arg {a} b"])
        expected = expected_offsets(matrix, column_widths(matrix))
        assert expected[0] == 5

    def test_explicit_base(self):
        matrix = build_token_matrix(MISALIGNED)
        expected = expected_offsets(matrix, column_widths(matrix), base=4)
        assert expected == [4, 6, 13, 22, 28]

    def test_empty(self):
        assert expected_offsets([], []) == []


class TestIsMisaligned:
    def _check(self, lines):
        matrix = build_token_matrix(lines)
        return is_misaligned(matrix, expected_offsets(matrix, column_widths(matrix)))

    def test_misaligned(self):
        assert self._check(MISALIGNED) is True

    def test_aligned(self):
        assert self._check(ALIGNED) is False

    def test_single_line_always_aligned(self):
        assert self._check([" *   @param   {string}    lorem  Description."]) is False

    def test_shorter_line_checked_on_its_columns(self):
        assert self._check([" * @param {string} lorem Description.", " * @param {int}    sit"]) is False
        assert self._check([" * @param {string} lorem Description.", " * @param {int} sit"]) is True

    def test_order_does_not_change_verdict(self):
        assert self._check(list(reversed(MISALIGNED))) is True
        assert self._check(list(reversed(ALIGNED))) is False

    def test_extra_indentation_is_misaligned(self):
        assert self._check([ALIGNED[0], " " + ALIGNED[1]]) is True
