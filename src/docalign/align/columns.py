"""Column statistics: widths, expected start offsets, and the alignment verdict."""

from __future__ import annotations

from docalign.align.tokenizer import TokenMatrix


def column_widths(matrix: TokenMatrix) -> list[int]:
    """Max token length per column, over the lines that have that column."""
    widths: list[int] = []
    for row in matrix:
        for column, token in row.items():
            while len(widths) <= column:
                widths.append(0)
            widths[column] = max(widths[column], len(token.text))
    return widths


def expected_offsets(
    matrix: TokenMatrix,
    widths: list[int],
    base: int | None = None,
) -> list[int]:
    """Derive the start offset each column should have.

    Args:
        matrix: Token rows of the tag lines.
        widths: Output of :func:`column_widths`.
        base: Offset of column 0. Defaults to the first line's marker offset,
            which keeps the block's existing left margin.

    Returns:
        One offset per column; ``expected[c] = expected[c-1] + widths[c-1] + 1``.
    """
    if not widths:
        return []

    if base is None:
        first = matrix[0].get(0) if matrix else None
        base = first.offset if first is not None else 0

    expected = [base]
    for width in widths[:-1]:
        expected.append(expected[-1] + width + 1)
    return expected


def is_misaligned(matrix: TokenMatrix, expected: list[int]) -> bool:
    """True when any token starts somewhere other than its column's offset.

    A single tag line has nothing to line up against and is always aligned.
    """
    if len(matrix) < 2:
        return False

    return any(
        token.offset != expected[column]
        for row in matrix
        for column, token in row.items()
    )
