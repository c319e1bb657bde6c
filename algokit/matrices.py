"""Building and rearranging two-dimensional grids of numbers."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for index in range(num_rows):
        if index == 0:
            rows.append([1])
        else:
            rows.append([1] + [a + b for a, b in pairwise(rows[-1])] + [1])
    return rows


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix.

    Raises ValueError if the rows do not all have the same length.
    """
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows of the matrix must have the same length")
    return [list(column) for column in zip(*matrix)]