import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.matrices import pascal_triangle, transpose


@st.composite
def rectangular(draw):
    rows = draw(st.integers(1, 6))
    cols = draw(st.integers(1, 6))
    return [draw(st.lists(st.integers(-99, 99), min_size=cols, max_size=cols)) for _ in range(rows)]


@given(st.integers(0, 30))
def test_pascal_triangle_shape_and_entries(num_rows):
    rows = pascal_triangle(num_rows)
    assert len(rows) == num_rows
    for i, row in enumerate(rows):
        assert len(row) == i + 1
        assert row == [math.comb(i, j) for j in range(i + 1)]


@given(st.integers(1, 30))
def test_pascal_row_sums_are_powers_of_two(num_rows):
    rows = pascal_triangle(num_rows)
    assert [sum(row) for row in rows] == [2 ** i for i in range(num_rows)]


@pytest.mark.parametrize("num_rows", [0, -3])
def test_pascal_triangle_empty(num_rows):
    assert pascal_triangle(num_rows) == []


@given(rectangular())
def test_transpose_swaps_indices(matrix):
    result = transpose(matrix)
    assert len(result) == len(matrix[0])
    for j, row in enumerate(result):
        assert len(row) == len(matrix)
        for i, value in enumerate(row):
            assert value == matrix[i][j]


@given(rectangular())
def test_transpose_round_trip(matrix):
    assert transpose(transpose(matrix)) == matrix


def test_transpose_empty():
    assert transpose([]) == []


def test_transpose_rejects_ragged_rows():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])