from __future__ import annotations

import itertools

import numpy as np
import pytest

from matrixdiagrams.model.matrix import Matrix, ShapeError, format_value

SHAPES = [(1, 1), (1, 4), (4, 1), (2, 3), (3, 4), (4, 4)]


def test_construct_zero_filled() -> None:
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert len(m) == 6
    assert list(m) == [0.0] * 6


def test_construct_copies_prefix_of_longer_buffer() -> None:
    m = Matrix(2, 2, [1, 2, 3, 4, 5, 6])
    assert m.to_rows() == [[1.0, 2.0], [3.0, 4.0]]


def test_construct_short_buffer_fails() -> None:
    with pytest.raises(ShapeError):
        Matrix(2, 2, [1, 2, 3])


@pytest.mark.parametrize("rows, columns", [(0, 2), (2, 0), (-1, 3)])
def test_construct_rejects_non_positive_shape(rows: int, columns: int) -> None:
    with pytest.raises(ShapeError):
        Matrix(rows, columns)


def test_buffer_is_single_precision() -> None:
    m = Matrix(1, 1, [0.1])
    assert m.values().dtype == np.float32
    assert m.get(0, 0) == float(np.float32(0.1))


def test_from_rows_rejects_ragged_literal() -> None:
    with pytest.raises(ShapeError):
        Matrix.from_rows([[1, 2], [3]])


def test_sequence_is_row_major() -> None:
    m = Matrix.sequence(3, 4)
    assert m.get(0, 3) == 4
    assert m.get(1, 0) == 5
    assert m.get(2, 3) == 12


def test_offset_law() -> None:
    m = Matrix.sequence(3, 4)
    values = m.values()
    for r, c in m.iter_indices():
        assert m.offset(r, c) == r * 4 + c
        assert values[m.offset(r, c)] == m.get(r, c)


def test_set_writes_single_element(a2: Matrix) -> None:
    a2.set(1, 0, 9)
    assert a2.to_rows() == [[1, 2], [9, 4]]


@pytest.mark.parametrize("row, column", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_get_and_set_out_of_range(a2: Matrix, row: int, column: int) -> None:
    with pytest.raises(IndexError):
        a2.get(row, column)
    with pytest.raises(IndexError):
        a2.set(row, column, 1.0)
    # Column overflow must not alias into the next row.
    assert a2.to_rows() == [[1, 2], [3, 4]]


def test_identity() -> None:
    for n in range(1, 5):
        eye = Matrix.identity_of(n)
        for i, j in itertools.product(range(n), repeat=2):
            assert eye.get(i, j) == (1.0 if i == j else 0.0)


def test_identity_overwrites_in_place(a2: Matrix) -> None:
    assert a2.identity() is a2
    assert a2.to_rows() == [[1, 0], [0, 1]]


def test_identity_requires_square() -> None:
    with pytest.raises(ShapeError):
        Matrix(2, 3).identity()


def test_get_row_and_column_are_copies(a2: Matrix) -> None:
    row = a2.get_row(1)
    column = a2.get_column(1)
    assert row.shape == (1, 2) and list(row) == [3, 4]
    assert column.shape == (2, 1) and list(column) == [2, 4]

    row.set(0, 0, 100)
    column.set(0, 0, 100)
    assert a2.to_rows() == [[1, 2], [3, 4]]


def test_get_row_column_out_of_range(a2: Matrix) -> None:
    with pytest.raises(IndexError):
        a2.get_row(2)
    with pytest.raises(IndexError):
        a2.get_column(2)


def test_set_row_and_column() -> None:
    m = Matrix(2, 3)
    m.set_row(1, [1, 2, 3])
    m.set_column(0, Matrix(2, 1, [7, 8]))
    assert m.to_rows() == [[7, 0, 0], [8, 2, 3]]


def test_set_row_and_column_validation() -> None:
    m = Matrix(2, 3)
    with pytest.raises(IndexError):
        m.set_row(2, [1, 2, 3])
    with pytest.raises(ShapeError):
        m.set_row(0, [1, 2])
    with pytest.raises(IndexError):
        m.set_column(3, [1, 2])
    with pytest.raises(ShapeError):
        m.set_column(0, [1])


@pytest.mark.parametrize("rows, columns", SHAPES)
def test_transpose(rows: int, columns: int) -> None:
    m = Matrix.sequence(rows, columns)
    t = m.transpose()
    assert t.shape == (columns, rows)
    for i, j in t.iter_indices():
        assert t.get(i, j) == m.get(j, i)
    assert t.transpose() == m


def test_transpose_does_not_mutate_source() -> None:
    m = Matrix.sequence(2, 3)
    m.transpose()
    assert m == Matrix.sequence(2, 3)


def test_dot_of_vectors() -> None:
    assert Matrix(1, 3, [1, 2, 3]).dot(Matrix(3, 1, [4, 5, 6])) == 32.0


def test_dot_requires_equal_length() -> None:
    with pytest.raises(ShapeError):
        Matrix(1, 3).dot(Matrix(1, 2))


def test_dot_accumulates_left_to_right_in_single_precision() -> None:
    # In single precision 1e8 + 1 == 1e8, so the 1 is lost before -1e8 is added.
    a = Matrix(1, 3, [1e8, 1, -1e8])
    b = Matrix(1, 3, [1, 1, 1])
    assert a.dot(b) == 0.0


@pytest.mark.parametrize("left, right", itertools.product(SHAPES, repeat=2))
def test_can_multiply(left: tuple[int, int], right: tuple[int, int]) -> None:
    assert Matrix(*left).can_multiply(Matrix(*right)) == (left[1] == right[0])


def test_multiply_square(a2: Matrix, b2: Matrix) -> None:
    c = a2.multiply(b2)
    assert c.to_rows() == [[19, 22], [43, 50]]
    assert (a2 @ b2) == c


def test_multiply_equals_row_column_dot_products() -> None:
    a = Matrix.sequence(2, 4)
    b = Matrix.sequence(4, 3, start=9)
    c = a.multiply(b)
    assert c.shape == (2, 3)
    for i, j in c.iter_indices():
        assert c.get(i, j) == a.get_row(i).dot(b.get_column(j))
    np.testing.assert_allclose(
        np.array(c.to_rows()), np.array(a.to_rows()) @ np.array(b.to_rows())
    )


def test_multiply_incompatible_shapes() -> None:
    with pytest.raises(ShapeError, match="Cannot multiply 4x2 matrix with 3x4 matrix"):
        Matrix(4, 2).multiply(Matrix(3, 4))


def test_multiply_by_identity() -> None:
    m = Matrix.sequence(3, 3)
    assert m.multiply(Matrix.identity_of(3)) == m


@pytest.mark.parametrize(
    "value, text",
    [(22.0, "22"), (0.1, "0.1"), (-3.5, "-3.5"), (0.0, "0"), (1e-3, "0.001")],
)
def test_format_value(value: float, text: str) -> None:
    assert format_value(value) == text


def test_equality() -> None:
    assert Matrix(1, 2, [1, 2]) == Matrix(1, 2, [1, 2])
    assert Matrix(1, 2, [1, 2]) != Matrix(2, 1, [1, 2])
    assert Matrix(1, 2, [1, 2]) != [1, 2]
