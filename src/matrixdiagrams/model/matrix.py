"""
Dense Matrix Model
==================
A fixed-shape, single-precision matrix stored in a flat row-major buffer.

Why is this file needed?
------------------------
1. Layout: The element at (row, column) lives at offset ``row * columns + column``.
   The grid views rely on exactly the same offset law for their cell handles.
2. Operations: Transpose, dot product and multiplication are written out term by
   term, so the diagrams can show the very same scalar products that produced
   each result cell.

Note: This module is pure Python/NumPy and does NOT import PySide6.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Union, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

DTYPE = np.float32

Values = Union["Matrix", Sequence[float], "npt.NDArray[np.floating]"]


class ShapeError(ValueError):
    """Operand shapes are incompatible with the requested operation."""


def format_value(value: float) -> str:
    """
    Shortest decimal text that round-trips a single-precision value.

    Integral values are written without a trailing ``.0``, e.g. ``22``, ``0.1``, ``-3.5``.
    """
    return np.format_float_positional(DTYPE(value), trim="-")


def _as_flat(values: Values) -> npt.NDArray[np.float32]:
    if isinstance(values, Matrix):
        return values._data
    return np.asarray(values, dtype=DTYPE).ravel()


class Matrix:
    """
    Row-major matrix of ``rows * columns`` float32 values.

    The shape never changes after construction. Operations that produce a
    different shape (transpose, multiply, row/column extraction) allocate a new Matrix.
    """

    def __init__(self, rows: int, columns: int, initial: Values | None = None) -> None:
        if int(rows) != rows or int(columns) != columns or rows < 1 or columns < 1:
            raise ShapeError(f"Matrix shape must be positive integers, got {rows}x{columns}.")
        self.rows: int = int(rows)
        self.columns: int = int(columns)
        self._data: npt.NDArray[np.float32] = np.zeros(self.rows * self.columns, dtype=DTYPE)

        if initial is not None:
            flat = _as_flat(initial)
            if flat.size < self._data.size:
                raise ShapeError(
                    f"Initial buffer has {flat.size} values, "
                    f"a {self.rows}x{self.columns} matrix needs {self._data.size}."
                )
            self._data[:] = flat[:self._data.size]

    # ------------------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a list of equally long rows."""
        if not rows or not rows[0]:
            raise ShapeError("Matrix literal must have at least one row and one column.")
        width = len(rows[0])
        for r in rows:
            if len(r) != width:
                raise ShapeError(f"Ragged matrix literal: expected rows of {width}, got {len(r)}.")
        return cls(len(rows), width, [v for r in rows for v in r])

    @classmethod
    def sequence(cls, rows: int, columns: int, start: float = 1.0) -> Matrix:
        """Matrix filled with ``start, start + 1, ...`` in row-major order."""
        return cls(rows, columns, np.arange(rows * columns, dtype=DTYPE) + DTYPE(start))

    @classmethod
    def identity_of(cls, n: int) -> Matrix:
        return cls(n, n).identity()

    # ------------------------------------------------------------------------------
    # Shape & buffer access
    # ------------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    @property
    def size(self) -> int:
        return self._data.size

    def shape_text(self) -> str:
        return f"{self.rows}x{self.columns}"

    def values(self) -> npt.NDArray[np.float32]:
        """Copy of the flat row-major buffer."""
        return self._data.copy()

    def to_rows(self) -> list[list[float]]:
        return [[float(v) for v in row] for row in self._data.reshape(self.rows, self.columns)]

    def offset(self, row: int, column: int) -> int:
        """Buffer offset of (row, column); raises IndexError outside the declared shape."""
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} out of range for {self.shape_text()} matrix.")
        if not 0 <= column < self.columns:
            raise IndexError(f"Column {column} out of range for {self.shape_text()} matrix.")
        return row * self.columns + column

    def get(self, row: int, column: int) -> float:
        return float(self._data[self.offset(row, column)])

    def set(self, row: int, column: int, value: float) -> None:
        self._data[self.offset(row, column)] = value

    def __len__(self) -> int:
        return self._data.size

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.columns}, {self.to_rows()!r})"

    # ------------------------------------------------------------------------------
    # Rows & columns
    # ------------------------------------------------------------------------------

    def check_row(self, n: int) -> None:
        if not 0 <= n < self.rows:
            raise IndexError(f"Row {n} out of range for {self.shape_text()} matrix.")

    def check_column(self, n: int) -> None:
        if not 0 <= n < self.columns:
            raise IndexError(f"Column {n} out of range for {self.shape_text()} matrix.")

    def get_row(self, n: int) -> Matrix:
        """Copy of row ``n`` as a 1 x columns matrix."""
        self.check_row(n)
        start = n * self.columns
        return Matrix(1, self.columns, self._data[start:start + self.columns])

    def get_column(self, n: int) -> Matrix:
        """Copy of column ``n`` as a rows x 1 matrix."""
        self.check_column(n)
        return Matrix(self.rows, 1, self._data[n::self.columns])

    def set_row(self, n: int, values: Values) -> None:
        self.check_row(n)
        flat = _as_flat(values)
        if flat.size < self.columns:
            raise ShapeError(f"Row needs {self.columns} values, got {flat.size}.")
        start = n * self.columns
        self._data[start:start + self.columns] = flat[:self.columns]

    def set_column(self, n: int, values: Values) -> None:
        self.check_column(n)
        flat = _as_flat(values)
        if flat.size < self.rows:
            raise ShapeError(f"Column needs {self.rows} values, got {flat.size}.")
        self._data[n::self.columns] = flat[:self.rows]

    # ------------------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------------------

    def identity(self) -> Matrix:
        """Overwrite this square matrix with the identity. Returns ``self``."""
        if self.rows != self.columns:
            raise ShapeError(f"Identity requires a square matrix, got {self.shape_text()}.")
        for i in range(self.rows):
            r = np.zeros(self.columns, dtype=DTYPE)
            r[i] = 1.0
            self.set_row(i, r)
        return self

    def transpose(self) -> Matrix:
        r = Matrix(self.columns, self.rows)
        for i in range(r.rows):
            for j in range(r.columns):
                r.set(i, j, self.get(j, i))
        return r

    def dot(self, other: Matrix) -> float:
        """
        Sum of pairwise products of two equally sized buffers.

        Accumulates left to right in single precision, so the value equals the
        written-out sum shown in the diagrams.
        """
        if self.size != other.size:
            raise ShapeError(
                f"Cannot take dot product of {self.shape_text()} and {other.shape_text()}."
            )
        acc = DTYPE(0.0)
        for a, b in zip(self._data, other._data):
            acc = DTYPE(acc + a * b)
        return float(acc)

    def can_multiply(self, other: Matrix) -> bool:
        return self.columns == other.rows

    def multiply(self, other: Matrix) -> Matrix:
        # Across times down.
        if not self.can_multiply(other):
            raise ShapeError(
                f"Cannot multiply {self.shape_text()} matrix with {other.shape_text()} matrix"
            )
        r = Matrix(self.rows, other.columns)
        for i in range(r.rows):
            for j in range(r.columns):
                r.set(i, j, self.get_row(i).dot(other.get_column(j)))
        return r

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.multiply(other)

    def iter_indices(self) -> Iterable[tuple[int, int]]:
        for i in range(self.rows):
            for j in range(self.columns):
                yield i, j
