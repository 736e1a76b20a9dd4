"""Dense row-major matrix used as the numeric building block of the package.

A :class:`Matrix` owns a flat list of floats of length ``rows * cols``.  The
element at ``(i, j)`` lives at offset ``i * cols + j``; that transform is
computed in exactly one place (:meth:`Matrix._offset`) and every accessor
goes through it.

Elementwise arithmetic between two matrices requires identical shapes and
raises :class:`~densematrix.errors.DimensionMismatchError` otherwise.  The
dot product is the exception: an inner-dimension mismatch yields a ``0x0``
matrix instead of an error, so callers that care must check the shape of the
result.
"""
from __future__ import annotations

import logging
import math
import numbers
import operator
import sys
from typing import Any, Callable, IO, List, Optional, Sequence, Tuple

from .errors import DimensionMismatchError, EmptyMatrixError, OutOfRangeError

logger = logging.getLogger(__name__)

BinaryOp = Callable[[float, float], float]


def _divide(lhs: float, rhs: float) -> float:
    """Floating point division following IEEE 754 for a zero divisor."""

    try:
        return lhs / rhs
    except ZeroDivisionError:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Matrix:
    """An ``m x n`` matrix of floats stored contiguously in row-major order."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, m: int = 0, n: int = 0):
        if m < 0 or n < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {m}x{n}")
        self._rows = int(m)
        self._cols = int(n)
        self._data: List[float] = [0.0] * (self._rows * self._cols)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from nested row sequences.

        Every row must have the same length; a ragged input raises
        :class:`DimensionMismatchError`.
        """

        materialized = [list(row) for row in rows]
        m = len(materialized)
        n = len(materialized[0]) if materialized else 0
        for index, row in enumerate(materialized):
            if len(row) != n:
                raise DimensionMismatchError(
                    (m, n),
                    (1, len(row)),
                    f"Row {index} has {len(row)} elements, expected {n}",
                )
        matrix = cls(m, n)
        matrix._data[:] = [float(value) for row in materialized for value in row]
        return matrix

    @classmethod
    def filled(cls, m: int, n: int, value: float) -> "Matrix":
        matrix = cls(m, n)
        matrix._data[:] = [float(value)] * (m * n)
        return matrix

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Return the ``n x n`` identity matrix."""

        matrix = cls(n, n)
        for i in range(n):
            matrix.set(i, i, 1.0)
        return matrix

    # ------------------------------------------------------------------
    # Storage and element access
    # ------------------------------------------------------------------
    def _offset(self, row: int, col: int) -> int:
        """Map ``(row, col)`` onto the flat buffer, raising when out of bounds."""

        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfRangeError(row, col, self.shape)
        return row * self._cols + col

    def at(self, row: int, col: int) -> float:
        return self._data[self._offset(row, col)]

    def set(self, row: int, col: int, value: float) -> None:
        self._data[self._offset(row, col)] = float(value)

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, col = self._unpack_key(key)
        return self.at(row, col)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        row, col = key
        if not isinstance(row, numbers.Integral) or not isinstance(col, numbers.Integral):
            raise TypeError("Matrix indices must be integers")
        return int(row), int(col)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        return len(self._data)

    def copy(self) -> "Matrix":
        duplicate = Matrix(0, 0)
        duplicate._rows = self._rows
        duplicate._cols = self._cols
        duplicate._data = list(self._data)
        return duplicate

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self.copy()

    def tolist(self) -> List[List[float]]:
        return [[self.at(i, j) for j in range(self._cols)] for i in range(self._rows)]

    def apply(self, func: Callable[[float], float]) -> "Matrix":
        """Return a new matrix with ``func`` applied to every element."""

        result = self.copy()
        result._data[:] = [float(func(value)) for value in self._data]
        return result

    # ------------------------------------------------------------------
    # Elementwise and scalar arithmetic
    # ------------------------------------------------------------------
    def _check_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(self.shape, other.shape)

    def _combine_inplace(self, other: Any, op: BinaryOp) -> "Matrix":
        # Shape is validated before the buffer is touched.
        if isinstance(other, Matrix):
            self._check_same_shape(other)
            self._data[:] = [op(lhs, rhs) for lhs, rhs in zip(self._data, other._data)]
        elif _is_scalar(other):
            scalar = float(other)
            self._data[:] = [op(value, scalar) for value in self._data]
        else:
            return NotImplemented
        return self

    def _combine(self, other: Any, op: BinaryOp) -> "Matrix":
        if not isinstance(other, Matrix) and not _is_scalar(other):
            return NotImplemented
        return self.copy()._combine_inplace(other, op)

    def _combine_reflected(self, scalar: Any, op: BinaryOp) -> "Matrix":
        if not _is_scalar(scalar):
            return NotImplemented
        value = float(scalar)
        result = self.copy()
        result._data[:] = [op(value, element) for element in self._data]
        return result

    def __iadd__(self, other: Any) -> "Matrix":
        return self._combine_inplace(other, operator.add)

    def __isub__(self, other: Any) -> "Matrix":
        return self._combine_inplace(other, operator.sub)

    def __imul__(self, other: Any) -> "Matrix":
        return self._combine_inplace(other, operator.mul)

    def __itruediv__(self, other: Any) -> "Matrix":
        return self._combine_inplace(other, _divide)

    def __add__(self, other: Any) -> "Matrix":
        return self._combine(other, operator.add)

    def __sub__(self, other: Any) -> "Matrix":
        return self._combine(other, operator.sub)

    def __mul__(self, other: Any) -> "Matrix":
        """Term by term product. See :meth:`dot` for the matrix product."""

        return self._combine(other, operator.mul)

    def __truediv__(self, other: Any) -> "Matrix":
        return self._combine(other, _divide)

    def __radd__(self, scalar: Any) -> "Matrix":
        return self._combine_reflected(scalar, operator.add)

    def __rsub__(self, scalar: Any) -> "Matrix":
        return self._combine_reflected(scalar, operator.sub)

    def __rmul__(self, scalar: Any) -> "Matrix":
        return self._combine_reflected(scalar, operator.mul)

    def __rtruediv__(self, scalar: Any) -> "Matrix":
        return self._combine_reflected(scalar, _divide)

    def __neg__(self) -> "Matrix":
        result = self.copy()
        result._data[:] = [-value for value in self._data]
        return result

    def __pos__(self) -> "Matrix":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Matrix algebra
    # ------------------------------------------------------------------
    def dot(self, rhs: "Matrix") -> "Matrix":
        """Matrix product ``self . rhs``.

        Returns a ``0x0`` matrix when ``self.cols != rhs.rows``.
        """

        if not isinstance(rhs, Matrix):
            raise TypeError(f"dot() expects a Matrix, got {type(rhs).__name__}")
        if self._cols != rhs._rows:
            logger.debug(
                "dot: inner dimensions differ (%dx%d . %dx%d), returning 0x0",
                self._rows, self._cols, rhs._rows, rhs._cols,
            )
            return Matrix()

        result = Matrix(self._rows, rhs._cols)
        for i in range(self._rows):
            for j in range(rhs._cols):
                total = 0.0
                for k in range(self._cols):
                    total += self._data[self._offset(i, k)] * rhs._data[rhs._offset(k, j)]
                result._data[result._offset(i, j)] = total
        return result

    def __matmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def T(self) -> "Matrix":
        """Return the ``cols x rows`` transpose."""

        result = Matrix(self._cols, self._rows)
        for i in range(self._rows):
            for j in range(self._cols):
                result._data[result._offset(j, i)] = self._data[self._offset(i, j)]
        return result

    def get_max_val(self) -> Tuple[int, int]:
        """Return the ``(row, col)`` of the largest element.

        The scan is row-major and only a strictly greater value replaces the
        current best, so the earliest occurrence wins ties.  A matrix holding
        only ``-inf``/``nan`` values reports ``(0, 0)``.
        """

        if not self._data:
            raise EmptyMatrixError(
                f"Cannot locate the maximum of an empty {self._rows}x{self._cols} matrix"
            )
        best = -math.inf
        coordinates = (0, 0)
        for i in range(self._rows):
            for j in range(self._cols):
                value = self._data[self._offset(i, j)]
                if value > best:
                    best = value
                    coordinates = (i, j)
        return coordinates

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def format(self, sep: str = " ", fmt: str = "g") -> str:
        lines = []
        for i in range(self._rows):
            lines.append(sep.join(format(self.at(i, j), fmt) for j in range(self._cols)))
        return "\n".join(lines)

    def print_matrix(self, stream: Optional[IO[str]] = None, sep: str = " ", fmt: str = "g") -> None:
        """Write the matrix to ``stream`` (``sys.stdout`` by default), one row per line."""

        if stream is None:
            stream = sys.stdout
        for line in self.format(sep=sep, fmt=fmt).splitlines():
            stream.write(line + "\n")

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        if not self._data:
            return f"Matrix({self._rows}, {self._cols})"
        return f"Matrix.from_rows({self.tolist()!r})"


__all__ = ["Matrix"]
