"""Error types raised by matrix operations."""
from __future__ import annotations

from typing import Optional, Tuple

Shape = Tuple[int, int]


class MatrixError(RuntimeError):
    """Base class for errors raised by :mod:`densematrix`."""


class OutOfRangeError(MatrixError, IndexError):
    """Raised when an element is addressed outside the matrix bounds."""

    def __init__(self, row: int, col: int, shape: Shape):
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(f"Index ({row}, {col}) out of range for matrix of shape {shape[0]}x{shape[1]}")


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when two operands must share a shape and do not."""

    def __init__(self, lhs_shape: Shape, rhs_shape: Shape, message: Optional[str] = None):
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        if message is None:
            message = (
                f"Dimension mismatch: {lhs_shape[0]}x{lhs_shape[1]} "
                f"vs {rhs_shape[0]}x{rhs_shape[1]}"
            )
        super().__init__(message)


class EmptyMatrixError(MatrixError, ValueError):
    """Raised when an operation needs at least one element."""


__all__ = [
    "DimensionMismatchError",
    "EmptyMatrixError",
    "MatrixError",
    "OutOfRangeError",
    "Shape",
]
