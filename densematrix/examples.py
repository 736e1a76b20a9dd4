"""Reference matrices and a small dense-layer forward pass."""
from __future__ import annotations

import math

from .errors import DimensionMismatchError
from .matrix import Matrix


def example_2x2() -> Matrix:
    """Return ``[[1, 2], [3, 4]]``."""

    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


def _sigmoid(value: float) -> float:
    # Split on sign so exp() never overflows.
    if value >= 0.0:
        return 1.0 / (1.0 + math.exp(-value))
    z = math.exp(value)
    return z / (1.0 + z)


def dense_layer_forward(inputs: Matrix, weights: Matrix, bias: Matrix) -> Matrix:
    """Compute ``sigmoid(weights . inputs + bias)``.

    ``inputs`` is an ``n x 1`` column, ``weights`` is ``k x n`` and ``bias``
    is ``k x 1``.  The result is a ``k x 1`` column of activations.
    """

    # dot() reports a mismatch as an empty result; a layer treats it as an error.
    if weights.cols != inputs.rows:
        raise DimensionMismatchError(
            weights.shape,
            inputs.shape,
            f"Weights of shape {weights.rows}x{weights.cols} cannot be applied "
            f"to inputs of shape {inputs.rows}x{inputs.cols}",
        )
    return (weights.dot(inputs) + bias).apply(_sigmoid)


def classify(inputs: Matrix, weights: Matrix, bias: Matrix) -> int:
    """Return the index of the most activated output unit."""

    row, _ = dense_layer_forward(inputs, weights, bias).get_max_val()
    return row


__all__ = ["classify", "dense_layer_forward", "example_2x2"]
