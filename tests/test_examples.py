"""Tests for the reference matrices and the dense layer example."""
import math

import pytest

from densematrix import DimensionMismatchError, Matrix, classify, dense_layer_forward, example_2x2


def test_example_2x2():
    matrix = example_2x2()
    assert matrix.tolist() == [[1.0, 2.0], [3.0, 4.0]]
    assert matrix.T().tolist() == [[1.0, 3.0], [2.0, 4.0]]
    assert matrix.dot(Matrix.identity(2)) == matrix


class TestDenseLayer:
    def setup_method(self):
        self.inputs = Matrix.from_rows([[1.0], [2.0]])
        self.weights = Matrix.from_rows([[0.5, -0.25], [1.0, 1.0], [-2.0, 0.0]])
        self.bias = Matrix.from_rows([[0.0], [-3.0], [1.0]])

    def test_forward_shape_and_values(self):
        out = dense_layer_forward(self.inputs, self.weights, self.bias)
        assert out.shape == (3, 1)
        # pre-activations: 0.0, 0.0, -1.0
        assert out[0, 0] == pytest.approx(0.5)
        assert out[1, 0] == pytest.approx(0.5)
        assert out[2, 0] == pytest.approx(1.0 / (1.0 + math.e))

    def test_classify_prefers_first_tie(self):
        assert classify(self.inputs, self.weights, self.bias) == 0

    def test_large_activations_do_not_overflow(self):
        out = dense_layer_forward(Matrix.from_rows([[1000.0]]), Matrix.from_rows([[1.0], [-1.0]]), Matrix(2, 1))
        assert out[0, 0] == pytest.approx(1.0)
        assert out[1, 0] == pytest.approx(0.0)

    def test_weight_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            dense_layer_forward(Matrix(3, 1), self.weights, self.bias)

    def test_bias_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            dense_layer_forward(self.inputs, self.weights, Matrix(2, 1))
