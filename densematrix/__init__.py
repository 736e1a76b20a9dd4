"""Dense row-major matrix algebra."""

from .errors import DimensionMismatchError, EmptyMatrixError, MatrixError, OutOfRangeError
from .matrix import Matrix
from .config import MatrixDocument, load_matrix_from_json, matrix_from_dict, matrix_to_dict
from .examples import classify, dense_layer_forward, example_2x2
from .logging_config import setup_logging

__all__ = [
    "DimensionMismatchError",
    "EmptyMatrixError",
    "Matrix",
    "MatrixDocument",
    "MatrixError",
    "OutOfRangeError",
    "classify",
    "dense_layer_forward",
    "example_2x2",
    "load_matrix_from_json",
    "matrix_from_dict",
    "matrix_to_dict",
    "setup_logging",
]
