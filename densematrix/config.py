"""Serialization helpers for matrices."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Sequence, Tuple, Union

from .errors import DimensionMismatchError
from .matrix import Matrix

logger = logging.getLogger(__name__)

_JSONSource = Union[str, Path, IO[str]]


def matrix_to_dict(matrix: Matrix) -> Dict[str, Any]:
    """Serialize a :class:`Matrix` to a JSON-compatible dictionary.

    The ``data`` entry holds the elements in row-major order.
    """

    return {
        "rows": matrix.rows,
        "cols": matrix.cols,
        "data": [value for row in matrix.tolist() for value in row],
    }


def _is_nested(values: Sequence[Any]) -> bool:
    return bool(values) and all(isinstance(item, (list, tuple)) for item in values)


def matrix_from_dict(data: Dict[str, Any]) -> Matrix:
    """Create a :class:`Matrix` from a dictionary.

    ``data`` may be stored flat (row-major, ``rows * cols`` values) or as a
    list of rows.  Either way the element count has to agree with the
    declared shape.
    """

    rows = int(data.get("rows", 0))
    cols = int(data.get("cols", 0))
    values: List[Any] = list(data.get("data", []))

    if _is_nested(values):
        matrix = Matrix.from_rows(values)
        if matrix.shape != (rows, cols):
            raise DimensionMismatchError(
                (rows, cols),
                matrix.shape,
                f"Declared shape {rows}x{cols} does not match nested data of shape "
                f"{matrix.rows}x{matrix.cols}",
            )
        return matrix

    if len(values) != rows * cols:
        raise DimensionMismatchError(
            (rows, cols),
            (1, len(values)),
            f"Expected {rows * cols} values for a {rows}x{cols} matrix, got {len(values)}",
        )
    matrix = Matrix(rows, cols)
    for index, value in enumerate(values):
        matrix.set(index // cols, index % cols, float(value))
    return matrix


@dataclass
class MatrixDocument:
    """A matrix together with descriptive metadata, as stored on disk."""

    matrix: Matrix = field(default_factory=Matrix)
    label: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representing the document."""

        payload: Dict[str, Any] = {
            "label": self.label,
            "description": self.description,
            "matrix": matrix_to_dict(self.matrix),
        }
        return payload

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatrixDocument":
        matrix = matrix_from_dict(data.get("matrix", {}))
        label = str(data.get("label", ""))
        description = str(data.get("description", ""))
        return cls(matrix=matrix, label=label, description=description)

    @classmethod
    def from_json(cls, source: _JSONSource) -> "MatrixDocument":
        """Load a document from a JSON file path or file-like object."""

        if hasattr(source, "read"):
            data = json.load(source)  # type: ignore[arg-type]
        else:
            path = Path(source)
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("Matrix JSON must contain an object at the top level")
        document = cls.from_dict(data)
        logger.debug("Loaded %dx%d matrix %r", document.matrix.rows, document.matrix.cols, document.label)
        return document

    def save(self, target: Union[str, Path, IO[str]], *, indent: Optional[int] = 2) -> None:
        """Write the document to disk or a file-like object."""

        payload = self.to_json(indent=indent)
        if hasattr(target, "write"):
            target.write(payload)  # type: ignore[arg-type]
        else:
            path = Path(target)
            path.write_text(payload, encoding="utf-8")
            logger.info("Saved matrix %r to %s", self.label, path)


def load_matrix_from_json(source: _JSONSource) -> Tuple[Matrix, MatrixDocument]:
    """Load a :class:`Matrix` and its enclosing document from JSON."""

    document = MatrixDocument.from_json(source)
    return document.matrix, document


__all__ = [
    "MatrixDocument",
    "load_matrix_from_json",
    "matrix_from_dict",
    "matrix_to_dict",
]
