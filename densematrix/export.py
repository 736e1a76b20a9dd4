"""
Export logic for matrices.
Converts matrices to pandas DataFrames and CSV text, and writes formatted
Excel workbooks with XlsxWriter.
"""
import io
import logging
import math
from typing import List, Optional, Sequence

import pandas as pd
import xlsxwriter

from densematrix.errors import DimensionMismatchError
from densematrix.matrix import Matrix

logger = logging.getLogger(__name__)

# Widest column (in characters) the exporter will size to
MAX_COL_WIDTH = 50


def _default_labels(count: int) -> List[int]:
    return list(range(count))


def matrix_to_dataframe(
    matrix: Matrix,
    row_labels: Optional[Sequence[object]] = None,
    col_labels: Optional[Sequence[object]] = None,
) -> pd.DataFrame:
    """Return a DataFrame with one row per matrix row.

    Labels default to the 0-based row and column indices.
    """
    index = list(row_labels) if row_labels is not None else _default_labels(matrix.rows)
    columns = list(col_labels) if col_labels is not None else _default_labels(matrix.cols)
    if len(index) != matrix.rows or len(columns) != matrix.cols:
        raise DimensionMismatchError(
            matrix.shape,
            (len(index), len(columns)),
            f"Got {len(index)} row labels and {len(columns)} column labels "
            f"for a {matrix.rows}x{matrix.cols} matrix",
        )
    return pd.DataFrame(matrix.tolist(), index=index, columns=columns, dtype=float)


def matrix_from_dataframe(df: pd.DataFrame) -> Matrix:
    """Build a matrix from the values of a DataFrame; labels are discarded."""
    try:
        numeric = df.astype(float)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"DataFrame contains non-numeric values: {exc}") from exc
    rows, cols = numeric.shape
    matrix = Matrix(rows, cols)
    for i, record in enumerate(numeric.itertuples(index=False, name=None)):
        for j, value in enumerate(record):
            matrix.set(i, j, value)
    return matrix


def matrix_to_csv(matrix: Matrix, float_format: Optional[str] = None) -> str:
    """Serialize a matrix to CSV text without index or header."""
    df = matrix_to_dataframe(matrix)
    return df.to_csv(index=False, header=False, float_format=float_format)


class MatrixExcelExporter:
    """Writes one or more matrices to a single worksheet, stacked vertically."""

    def __init__(self, sheet_name: str = "Matrix"):
        self.output = io.BytesIO()
        self.workbook = xlsxwriter.Workbook(self.output, {'in_memory': True, 'nan_inf_to_errors': True})
        self.worksheet = self.workbook.add_worksheet(sheet_name)
        self.next_row = 0
        self.col_widths: List[int] = []

        self.fmt_header_main = self.workbook.add_format({
            'bold': True, 'font_size': 12, 'bg_color': '#4472C4',
            'font_color': 'white', 'border': 1
        })
        self.fmt_header = self.workbook.add_format({
            'bold': True, 'bg_color': '#D9E1F2', 'border': 1,
            'align': 'center', 'valign': 'vcenter'
        })
        self.fmt_num = self.workbook.add_format({'num_format': '0.000', 'border': 1})
        self.fmt_max = self.workbook.add_format({
            'num_format': '0.000', 'border': 1, 'bg_color': '#FFC7CE', 'font_color': '#9C0006'
        })

    def _track_width(self, col: int, text: str) -> None:
        while len(self.col_widths) <= col:
            self.col_widths.append(0)
        self.col_widths[col] = max(self.col_widths[col], min(len(text), MAX_COL_WIDTH))

    def add_matrix(self, matrix: Matrix, title: str = "") -> int:
        """Write ``matrix`` below the previous table and return its first row.

        The first column holds row indices, the header row holds column
        indices, and the largest element is highlighted.
        """
        ws = self.worksheet
        start_row = self.next_row
        title = title or f"Matrix {matrix.rows}x{matrix.cols}"

        if matrix.cols > 0:
            ws.merge_range(start_row, 0, start_row, matrix.cols, title, self.fmt_header_main)
        else:
            ws.write(start_row, 0, title, self.fmt_header_main)
        self._track_width(0, title)
        row = start_row + 1

        ws.write(row, 0, "", self.fmt_header)
        for j in range(matrix.cols):
            ws.write(row, j + 1, j, self.fmt_header)
        row += 1

        max_cell = matrix.get_max_val() if matrix.size else None
        for i in range(matrix.rows):
            ws.write(row, 0, i, self.fmt_header)
            for j in range(matrix.cols):
                value = matrix.at(i, j)
                cell_fmt = self.fmt_max if (i, j) == max_cell else self.fmt_num
                ws.write_number(row, j + 1, value, cell_fmt)
                self._track_width(j + 1, format(value, ".3f") if math.isfinite(value) else str(value))
            row += 1

        self.next_row = row + 1
        logger.debug("Wrote %dx%d matrix %r at row %d", matrix.rows, matrix.cols, title, start_row)
        return start_row

    def close(self) -> io.BytesIO:
        for i, width in enumerate(self.col_widths):
            self.worksheet.set_column(i, i, width + 2)
        self.workbook.close()
        self.output.seek(0)
        return self.output


__all__ = [
    "MatrixExcelExporter",
    "matrix_from_dataframe",
    "matrix_to_csv",
    "matrix_to_dataframe",
]
