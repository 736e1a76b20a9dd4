"""Tests for DataFrame, CSV and Excel export."""
import math
import zipfile

import pandas as pd
import pytest

from densematrix import DimensionMismatchError, Matrix
from densematrix.export import (
    MatrixExcelExporter,
    matrix_from_dataframe,
    matrix_to_csv,
    matrix_to_dataframe,
)


def _sample() -> Matrix:
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 9.0, 6.0]])


class TestDataFrame:
    def test_default_labels(self):
        df = matrix_to_dataframe(_sample())
        assert df.shape == (2, 3)
        assert list(df.index) == [0, 1]
        assert list(df.columns) == [0, 1, 2]
        assert df.iloc[1, 1] == 9.0

    def test_custom_labels(self):
        df = matrix_to_dataframe(_sample(), row_labels=["a", "b"], col_labels=["x", "y", "z"])
        assert df.loc["b", "z"] == 6.0

    def test_label_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            matrix_to_dataframe(_sample(), row_labels=["only-one"])

    def test_from_dataframe(self):
        df = pd.DataFrame({"p": [1, 2], "q": [3.5, -4.0]})
        matrix = matrix_from_dataframe(df)
        assert matrix.tolist() == [[1.0, 3.5], [2.0, -4.0]]
        assert matrix_from_dataframe(matrix_to_dataframe(_sample())) == _sample()

    def test_from_dataframe_non_numeric(self):
        with pytest.raises(ValueError):
            matrix_from_dataframe(pd.DataFrame({"p": ["a", "b"]}))


def test_matrix_to_csv():
    text = matrix_to_csv(Matrix.from_rows([[1.0, 2.5], [3.0, 4.0]]), float_format="%.1f")
    assert text.splitlines() == ["1.0,2.5", "3.0,4.0"]


class TestExcelExporter:
    def test_workbook_bytes(self):
        exporter = MatrixExcelExporter(sheet_name="Weights")
        first = exporter.add_matrix(_sample(), title="Layer 1")
        second = exporter.add_matrix(Matrix.identity(2))
        output = exporter.close()

        assert first == 0
        # title + header + 2 data rows + spacer
        assert second == 5
        data = output.getvalue()
        assert data[:2] == b"PK"
        with zipfile.ZipFile(output) as archive:
            sheet = archive.read("xl/worksheets/sheet1.xml").decode("utf-8")
            workbook = archive.read("xl/workbook.xml").decode("utf-8")
        assert 'name="Weights"' in workbook
        assert "<c r=\"C4\"" in sheet

    def test_special_values_and_empty(self):
        exporter = MatrixExcelExporter()
        exporter.add_matrix(Matrix.from_rows([[math.inf, math.nan]]))
        exporter.add_matrix(Matrix())
        assert exporter.close().getvalue()[:2] == b"PK"
