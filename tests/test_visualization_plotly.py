import plotly.graph_objects as go

from densematrix import Matrix
from densematrix.visualization_plotly import render_matrix_heatmap


def test_heatmap_values_and_highlight():
    matrix = Matrix.from_rows([[1.0, 5.0], [5.0, 2.0]])
    fig = render_matrix_heatmap(matrix, title="Weights")

    assert isinstance(fig, go.Figure)
    heatmap = fig.data[0]
    assert [list(row) for row in heatmap.z] == [[1.0, 5.0], [5.0, 2.0]]
    assert fig.layout.title.text == "Weights"
    assert fig.layout.yaxis.autorange == "reversed"

    shapes = fig.layout.shapes
    assert len(shapes) == 1
    # Earliest maximum is (0, 1)
    assert shapes[0].x0 == 0.5 and shapes[0].x1 == 1.5
    assert shapes[0].y0 == -0.5 and shapes[0].y1 == 0.5


def test_heatmap_without_highlight_or_text():
    fig = render_matrix_heatmap(Matrix.identity(3), highlight_max=False, annotate=False)
    assert len(fig.layout.shapes) == 0
    assert fig.data[0].text is None
    assert fig.layout.title.text == "Matrix 3x3"


def test_heatmap_empty_matrix():
    fig = render_matrix_heatmap(Matrix())
    assert len(fig.layout.shapes) == 0
    assert len(fig.data) == 1
