"""Plotly visualization of matrices."""
from __future__ import annotations

from typing import List

import plotly.graph_objects as go  # type: ignore

from densematrix.matrix import Matrix


def _cell_text(values: List[List[float]]) -> List[List[str]]:
    return [[format(value, ".3g") for value in row] for row in values]


def render_matrix_heatmap(
    matrix: Matrix,
    title: str = "",
    colorscale: str = "Viridis",
    annotate: bool = True,
    highlight_max: bool = True,
    font_size: int = 10,
) -> go.Figure:
    """Render ``matrix`` as a heatmap with row 0 at the top.

    When ``highlight_max`` is set the cell reported by
    :meth:`Matrix.get_max_val` is outlined.
    """
    values = matrix.tolist()
    heatmap_kwargs = dict(
        z=values,
        x=list(range(matrix.cols)),
        y=list(range(matrix.rows)),
        colorscale=colorscale,
        hovertemplate="row %{y}, col %{x}: %{z}<extra></extra>",
    )
    if annotate:
        heatmap_kwargs.update(
            text=_cell_text(values),
            texttemplate="%{text}",
            textfont=dict(size=font_size),
        )

    fig = go.Figure(data=go.Heatmap(**heatmap_kwargs))

    if highlight_max and matrix.size:
        row, col = matrix.get_max_val()
        fig.add_shape(
            type="rect",
            x0=col - 0.5, x1=col + 0.5,
            y0=row - 0.5, y1=row + 0.5,
            line=dict(color="Red", width=3),
            fillcolor="rgba(0,0,0,0)",
        )

    fig.update_layout(
        title=dict(text=title or f"Matrix {matrix.rows}x{matrix.cols}"),
        font=dict(size=font_size),
        xaxis=dict(title="Column", dtick=1, side="top"),
        yaxis=dict(title="Row", dtick=1, autorange="reversed", scaleanchor="x"),
        plot_bgcolor="white",
        margin=dict(l=40, r=20, t=80, b=20),
    )
    return fig


__all__ = ["render_matrix_heatmap"]
