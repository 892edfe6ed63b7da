"""Build the explorer figure from an aligned view."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import plotly.graph_objects as go
from dash import Patch

from ..explorer.filters import ExplorerView
from ..explorer.series import HistogramSeries, PlotSpec, ScatterSeries
from ..visualization.colors import ColorScheme
from . import theme


def marker_color(colors: Sequence[str], scheme: ColorScheme) -> Union[str, list]:
    """Per-entry colours, or the default colour when there is no array."""
    return list(colors) if len(colors) else scheme.default


def build_figure(
    view: Optional[ExplorerView],
    spec: Optional[PlotSpec],
    scheme: ColorScheme = ColorScheme(),
) -> go.Figure:
    """Return the histogram or scatter figure for *view*.

    With no view yet (nothing submitted) an empty, axis-only figure is
    returned.
    """
    fig = go.Figure()
    if view is None or spec is None:
        fig.update_layout(_base_layout())
        return fig

    series = view.series
    if isinstance(series, HistogramSeries):
        hist_kwargs = {}
        if series.bins is not None:
            hist_kwargs = dict(xbins=series.bins.to_plotly(), nbinsx=series.bins.count)
        fig.add_trace(go.Histogram(
            x=list(series.x),
            marker=dict(color=marker_color(series.colors, scheme)),
            **hist_kwargs,
        ))
    elif isinstance(series, ScatterSeries):
        fig.add_trace(go.Scattergl(
            x=list(series.x),
            y=list(series.y),
            mode="markers",
            marker=dict(color=marker_color(series.colors, scheme)),
            customdata=view.records["subject_ID"].tolist(),
            hovertemplate="%{customdata}<br>(%{x}, %{y})<extra></extra>",
        ))
    else:
        raise ValueError(f"Unsupported series type: {type(series).__name__}")

    fig.update_layout(_base_layout(spec.x, spec.y))
    return fig


def color_patch(colors: Sequence[str], scheme: ColorScheme) -> Patch:
    """Partial figure update replacing only the trace's marker colours."""
    patched = Patch()
    patched["data"][0]["marker"]["color"] = marker_color(colors, scheme)
    return patched


def _base_layout(x_title: Optional[str] = None, y_title: Optional[str] = None) -> dict:
    return dict(
        hovermode="closest",
        width=theme.PLOT_WIDTH,
        height=theme.PLOT_HEIGHT,
        dragmode="select",
        paper_bgcolor=theme.BACKGROUND,
        plot_bgcolor=theme.BACKGROUND,
        font=dict(family=theme.FONT_STACK, size=12, color=theme.TEXT),
        margin=dict(l=50, r=10, t=10, b=50),
        xaxis=dict(title=x_title or "", zeroline=False),
        yaxis=dict(title=y_title or ("count" if x_title else ""), zeroline=False),
        showlegend=False,
    )
