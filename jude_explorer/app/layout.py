"""Dash layout: left sidebar (plot form and filters), chart, image panels.

Both image panels share one set of pattern-matching component IDs keyed
by ``{"type": ..., "panel": <panel name>}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import dcc, html

from ..explorer.filters import PERIJOVE_MAX, PERIJOVE_MIN
from ..explorer.series import PlotType
from ..explorer.state import HOVER_PANEL, SELECTION_PANEL
from . import theme
from .figures import build_figure

if TYPE_CHECKING:
    from .app import ServerState

_PANEL_TITLES = {
    SELECTION_PANEL: "Selected subjects",
    HOVER_PANEL: "Hovered subjects",
}


def panel_id(kind: str, panel: str) -> dict:
    return {"type": kind, "panel": panel}


def build_layout(state: ServerState) -> html.Div:
    """Return the complete app layout."""
    explorer = state.explorer
    options = explorer.dataset.variable_options()
    fs = explorer.filter_state
    # reload and export both need the backend
    offline = state.client is None

    return html.Div(
        className="app-container",
        children=[
            # ── Left sidebar ──
            html.Div(
                className="left-sidebar",
                style={"width": theme.SIDEBAR_WIDTH, "backgroundColor": theme.SIDEBAR_BG},
                children=[
                    html.Div("JuDE Explorer", className="sidebar-header"),
                    _plot_form(options),
                    _filters(fs.epoch_min, fs.epoch_max, fs.vortex_only),
                    html.Button(
                        "Reload data", id="reload-btn",
                        disabled=offline,
                        className="btn-info mt-8",
                        style={"width": "100%"},
                    ),
                    html.Div(
                        id="status-bar",
                        className="sidebar-status",
                        children=f"{len(explorer.dataset):,} subjects loaded",
                    ),
                ],
            ),
            # ── Main area ──
            html.Div(
                className="main-area",
                children=[
                    dcc.Graph(
                        id="explorer-graph",
                        figure=build_figure(None, None, explorer.scheme),
                        config={
                            "displayModeBar": True,
                            "modeBarButtonsToAdd": ["lasso2d", "select2d"],
                        },
                    ),
                    html.Div(
                        className="images-container",
                        children=[
                            _image_panel(name, offline)
                            for name in (SELECTION_PANEL, HOVER_PANEL)
                        ],
                    ),
                ],
            ),
        ],
    )


def _plot_form(options: list[dict]) -> html.Div:
    return html.Div(
        className="tab-content",
        children=[
            html.Label("Choose the plot type"),
            dcc.RadioItems(
                id="plot-type",
                options=[{"label": p.label, "value": p.value} for p in PlotType],
                value=PlotType.HISTOGRAM.value,
                inline=True,
            ),
            html.Label("x"),
            dcc.Dropdown(id="x-var", options=options, placeholder="Choose a variable"),
            html.Label("y"),
            dcc.Dropdown(
                id="y-var", options=options,
                placeholder="Choose a variable", disabled=True,
            ),
            html.Button(
                "Plot!", id="plot-btn",
                className="btn-primary mt-8",
                style={"width": "100%"},
            ),
        ],
    )


def _filters(epoch_min: int, epoch_max: int, vortex_only: bool) -> html.Div:
    return html.Div(
        className="tab-content mt-8",
        children=[
            html.Label("Filter by perijove"),
            dcc.RangeSlider(
                id="perijove-range",
                min=PERIJOVE_MIN, max=PERIJOVE_MAX, step=1,
                value=[epoch_min, epoch_max],
                marks=None,
                tooltip={"always_visible": True, "placement": "bottom"},
            ),
            dcc.Checklist(
                id="vortex-only",
                options=[{"label": "Show vortices only", "value": "vortex"}],
                value=["vortex"] if vortex_only else [],
            ),
        ],
    )


def _image_panel(name: str, offline: bool = False) -> html.Div:
    return html.Div(
        className=f"subject-images-container subject-images-container-{name}",
        children=[
            html.H4(_PANEL_TITLES[name], style={"color": theme.HEADER}),
            html.Div(
                className="image-page",
                children=[
                    html.Button("«", id=panel_id("page-prev", name)),
                    html.Span("1 / 0", id=panel_id("page-label", name)),
                    html.Button("»", id=panel_id("page-next", name)),
                ],
            ),
            html.Div(id=panel_id("panel-images", name), className="subject-images"),
            html.Div(
                className="subject-export-container",
                children=[
                    html.Button(
                        "Export subjects",
                        id=panel_id("export-btn", name),
                        disabled=offline,
                    ),
                    dcc.Loading(
                        type="circle",
                        children=dcc.Download(id=panel_id("export-download", name)),
                    ),
                ],
            ),
            dcc.Store(id=panel_id("panel-revision", name), data=0),
            dcc.Store(id=panel_id("panel-page", name), data=0),
        ],
    )


def subject_card(record: dict, name: str) -> html.Div:
    """One image tile with its metadata caption."""
    subject_id = record.get("subject_ID")
    url = record.get("url")
    caption = [
        html.Span(f"#{subject_id}", className="subject-field"),
        html.Span(f"PJ {_fmt(record.get('perijove'))}", className="subject-field"),
        html.Span(
            f"({_fmt(record.get('latitude'))}, {_fmt(record.get('longitude'))})",
            className="subject-field",
        ),
    ]
    return html.Div(
        key=f"{subject_id}_{name}",
        className="subject-image",
        children=[
            html.Img(src=url if isinstance(url, str) else "", alt=str(subject_id)),
            html.Div(className="subject-metadata", children=caption),
        ],
    )


def _fmt(value) -> str:
    if value is None:
        return "?"
    if isinstance(value, float):
        if value != value:
            return "?"
        return str(int(value)) if value.is_integer() else f"{value:.2f}"
    return str(value)
