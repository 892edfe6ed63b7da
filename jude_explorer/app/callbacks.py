"""All Dash callbacks for the explorer app."""

from __future__ import annotations

import json

import requests
from dash import MATCH, Input, Output, State, callback_context, dcc, no_update
from dash.exceptions import PreventUpdate

from ..client import ExportError
from ..explorer.filters import PERIJOVE_MAX, PERIJOVE_MIN, FilterState
from ..explorer.pagination import Pager, paginate
from ..explorer.series import PlotSpec, PlotType
from ..explorer.state import HOVER_PANEL, PANELS, SELECTION_PANEL
from ..utils.logging import get_logger
from .figures import build_figure, color_patch
from .layout import panel_id, subject_card

logger = get_logger(__name__)

_VIEW_TRIGGERS = {"plot-btn", "perijove-range", "vortex-only", "reload-btn"}


def _filter_state(perijove_range, vortex_value) -> FilterState:
    lo, hi = perijove_range or (PERIJOVE_MIN, PERIJOVE_MAX)
    return FilterState(
        epoch_min=int(lo),
        epoch_max=int(hi),
        vortex_only="vortex" in (vortex_value or []),
    )


def _pattern_id(prop_id: str) -> dict:
    return json.loads(prop_id.rsplit(".", 1)[0])


def _status(state) -> str:
    explorer = state.explorer
    n_total = len(explorer.dataset)
    if explorer.view is None:
        return f"{n_total:,} subjects loaded"
    return f"{len(explorer.view):,} / {n_total:,} subjects"


def register(app):
    """Register all callbacks on the Dash app instance."""

    # ------------------------------------------------------------------ #
    #  Plot form: y axis only for scatter
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("y-var", "disabled"),
        Input("plot-type", "value"),
    )
    def toggle_y_axis(plot_type):
        return plot_type != PlotType.SCATTER.value

    # ------------------------------------------------------------------ #
    #  Submit / filter / hover / select / reload
    # ------------------------------------------------------------------ #

    @app.callback(
        Output("explorer-graph", "figure"),
        Output(panel_id("panel-revision", SELECTION_PANEL), "data"),
        Output(panel_id("panel-revision", HOVER_PANEL), "data"),
        Output("status-bar", "children"),
        Output("x-var", "options"),
        Output("y-var", "options"),
        Input("plot-btn", "n_clicks"),
        Input("perijove-range", "value"),
        Input("vortex-only", "value"),
        Input("explorer-graph", "hoverData"),
        Input("explorer-graph", "selectedData"),
        Input("reload-btn", "n_clicks"),
        State("plot-type", "value"),
        State("x-var", "value"),
        State("y-var", "value"),
        State(panel_id("panel-revision", SELECTION_PANEL), "data"),
        State(panel_id("panel-revision", HOVER_PANEL), "data"),
        prevent_initial_call=True,
    )
    def update_explorer(
        plot_clicks, perijove_range, vortex_value,
        hover_data, selected_data, reload_clicks,
        plot_type, x_var, y_var,
        selection_rev, hover_rev,
    ):
        """Unified handler: every trigger re-runs the pipeline from its own stage."""
        from .app import state
        if state is None:
            raise PreventUpdate

        ctx = callback_context
        if not ctx.triggered:
            raise PreventUpdate

        explorer = state.explorer
        trigger_id = ctx.triggered[0]["prop_id"].split(".")[0]
        trigger_prop = ctx.triggered[0]["prop_id"].rsplit(".", 1)[-1]
        selection_rev = (selection_rev or 0) + 1
        hover_rev = (hover_rev or 0) + 1

        if trigger_id == "explorer-graph" and trigger_prop == "hoverData":
            result = explorer.hover(hover_data)
            if result is None:
                raise PreventUpdate
            return (
                color_patch(result.colors, explorer.scheme),
                no_update, hover_rev, no_update, no_update, no_update,
            )

        if trigger_id == "explorer-graph" and trigger_prop == "selectedData":
            if explorer.select(selected_data) is None:
                raise PreventUpdate
            return no_update, selection_rev, no_update, no_update, no_update, no_update

        if trigger_id not in _VIEW_TRIGGERS:
            raise PreventUpdate

        filter_state = _filter_state(perijove_range, vortex_value)

        if trigger_id == "reload-btn":
            if state.client is None:
                raise PreventUpdate
            try:
                dataset = state.client.fetch_exploration_data()
            except (requests.RequestException, ValueError) as exc:
                logger.error("Reloading exploration data failed: %s", exc)
                raise PreventUpdate
            explorer.reload(dataset)
            options = dataset.variable_options()
            return (
                build_figure(None, None, explorer.scheme),
                selection_rev, hover_rev, _status(state), options, options,
            )

        if trigger_id == "plot-btn":
            try:
                spec = PlotSpec.from_form(plot_type, x_var, y_var)
            except ValueError:
                raise PreventUpdate
            if spec is None:
                # form not ready
                raise PreventUpdate
            view = explorer.submit(spec, filter_state)
        else:
            view = explorer.update_filter(filter_state)
            if view is None:
                raise PreventUpdate

        return (
            build_figure(view, explorer.spec, explorer.scheme),
            selection_rev, hover_rev, _status(state), no_update, no_update,
        )

    # ------------------------------------------------------------------ #
    #  Image panels: paging
    # ------------------------------------------------------------------ #

    @app.callback(
        Output(panel_id("panel-page", MATCH), "data"),
        Input(panel_id("page-prev", MATCH), "n_clicks"),
        Input(panel_id("page-next", MATCH), "n_clicks"),
        Input(panel_id("panel-revision", MATCH), "data"),
        State(panel_id("panel-page", MATCH), "data"),
        prevent_initial_call=True,
    )
    def change_page(prev_clicks, next_clicks, revision, page):
        from .app import state
        if state is None:
            raise PreventUpdate

        ctx = callback_context
        if not ctx.triggered:
            raise PreventUpdate

        info = _pattern_id(ctx.triggered[0]["prop_id"])
        # new panel content always starts on the first page
        if info["type"] == "panel-revision":
            return 0

        records = state.explorer.panels[info["panel"]]
        pager = Pager(total=len(records), page=page or 0)
        if info["type"] == "page-prev":
            return pager.previous().page
        if info["type"] == "page-next":
            return pager.next().page
        raise PreventUpdate

    @app.callback(
        Output(panel_id("panel-images", MATCH), "children"),
        Output(panel_id("page-label", MATCH), "children"),
        Input(panel_id("panel-page", MATCH), "data"),
        Input(panel_id("panel-revision", MATCH), "data"),
    )
    def render_panel(page, revision):
        from .app import state
        if state is None:
            raise PreventUpdate

        name = callback_context.outputs_list[0]["id"]["panel"]
        records = state.explorer.panels[name]
        pager = Pager(total=len(records), page=page or 0)
        shown = paginate(records, pager.page)
        cards = [subject_card(rec, name) for rec in shown.to_dict("records")]
        return cards, pager.label

    # ------------------------------------------------------------------ #
    #  Export
    # ------------------------------------------------------------------ #

    @app.callback(
        Output(panel_id("export-download", MATCH), "data"),
        Input(panel_id("export-btn", MATCH), "n_clicks"),
        prevent_initial_call=True,
    )
    def export_subjects(n_clicks):
        from .app import state
        if state is None or state.client is None or not n_clicks:
            raise PreventUpdate

        name = _pattern_id(callback_context.triggered[0]["prop_id"])["panel"]
        if name not in PANELS:
            raise PreventUpdate
        subject_ids = state.explorer.panels[name]["subject_ID"].tolist()

        try:
            export = state.client.create_export(subject_ids)
        except (ExportError, requests.RequestException) as exc:
            logger.warning("Export of %s subjects failed: %s", len(subject_ids), exc)
            return no_update
        return dcc.send_string(export.content, export.filename, type=export.mime_type)
