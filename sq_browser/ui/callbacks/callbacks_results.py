from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

import dash
from dash import ALL, Input, Output, State, dcc, html, no_update

from sq_browser.core.collaborators import BufferedDownloader, RecordingAddressBar
from sq_browser.core.state import ViewState
from sq_browser.engine.view_state_codec import RESULTS_PATH
from sq_browser.services.results_service import ResultsService
from sq_browser.ui.callbacks.callbacks_utils import alert, triggered_index, try_parse_view_state, values_for_pattern
from sq_browser.ui.ids import IDs
from sq_browser.ui.layout.build_results_page import (
    build_active_filters,
    build_filter_panel,
    build_results_table,
)

if TYPE_CHECKING:
    from sq_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

COLUMN_FILTERS = {"type": IDs.Pattern.COLUMN_FILTER, "index": ALL}
SORT_HEADERS = {"type": IDs.Pattern.SORT_HEADER, "index": ALL}
FILTER_CHIPS = {"type": IDs.Pattern.FILTER_CHIP, "index": ALL}

# Mirrors the encoded filters into the address bar with replace semantics,
# so typing into a filter never adds history entries.
REPLACE_STATE_JS = """
function(sync) {
    if (!sync || sync.path !== window.location.pathname) {
        return window.dash_clientside.no_update;
    }
    var url = sync.path + (sync.search ? "?" + sync.search : "");
    window.history.replaceState(window.history.state, "", url);
    return sync.search;
}
"""


def _service(ctx: AppConfig) -> tuple[ResultsService, RecordingAddressBar]:
    """Per-request service bound to a fresh address-bar recorder."""
    bar = RecordingAddressBar()
    base = ctx.results_service
    return ResultsService(base.record_store, bar, export_prefix=base.export_prefix), bar


def _sync_payload(bar: RecordingAddressBar) -> Dict[str, str] | Any:
    if bar.current is None:
        return no_update
    return {"path": RESULTS_PATH, "search": bar.current}


def changed_filters(state: ViewState, inputs: List[dict]) -> Dict[str, str]:
    """
    Filter inputs whose value differs from the stored predicate.
    Programmatic resets that already match the state yield nothing.
    """
    changed: Dict[str, str] = {}
    for item in inputs or []:
        column = item.get("id", {}).get("index")
        if column is None:
            continue
        value = item.get("value") or ""
        if value != state.filters.get(column, ""):
            changed[column] = value
    return changed


def register_results_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Page load: decode address bar, fetch records
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.RESULTS_FILTER_PANEL, "children"),
        Input(IDs.Location.URL, "search"),
        Input(IDs.Control.RESULTS_TABLE, "id"),
        State(IDs.Location.URL, "pathname"),
    )
    def load_results(search, _table_id, pathname):
        if (pathname or "").rstrip("/") != RESULTS_PATH:
            raise dash.exceptions.PreventUpdate

        service = ctx.results_service
        state = service.open(search)
        panel = build_filter_panel(service.record_store.text_columns(), state.filters)
        return state.to_dict(), panel

    # ---------------------------------------------------------
    # Column filter edits
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Output(IDs.Store.ADDRESS_SYNC, "data"),
        Input(COLUMN_FILTERS, "value"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_filter_input(_values, state_data):
        state = try_parse_view_state(state_data)
        if state is None:
            raise dash.exceptions.PreventUpdate

        changes = changed_filters(state, dash.ctx.inputs_list[0])
        if not changes:
            raise dash.exceptions.PreventUpdate

        service, bar = _service(ctx)
        for column, value in changes.items():
            state = service.update_filter(state, column, value)
        return state.to_dict(), _sync_payload(bar)

    # ---------------------------------------------------------
    # Header clicks: asc -> desc -> asc
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Input(SORT_HEADERS, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_sort_click(_clicks, state_data):
        column = triggered_index(dash.ctx.triggered_id, dash.ctx.triggered[0]["value"])
        state = try_parse_view_state(state_data)
        if column is None or state is None:
            raise dash.exceptions.PreventUpdate
        return ctx.results_service.sort_by(state, column).to_dict()

    # ---------------------------------------------------------
    # Clear all / remove one chip
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Output(IDs.Store.ADDRESS_SYNC, "data", allow_duplicate=True),
        Output(COLUMN_FILTERS, "value"),
        Input(IDs.Control.RESULTS_CLEAR_FILTERS_BTN, "n_clicks"),
        Input(FILTER_CHIPS, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_clear_filters(_clear_clicks, _chip_clicks, state_data):
        state = try_parse_view_state(state_data)
        triggered = dash.ctx.triggered_id
        value = dash.ctx.triggered[0]["value"]
        if state is None or triggered is None or not value:
            raise dash.exceptions.PreventUpdate

        service, bar = _service(ctx)
        outputs = dash.ctx.outputs_list[2]
        if triggered == IDs.Control.RESULTS_CLEAR_FILTERS_BTN:
            state = service.clear_filters(state)
            values = values_for_pattern(outputs, {}, "")
        else:
            column = triggered_index(triggered, value)
            if column is None:
                raise dash.exceptions.PreventUpdate
            state = service.update_filter(state, column, "")
            values = values_for_pattern(outputs, {column: ""}, no_update)

        return state.to_dict(), _sync_payload(bar), values

    # ---------------------------------------------------------
    # Render table, counter and chips from the view state
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RESULTS_TABLE, "children"),
        Output(IDs.Control.RESULTS_COUNTER, "children"),
        Output(IDs.Control.RESULTS_ACTIVE_FILTERS, "children"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def render_results(state_data):
        state = try_parse_view_state(state_data)
        if state is None:
            raise dash.exceptions.PreventUpdate

        view = ctx.results_service.view(state)
        if view.loading:
            return html.Div("Loading stocks...", className="text-muted py-5 text-center"), "", None

        table = build_results_table(view.rows, view.columns, state.sort)
        return table, view.counter_text, build_active_filters(state.filters)

    # ---------------------------------------------------------
    # Address bar sync (clientside, replace semantics)
    # ---------------------------------------------------------
    app.clientside_callback(
        REPLACE_STATE_JS,
        Output(IDs.Control.ADDRESS_SYNC_SINK, "children"),
        Input(IDs.Store.ADDRESS_SYNC, "data"),
        prevent_initial_call=True,
    )

    # ---------------------------------------------------------
    # Export CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RESULTS_DOWNLOAD, "data"),
        Output(IDs.Control.RESULTS_EXPORT_STATUS, "children"),
        Input(IDs.Control.RESULTS_EXPORT_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_export(n_clicks, state_data):
        state = try_parse_view_state(state_data)
        if not n_clicks or state is None:
            raise dash.exceptions.PreventUpdate

        downloader = BufferedDownloader()
        outcome = ctx.results_service.export(state, downloader)
        if not outcome.exported:
            return no_update, alert(outcome.message or "", color="warning")

        filename, content, mime_type = downloader.last
        status = alert(f"Exported {outcome.row_count} rows to {filename}", color="success")
        return dcc.send_bytes(content, filename, type=mime_type), status

    # ---------------------------------------------------------
    # Save Query -> save page with the transfer payload
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Location.URL, "href", allow_duplicate=True),
        Input(IDs.Control.RESULTS_SAVE_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_save_click(n_clicks, state_data):
        state = try_parse_view_state(state_data)
        if not n_clicks or state is None:
            raise dash.exceptions.PreventUpdate
        return ctx.results_service.save_href(state)

