from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State

from sq_browser.core.collaborators import PreConfirmed
from sq_browser.core.exceptions import SavedQueryNotFoundError
from sq_browser.services.saved_query_service import DELETE_CONFIRMATION, delete_with_confirmation
from sq_browser.ui.callbacks.callbacks_utils import triggered_index
from sq_browser.ui.ids import IDs
from sq_browser.ui.layout.build_save_page import build_saved_query_cards

if TYPE_CHECKING:
    from sq_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

LOAD_BUTTONS = {"type": IDs.Pattern.SAVED_LOAD, "index": ALL}
DELETE_BUTTONS = {"type": IDs.Pattern.SAVED_DELETE, "index": ALL}


def register_saved_queries_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # My Queries list
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MY_QUERIES_LIST, "children"),
        Output(IDs.Control.MY_QUERIES_SUMMARY, "children"),
        Input(IDs.Store.SAVED_QUERIES, "data"),
        Input(IDs.Control.MY_QUERIES_LIST, "id"),
    )
    def render_my_queries(local_data, _list_id):
        queries = ctx.repository(local_data).list()
        noun = "query" if len(queries) == 1 else "queries"
        return build_saved_query_cards(queries), f"{len(queries)} saved {noun}"

    # ---------------------------------------------------------
    # Load: navigate to results with the saved filters
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Location.URL, "href", allow_duplicate=True),
        Input(LOAD_BUTTONS, "n_clicks"),
        State(IDs.Store.SAVED_QUERIES, "data"),
        prevent_initial_call=True,
    )
    def on_load(_clicks, local_data):
        query_id = triggered_index(dash.ctx.triggered_id, dash.ctx.triggered[0]["value"])
        if query_id is None:
            raise dash.exceptions.PreventUpdate
        try:
            return ctx.repository(local_data).results_href(query_id)
        except SavedQueryNotFoundError:
            logger.warning("Saved query not found", extra={"query_id": query_id})
            raise dash.exceptions.PreventUpdate

    # ---------------------------------------------------------
    # Delete: confirm first
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.PENDING_DELETE, "data"),
        Output(IDs.Control.DELETE_CONFIRM, "displayed"),
        Output(IDs.Control.DELETE_CONFIRM, "message"),
        Input(DELETE_BUTTONS, "n_clicks"),
        prevent_initial_call=True,
    )
    def on_delete_click(_clicks):
        query_id = triggered_index(dash.ctx.triggered_id, dash.ctx.triggered[0]["value"])
        if query_id is None:
            raise dash.exceptions.PreventUpdate
        return query_id, True, DELETE_CONFIRMATION

    @app.callback(
        Output(IDs.Store.SAVED_QUERIES, "data", allow_duplicate=True),
        Output(IDs.Store.PENDING_DELETE, "data", allow_duplicate=True),
        Input(IDs.Control.DELETE_CONFIRM, "submit_n_clicks"),
        State(IDs.Store.PENDING_DELETE, "data"),
        State(IDs.Store.SAVED_QUERIES, "data"),
        prevent_initial_call=True,
    )
    def on_delete_confirmed(submit_clicks, query_id, local_data):
        if not submit_clicks or not query_id:
            raise dash.exceptions.PreventUpdate

        repository = ctx.repository(local_data)
        # The dialog already asked; the prompt just records the answer.
        delete_with_confirmation(repository, query_id, PreConfirmed(True))
        return ctx.local_snapshot(repository), None
