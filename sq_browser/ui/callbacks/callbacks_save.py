from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, html, no_update

from sq_browser.engine.view_state_codec import SAVE_PATH, decode_transfer_payload
from sq_browser.queries.model import SavedQueryCandidate, suggest_query_name, summary_lines, toggle_tag
from sq_browser.ui.callbacks.callbacks_utils import alert, triggered_index, try_parse_draft
from sq_browser.ui.ids import IDs
from sq_browser.ui.layout.build_navbar import MY_QUERIES_PATH
from sq_browser.ui.layout.build_save_page import build_saved_query_cards, build_selected_tags, build_tag_buttons
from sq_browser.validation.errors import ValidationError

if TYPE_CHECKING:
    from sq_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

TAG_TOGGLES = {"type": IDs.Pattern.TAG_TOGGLE, "index": ALL}


def register_save_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Page load: decode ?data=... into the form
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.QUERY_DRAFT, "data"),
        Output(IDs.Control.SAVE_SUMMARY, "children"),
        Output(IDs.Control.SAVE_NAME_INPUT, "value"),
        Output(IDs.Store.SELECTED_TAGS, "data"),
        Input(IDs.Location.URL, "search"),
        Input(IDs.Control.SAVE_FORM, "id"),
        State(IDs.Location.URL, "pathname"),
    )
    def load_save_form(search, _form_id, pathname):
        if (pathname or "").rstrip("/") != SAVE_PATH:
            raise dash.exceptions.PreventUpdate

        draft = decode_transfer_payload(search)
        if draft is None:
            summary = html.Div("No query data available", className="text-muted")
            return None, summary, "", []

        summary = [html.Div(line) for line in summary_lines(draft)]
        return draft.to_dict(), summary, suggest_query_name(draft.filters), []

    # ---------------------------------------------------------
    # Tags
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTED_TAGS, "data", allow_duplicate=True),
        Input(TAG_TOGGLES, "n_clicks"),
        State(IDs.Store.SELECTED_TAGS, "data"),
        prevent_initial_call=True,
    )
    def on_tag_click(_clicks, selected):
        tag = triggered_index(dash.ctx.triggered_id, dash.ctx.triggered[0]["value"])
        if tag is None:
            raise dash.exceptions.PreventUpdate
        return toggle_tag(selected or [], tag)

    @app.callback(
        Output(IDs.Control.SAVE_TAGS, "children"),
        Output(IDs.Control.SAVE_SELECTED_TAGS, "children"),
        Input(IDs.Store.SELECTED_TAGS, "data"),
    )
    def render_tags(selected):
        selected = selected or []
        return build_tag_buttons(selected), build_selected_tags(selected)

    # ---------------------------------------------------------
    # Save
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SAVED_QUERIES, "data"),
        Output(IDs.Control.SAVE_STATUS, "children"),
        Output(IDs.Location.URL, "href", allow_duplicate=True),
        Input(IDs.Control.SAVE_BTN, "n_clicks"),
        State(IDs.Control.SAVE_NAME_INPUT, "value"),
        State(IDs.Control.SAVE_DESCRIPTION_INPUT, "value"),
        State(IDs.Store.SELECTED_TAGS, "data"),
        State(IDs.Store.QUERY_DRAFT, "data"),
        State(IDs.Store.SAVED_QUERIES, "data"),
        prevent_initial_call=True,
    )
    def on_save(n_clicks, name, description, selected, draft_data, local_data):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        draft = try_parse_draft(draft_data)
        if draft is None:
            return no_update, alert("No query data to save", color="warning"), no_update

        candidate = SavedQueryCandidate(
            name=name or "",
            draft=draft,
            description=description or "",
            tags=tuple(selected or ()),
        )
        repository = ctx.repository(local_data)
        try:
            repository.save(candidate)
        except ValidationError as e:
            return no_update, alert(e.messages, color="warning"), no_update

        return ctx.local_snapshot(repository), alert("Query saved", color="success"), MY_QUERIES_PATH

    # ---------------------------------------------------------
    # Recent list
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SAVE_RECENT_LIST, "children"),
        Output(IDs.Control.SAVE_RECENT_TOGGLE_BTN, "children"),
        Input(IDs.Control.SAVE_RECENT_TOGGLE_BTN, "n_clicks"),
        Input(IDs.Store.SAVED_QUERIES, "data"),
    )
    def render_recent(n_clicks, local_data):
        if not (n_clicks or 0) % 2:
            return None, "View Recent"

        recent = ctx.repository(local_data).recent(ctx.global_config.recent_limit)
        return html.Div(
            [html.H5("Recent Queries", className="mb-2"), build_saved_query_cards(recent)],
        ), "Hide Recent"
