from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, no_update

from sq_browser.ui.callbacks.callbacks_utils import alert
from sq_browser.ui.ids import IDs
from sq_browser.validation.errors import ValidationError
from sq_browser.validation.search_validation import build_company_search, build_search_params

if TYPE_CHECKING:
    from sq_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_search_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Run query / company search -> results page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Location.URL, "href", allow_duplicate=True),
        Output(IDs.Control.SEARCH_STATUS, "children"),
        Input(IDs.Control.SEARCH_RUN_BTN, "n_clicks"),
        Input(IDs.Control.SEARCH_COMPANY_BTN, "n_clicks"),
        Input(IDs.Control.SEARCH_COMPANY_INPUT, "n_submit"),
        State(IDs.Control.SEARCH_COMPANY_INPUT, "value"),
        State(IDs.Control.SEARCH_QUERY_INPUT, "value"),
        prevent_initial_call=True,
    )
    def run_search(_run, _search, _submit, company, query):
        triggered = dash.ctx.triggered_id
        if triggered is None:
            raise dash.exceptions.PreventUpdate

        try:
            if triggered == IDs.Control.SEARCH_RUN_BTN:
                href = build_search_params(company, query)
            else:
                href = build_company_search(company)
        except ValidationError as e:
            return no_update, alert(e.messages, color="warning")

        logger.info("Search submitted", extra={"href": href})
        return href, None

    # ---------------------------------------------------------
    # Clear inputs
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_COMPANY_INPUT, "value"),
        Output(IDs.Control.SEARCH_QUERY_INPUT, "value"),
        Output(IDs.Control.SEARCH_STATUS, "children", allow_duplicate=True),
        Input(IDs.Control.SEARCH_CLEAR_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def clear_search(n_clicks):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate
        return "", "", None
