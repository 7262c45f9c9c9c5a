from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from sq_browser.ui.ids import IDs
from sq_browser.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from sq_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    """
    App shell: navbar, router location, app-level stores and the page slot
    that the routing callback fills.
    """
    return dbc.Container(
        fluid=True,
        className="sqb-root",
        children=[
            dcc.Location(id=IDs.Location.URL, refresh="callback-nav"),
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Store(id=IDs.Store.VIEW_STATE),
            dcc.Store(id=IDs.Store.ADDRESS_SYNC),
            dcc.Store(id=IDs.Store.QUERY_DRAFT),
            dcc.Store(id=IDs.Store.SELECTED_TAGS, data=[]),
            dcc.Store(id=IDs.Store.PENDING_DELETE),
            # Browser localStorage: the saved-query collection
            dcc.Store(id=IDs.Store.SAVED_QUERIES, storage_type="local"),

            dcc.Download(id=IDs.Control.RESULTS_DOWNLOAD),
            dcc.ConfirmDialog(id=IDs.Control.DELETE_CONFIRM),

            html.Div(id=IDs.Control.PAGE_CONTENT, className="mt-3"),
            html.Div(id=IDs.Control.ADDRESS_SYNC_SINK, style={"display": "none"}),
        ],
    )
