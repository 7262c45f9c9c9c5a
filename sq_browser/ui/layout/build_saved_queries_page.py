from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from sq_browser.ui.ids import IDs


def build_saved_queries_page() -> dbc.Container:
    """
    My Queries page: every saved query, populated by callback.
    """
    main_card = dbc.Card(
        [
            dbc.CardHeader("My Queries"),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.MY_QUERIES_SUMMARY, className="text-muted small mb-2"),
                    html.Div(id=IDs.Control.MY_QUERIES_LIST),
                ]
            ),
        ],
        className="shadow-sm",
    )
    return dbc.Container(main_card, fluid=True, className="sqb-my-queries-view")
