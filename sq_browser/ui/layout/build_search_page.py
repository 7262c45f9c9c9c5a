from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from sq_browser.ui.ids import IDs


def build_search_page() -> dbc.Container:
    """
    Search page:
    - company name search (becomes a Name filter)
    - free-text boolean query, passed through to the data source as-is
    """
    company_row = dbc.InputGroup(
        [
            dbc.Input(
                id=IDs.Control.SEARCH_COMPANY_INPUT,
                placeholder="Search company",
                type="text",
                debounce=True,
            ),
            dbc.Button("Search", id=IDs.Control.SEARCH_COMPANY_BTN, color="primary"),
        ],
        className="mb-3",
    )

    query_box = dcc.Textarea(
        id=IDs.Control.SEARCH_QUERY_INPUT,
        placeholder="Market capitalization > 500 AND\nPrice to earning < 15 AND\nReturn on capital employed > 22%",
        className="form-control mb-3",
        style={"minHeight": "140px", "fontFamily": "monospace"},
    )

    actions = html.Div(
        [
            dbc.Button("Run this query", id=IDs.Control.SEARCH_RUN_BTN, color="primary", className="me-2"),
            dbc.Button("Clear", id=IDs.Control.SEARCH_CLEAR_BTN, color="secondary", outline=True),
        ],
        className="d-flex",
    )

    card = dbc.Card(
        [
            dbc.CardHeader("Create a Search Query"),
            dbc.CardBody(
                [
                    company_row,
                    html.Label("Query", className="form-label"),
                    query_box,
                    actions,
                    html.Div(id=IDs.Control.SEARCH_STATUS, className="mt-3"),
                ]
            ),
        ],
        className="shadow-sm",
    )

    return dbc.Container(dbc.Row(dbc.Col(card, md=8)), fluid=True, className="sqb-search-view")
