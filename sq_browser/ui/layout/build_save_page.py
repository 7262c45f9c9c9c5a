from __future__ import annotations

from typing import List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from sq_browser.queries.model import TAG_VOCABULARY, SavedQuery
from sq_browser.ui.ids import IDs, saved_delete_id, saved_load_id, tag_toggle_id


def build_save_page() -> dbc.Container:
    """
    Save page:
    - Query summary carried over from the results page
    - Name / tags / description form
    - Optional "Recent" list of saved queries
    """
    header = html.Div(
        [
            html.H3("Save Query", className="mb-0"),
            html.Div(
                [
                    dbc.Button("My Queries", id=IDs.Control.SAVE_MY_QUERIES_BTN, href="/my-query",
                               color="secondary", size="sm", className="me-2"),
                    dbc.Button("View Recent", id=IDs.Control.SAVE_RECENT_TOGGLE_BTN, n_clicks=0,
                               color="secondary", size="sm", outline=True),
                ],
                className="d-flex",
            ),
        ],
        className="d-flex justify-content-between align-items-center mb-3",
    )

    form = dbc.Card(
        [
            dbc.CardHeader("Save Current Query"),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.SAVE_SUMMARY, className="bg-light p-3 rounded mb-3 small"),
                    html.Label("Query Name *", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.SAVE_NAME_INPUT,
                        type="text",
                        placeholder="Enter a name for this query",
                        className="mb-3",
                    ),
                    html.Label("Tags", className="form-label"),
                    html.Div(id=IDs.Control.SAVE_TAGS, children=build_tag_buttons([]), className="mb-2"),
                    html.Div(id=IDs.Control.SAVE_SELECTED_TAGS, className="small text-muted mb-3"),
                    html.Label("Description (Optional)", className="form-label"),
                    dbc.Textarea(
                        id=IDs.Control.SAVE_DESCRIPTION_INPUT,
                        placeholder="Add a description for this query...",
                        rows=3,
                        className="mb-3",
                    ),
                    dbc.Button("Save Query", id=IDs.Control.SAVE_BTN, color="primary"),
                    html.Div(id=IDs.Control.SAVE_STATUS, className="mt-3"),
                ]
            ),
        ],
        id=IDs.Control.SAVE_FORM,
        className="shadow-sm mb-3",
    )

    return dbc.Container(
        fluid=True,
        className="sqb-save-view",
        children=[
            header,
            form,
            html.Div(id=IDs.Control.SAVE_RECENT_LIST),
        ],
    )


def build_tag_buttons(selected: Sequence[str]) -> List[dbc.Button]:
    return [
        dbc.Button(
            tag,
            id=tag_toggle_id(tag),
            n_clicks=0,
            size="sm",
            color="primary",
            outline=tag not in selected,
            className="me-1 mb-1",
        )
        for tag in TAG_VOCABULARY
    ]


def build_selected_tags(selected: Sequence[str]) -> html.Div | str:
    if not selected:
        return ""
    return html.Div(
        ["Selected tags: "] + [dbc.Badge(tag, color="info", className="me-1") for tag in selected]
    )


def build_empty_queries_message() -> html.Div:
    """
    Returns a styled 'no saved queries yet' placeholder.
    """
    return html.Div(
        [
            html.Div("No saved queries yet", className="fw-semibold"),
            html.Div(
                'Run a search, then click "Save Query" on the results page.',
                className="text-muted small mt-1",
            ),
        ],
        className="text-center py-4",
    )


def build_saved_query_cards(queries: Sequence[SavedQuery]) -> html.Div:
    """
    One card per saved query with Load / Delete actions.
    """
    if not queries:
        return build_empty_queries_message()

    cards = []
    for query in queries:
        details = [html.H5(query.name, className="mb-1")]
        if query.tags:
            details.append(
                html.Div([dbc.Badge(t, color="info", className="me-1") for t in query.tags], className="mb-1")
            )
        if query.description:
            details.append(html.P(query.description, className="text-muted small mb-1"))
        details.append(
            html.Div(
                [
                    html.Div(f"Saved: {query.timestamp}"),
                    html.Div(f"Results: {query.result_count} of {query.total_count} stocks"),
                ],
                className="text-muted small",
            )
        )

        cards.append(
            dbc.Card(
                dbc.CardBody(
                    dbc.Row(
                        [
                            dbc.Col(details, md=9),
                            dbc.Col(
                                [
                                    dbc.Button("Load", id=saved_load_id(query.id), n_clicks=0,
                                               color="primary", size="sm", className="me-2"),
                                    dbc.Button("Delete", id=saved_delete_id(query.id), n_clicks=0,
                                               color="danger", outline=True, size="sm"),
                                ],
                                md=3,
                                className="d-flex justify-content-end align-items-start",
                            ),
                        ]
                    )
                ),
                className="mb-2",
            )
        )
    return html.Div(cards)
