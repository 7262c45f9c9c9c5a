from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from sq_browser.core.filter_state import SortDirection, SortState
from sq_browser.core.record import Record
from sq_browser.ui.formatting import format_cell, is_numeric_display
from sq_browser.ui.ids import IDs, column_filter_id, filter_chip_id, sort_header_id

NAME_COLUMN = "Name"

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'

HEADER_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "12px",
    "fontWeight": "600",
    "backgroundColor": "#f3f4f6",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#6b7280",
    "padding": "8px 12px",
    "whiteSpace": "nowrap",
    "textTransform": "uppercase",
    "cursor": "pointer",
}

CELL_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "13px",
    "padding": "8px 12px",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#111827",
    "whiteSpace": "nowrap",
}


def build_results_page() -> dbc.Container:
    """
    Results page skeleton. The filter panel, active filters and the
    table are filled in by callbacks once records are loaded.
    """
    actions = html.Div(
        [
            dbc.Button("Export CSV", id=IDs.Control.RESULTS_EXPORT_BTN, color="success", size="sm", className="me-2"),
            dbc.Button("Save Query", id=IDs.Control.RESULTS_SAVE_BTN, color="primary", size="sm", className="me-2"),
            dbc.Button("My Queries", href="/my-query", color="secondary", size="sm", outline=True),
        ],
        className="d-flex align-items-center",
    )

    header = dbc.Row(
        [
            dbc.Col(html.H3("Stock Results", className="mb-0"), md=4),
            dbc.Col(actions, md=5),
            dbc.Col(
                html.Div(id=IDs.Control.RESULTS_COUNTER, className="text-muted small text-end"),
                md=3,
                className="d-flex align-items-center justify-content-end",
            ),
        ],
        className="mb-3",
    )

    return dbc.Container(
        fluid=True,
        className="sqb-results-view",
        children=[
            header,
            html.Div(id=IDs.Control.RESULTS_EXPORT_STATUS),
            html.Div(id=IDs.Control.RESULTS_ACTIVE_FILTERS),
            html.Div(id=IDs.Control.RESULTS_FILTER_PANEL),
            dcc.Loading(
                html.Div(id=IDs.Control.RESULTS_TABLE, style={"overflowX": "auto"}),
                type="circle",
            ),
        ],
    )


def build_filter_panel(text_columns: Sequence[str], filters: Mapping[str, str]) -> Optional[dbc.Card]:
    """One text input per free-text column ("Refine Results")."""
    if not text_columns:
        return None

    inputs = [
        dbc.Col(
            [
                html.Label(column, className="form-label small fw-semibold"),
                dbc.Input(
                    id=column_filter_id(column),
                    type="text",
                    placeholder=f"Filter by {column}",
                    value=filters.get(column, ""),
                ),
            ],
            md=4,
            className="mb-3",
        )
        for column in text_columns
    ]

    return dbc.Card(
        [
            dbc.CardHeader("Refine Results"),
            dbc.CardBody(dbc.Row(inputs)),
        ],
        className="mb-3 shadow-sm",
    )


def build_active_filters(filters: Mapping[str, str]) -> Optional[dbc.Card]:
    """Chips for every non-empty predicate, each removable, plus Clear All."""
    active = {k: v for k, v in filters.items() if v}
    if not active:
        return None

    chips = [
        dbc.Badge(
            [
                f"{column}: {value}",
                html.Span(
                    " ×",
                    id=filter_chip_id(column),
                    n_clicks=0,
                    style={"cursor": "pointer"},
                    className="ms-1",
                ),
            ],
            color="info",
            pill=True,
            className="me-2 mb-1 p-2",
        )
        for column, value in active.items()
    ]

    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(
                    [
                        html.Span("Active Filters:", className="small fw-semibold"),
                        dbc.Button(
                            "Clear All",
                            id=IDs.Control.RESULTS_CLEAR_FILTERS_BTN,
                            color="link",
                            size="sm",
                        ),
                    ],
                    className="d-flex justify-content-between align-items-center mb-2",
                ),
                html.Div(chips, className="d-flex flex-wrap"),
            ]
        ),
        className="mb-3 shadow-sm",
    )


def _sort_marker(column: str, sort: Optional[SortState]) -> str:
    if sort is None or sort.column != column:
        return ""
    return " ↑" if sort.direction is SortDirection.ASC else " ↓"


def build_results_table(
        rows: Sequence[Record],
        columns: List[str],
        sort: Optional[SortState],
) -> html.Div | dbc.Table:
    """
    Results table with clickable headers. Mimics the look-and-feel of a
    Dash DataTable but keeps header clicks as pattern-matching inputs.
    """
    if not rows:
        return html.Div(
            [
                html.Div("No stocks found", className="fw-semibold"),
                html.Div("Try adjusting your search criteria", className="text-muted small mt-1"),
            ],
            className="text-center py-5",
        )

    thead = html.Thead(
        html.Tr(
            [
                html.Th(
                    f"{column}{_sort_marker(column, sort)}",
                    id=sort_header_id(column),
                    n_clicks=0,
                    style=HEADER_STYLE,
                )
                for column in columns
            ]
        )
    )

    body_rows = []
    for index, record in enumerate(rows):
        cells = []
        for column in columns:
            cell = record.cell(column)
            style = dict(CELL_STYLE)
            if is_numeric_display(column, cell):
                style["textAlign"] = "right"
            if column == NAME_COLUMN:
                style.update({"color": "#2563eb", "fontWeight": "500"})
            cells.append(html.Td(format_cell(column, cell), style=style))
        body_rows.append(
            html.Tr(cells, style={"backgroundColor": "#ffffff" if index % 2 == 0 else "#f9fafb"})
        )

    return dbc.Table(
        [thead, html.Tbody(body_rows)],
        bordered=False,
        hover=True,
        responsive=True,
        className="mb-0",
    )
