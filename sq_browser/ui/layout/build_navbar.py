from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from sq_browser.config.model import GlobalConfig
from sq_browser.engine.view_state_codec import RESULTS_PATH

SEARCH_PATH = "/"
MY_QUERIES_PATH = "/my-query"


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                dbc.NavbarBrand(global_config.ui_title, href=SEARCH_PATH, className="fw-bold"),
                dbc.Nav(
                    [
                        dbc.NavItem(dbc.NavLink("New Search", href=SEARCH_PATH)),
                        dbc.NavItem(dbc.NavLink("Results", href=RESULTS_PATH)),
                        dbc.NavItem(dbc.NavLink("My Queries", href=MY_QUERIES_PATH)),
                    ],
                    navbar=True,
                    className="ms-auto",
                ),
            ],
        ),
        color="light",
        className="border-bottom shadow-sm",
    )


def build_not_found(pathname: str) -> html.Div:
    return html.Div(
        [
            html.H4("Page not found", className="fw-semibold"),
            html.Div(f"No page at {pathname}.", className="text-muted small"),
        ],
        className="mt-4",
    )
