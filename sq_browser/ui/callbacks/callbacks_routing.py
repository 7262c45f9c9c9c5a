from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from sq_browser.engine.view_state_codec import RESULTS_PATH, SAVE_PATH
from sq_browser.ui.ids import IDs
from sq_browser.ui.layout.build_navbar import MY_QUERIES_PATH, SEARCH_PATH, build_not_found
from sq_browser.ui.layout.build_results_page import build_results_page
from sq_browser.ui.layout.build_save_page import build_save_page
from sq_browser.ui.layout.build_saved_queries_page import build_saved_queries_page
from sq_browser.ui.layout.build_search_page import build_search_page

if TYPE_CHECKING:
    from sq_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

PAGES = {
    SEARCH_PATH: build_search_page,
    RESULTS_PATH: build_results_page,
    SAVE_PATH: build_save_page,
    MY_QUERIES_PATH: build_saved_queries_page,
}


def page_for(pathname: str | None):
    """Resolve a pathname to its page; trailing slashes are ignored."""
    path = (pathname or SEARCH_PATH).rstrip("/") or SEARCH_PATH
    builder = PAGES.get(path)
    if builder is None:
        logger.info("Unknown page requested", extra={"pathname": pathname})
        return build_not_found(path)
    return builder()


def register_routing_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.PAGE_CONTENT, "children"),
        Input(IDs.Location.URL, "pathname"),
    )
    def render_page(pathname):
        return page_for(pathname)
