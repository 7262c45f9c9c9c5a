from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from sq_browser.core.filter_state import FilterState
from sq_browser.core.state import ViewState
from sq_browser.ui.callbacks.callbacks_results import changed_filters
from sq_browser.ui.callbacks.callbacks_routing import page_for
from sq_browser.ui.callbacks.callbacks_utils import (
    alert,
    triggered_index,
    try_parse_draft,
    try_parse_view_state,
    values_for_pattern,
)
from sq_browser.ui.ids import IDs, column_filter_id


def test_triggered_index_ignores_fresh_renders():
    assert triggered_index({"type": "x", "index": "P/E"}, 1) == "P/E"
    assert triggered_index({"type": "x", "index": "P/E"}, 0) is None
    assert triggered_index({"type": "x", "index": "P/E"}, None) is None
    assert triggered_index("plain-id", 3) is None


def test_values_for_pattern():
    outputs = [{"id": column_filter_id("Name")}, {"id": column_filter_id("Industry")}]
    assert values_for_pattern(outputs, {"Industry": ""}, "keep") == ["keep", ""]
    assert values_for_pattern([], {}, None) == []


def test_try_parse_helpers():
    state = ViewState(filters=FilterState({"Name": "a"}), loading=False)
    assert try_parse_view_state(state.to_dict()) == state
    assert try_parse_view_state(None) is None
    assert try_parse_draft({}) is None
    assert try_parse_draft("nope") is None
    assert try_parse_draft({"filters": {}, "resultCount": "x"}) is None


def test_changed_filters_only_reports_differences():
    state = ViewState(filters=FilterState({"Name": "tata", "Industry": ""}))
    inputs = [
        {"id": column_filter_id("Name"), "property": "value", "value": "tata"},
        {"id": column_filter_id("Industry"), "property": "value", "value": "steel"},
        {"id": column_filter_id("Sector"), "property": "value", "value": None},
    ]
    assert changed_filters(state, inputs) == {"Industry": "steel"}


def test_alert_single_and_many():
    single = alert("No data to export", color="warning")
    assert isinstance(single, dbc.Alert)
    assert single.children == "No data to export"

    many = alert(["one", "two"])
    assert isinstance(many.children, html.Ul)
    assert len(many.children.children) == 2


def test_page_for_routes_known_paths():
    assert page_for("/").className == "sqb-search-view"
    assert page_for(None).className == "sqb-search-view"
    assert page_for("/query-result").className == "sqb-results-view"
    assert page_for("/save-query/").className == "sqb-save-view"
    assert page_for("/my-query").className == "sqb-my-queries-view"
    assert page_for("/nowhere").children[0].children == "Page not found"


def test_ids_are_unique():
    values = [
        v for cls in (IDs.Store, IDs.Control)
        for k, v in vars(cls).items() if not k.startswith("_")
    ]
    assert len(values) == len(set(values))
