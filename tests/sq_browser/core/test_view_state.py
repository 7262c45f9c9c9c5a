from __future__ import annotations

from sq_browser.core.filter_state import FilterState, SortDirection, SortState
from sq_browser.core.state import ViewState


def test_transitions_return_new_states():
    state = ViewState(filters=FilterState({"Name": "tata"}))
    filtered = state.with_filter("Industry", "steel")
    assert state.filters.to_dict() == {"Name": "tata"}
    assert filtered.filters.active() == {"Name": "tata", "Industry": "steel"}


def test_without_filter_keeps_key_with_empty_value():
    state = ViewState(filters=FilterState({"Name": "tata"})).without_filter("Name")
    assert state.filters.to_dict() == {"Name": ""}
    assert state.filters.is_empty()


def test_cleared_keeps_sort_and_query():
    state = ViewState(
        filters=FilterState({"Name": "tata"}),
        sort=SortState("P/E"),
        query="P/E < 15",
    ).cleared()
    assert state.filters == FilterState()
    assert state.sort == SortState("P/E")
    assert state.query == "P/E < 15"


def test_sort_click_and_loaded():
    state = ViewState().loaded().with_sort_click("P/E").with_sort_click("P/E")
    assert state.loading is False
    assert state.sort == SortState("P/E", SortDirection.DESC)


def test_dict_round_trip():
    state = ViewState(
        filters=FilterState({"Name": "ta"}),
        sort=SortState("Name", SortDirection.DESC),
        query="ROCE > 20",
        loading=False,
    )
    assert ViewState.from_dict(state.to_dict()) == state


def test_from_dict_empty_defaults_to_loading():
    assert ViewState.from_dict(None) == ViewState()
    assert ViewState.from_dict({}).loading is True
