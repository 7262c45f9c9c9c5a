from __future__ import annotations

from sq_browser.core.filter_state import FilterState, SortDirection, SortState
from sq_browser.engine.view_state_codec import (
    decode_filters,
    decode_transfer_payload,
    encode_filters,
    encode_search,
    encode_transfer_payload,
    results_href,
    save_href,
    split_query_token,
)
from sq_browser.queries.model import QueryDraft


def test_encode_omits_empty_predicates():
    assert encode_filters({"Name": "alpha", "Sector": ""}) == "Name=alpha"


def test_encode_never_writes_sort():
    assert encode_filters(FilterState({"Name": "a"}), SortState("P/E")) == "Name=a"


def test_encode_escapes_reserved_characters():
    assert encode_filters({"P/E": "a&b=c"}) == "P%2FE=a%26b%3Dc"


def test_decode_round_trip_drops_empty_entries():
    filters = FilterState({"Name": "tata motors", "Industry": "", "ROCE %": "2&3"})
    assert decode_filters(encode_filters(filters)) == FilterState({"Name": "tata motors", "ROCE %": "2&3"})


def test_decode_accepts_leading_question_mark_and_unknown_columns():
    filters = decode_filters("?Name=infy&Whatever=1")
    assert filters.to_dict() == {"Name": "infy", "Whatever": "1"}


def test_decode_repeated_key_keeps_last_value():
    assert decode_filters("Name=a&Name=b").to_dict() == {"Name": "b"}


def test_decode_empty():
    assert decode_filters(None) == FilterState()
    assert decode_filters("") == FilterState()


def test_split_query_token():
    filters, query = split_query_token(decode_filters("Name=tata&query=P%2FE+%3C+15"))
    assert filters.to_dict() == {"Name": "tata"}
    assert query == "P/E < 15"

    filters, query = split_query_token(FilterState({"Name": "x"}))
    assert query is None
    assert filters.to_dict() == {"Name": "x"}


def test_encode_search_keeps_query_token():
    assert encode_search({"Name": "a"}, "ROCE > 20") == "Name=a&query=ROCE+%3E+20"
    assert encode_search({}, "x") == "query=x"
    assert encode_search({"Name": ""}) == ""


def test_results_href():
    assert results_href({}) == "/query-result"
    assert results_href({"Name": "a"}) == "/query-result?Name=a"


def test_transfer_payload_round_trip():
    draft = QueryDraft(
        filters=FilterState({"Name": "Smith, Inc."}),
        sort=SortState("P/E", SortDirection.DESC),
        timestamp="2024-01-02T03:04:05+00:00",
        result_count=2,
        total_count=10,
    )
    href = save_href(draft)
    assert href.startswith("/save-query?data=")
    assert decode_transfer_payload(href.split("?", 1)[1]) == draft
    assert decode_transfer_payload("?" + encode_transfer_payload(draft)) == draft


def test_transfer_payload_missing_or_corrupt_yields_none():
    assert decode_transfer_payload(None) is None
    assert decode_transfer_payload("Name=x") is None
    assert decode_transfer_payload("data=%7Bnot-json") is None
    assert decode_transfer_payload("data=%5B1%2C2%5D") is None
