from __future__ import annotations

from sq_browser.core.filter_state import FilterState
from sq_browser.core.record import records_from_raw
from sq_browser.engine.filter_engine import apply_filters, matches

ROWS = records_from_raw([
    {"S.No": 1, "Name": "Alpha", "P/E": 12},
    {"S.No": 2, "Name": "Beta", "P/E": 30},
    {"S.No": 3, "Name": "Alphabet", "Industry": "IT", "P/E": 21.5},
    {"S.No": 4, "Name": "Gamma", "Industry": None, "P/E": 120},
])


def test_substring_match_is_case_insensitive():
    result = apply_filters(ROWS, FilterState({"Name": "al"}))
    assert [r["S.No"].value for r in result] == [1, 3]


def test_alpha_beta_scenario():
    records = ROWS[:2]
    assert apply_filters(records, FilterState({"Name": "al"})) == [records[0]]


def test_empty_predicates_are_ignored():
    assert apply_filters(ROWS, FilterState({"Name": "", "Industry": ""})) == list(ROWS)
    assert apply_filters(ROWS, {}) == list(ROWS)


def test_numbers_match_on_text_form():
    result = apply_filters(ROWS, FilterState({"P/E": "12"}))
    assert [r["Name"].value for r in result] == ["Alpha", "Gamma"]

    result = apply_filters(ROWS, FilterState({"P/E": "21.5"}))
    assert [r["Name"].value for r in result] == ["Alphabet"]


def test_missing_cell_never_matches_non_empty_predicate():
    result = apply_filters(ROWS, FilterState({"Industry": "i"}))
    assert [r["Name"].value for r in result] == ["Alphabet"]


def test_unknown_column_filters_everything_out():
    assert apply_filters(ROWS, FilterState({"Sector": "x"})) == []


def test_every_predicate_must_hold():
    filters = FilterState({"Name": "alpha", "Industry": "it"})
    assert [r["S.No"].value for r in apply_filters(ROWS, filters)] == [3]
    assert matches(ROWS[2], filters)
    assert not matches(ROWS[0], filters)


def test_result_is_ordered_subsequence_and_input_untouched():
    records = list(ROWS)
    result = apply_filters(records, FilterState({"Name": "a"}))

    assert records == list(ROWS)
    positions = [records.index(r) for r in result]
    assert positions == sorted(positions)
    assert result is not records
