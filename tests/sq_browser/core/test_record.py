from __future__ import annotations

import pytest

from sq_browser.core.cells import MISSING, Number, Text
from sq_browser.core.record import Record, discover_columns, discover_text_columns, records_from_raw


def test_record_preserves_column_order():
    record = Record.from_raw({"S.No": 1, "Name": "ITC", "P/E": 26.9})
    assert record.columns == ("S.No", "Name", "P/E")
    assert record["Name"] == Text("ITC")
    assert record["P/E"] == Number(26.9)


def test_cell_for_absent_column_is_missing():
    record = Record.from_raw({"Name": "ITC"})
    assert record.cell("Industry") is MISSING
    with pytest.raises(KeyError):
        record["Industry"]


def test_record_is_read_only():
    record = Record.from_raw({"Name": "ITC"})
    with pytest.raises(TypeError):
        record["Name"] = Text("other")  # type: ignore[index]


def test_to_raw_round_trips_json_values():
    raw = {"S.No": 2, "Name": "TCS", "Div Yld %": None}
    assert Record.from_raw(raw).to_raw() == raw


def test_discover_columns_uses_first_record():
    records = records_from_raw([
        {"S.No": 1, "Name": "A", "Industry": "Banks", "P/E": 10},
        {"S.No": 2, "Name": "B", "Extra": "ignored"},
    ])
    assert discover_columns(records) == ["S.No", "Name", "Industry", "P/E"]
    assert discover_text_columns(records) == ["Name", "Industry"]


def test_text_columns_skip_ordinal_even_when_textual():
    records = records_from_raw([{"S.No": "1", "Name": "A"}])
    assert discover_text_columns(records) == ["Name"]


def test_discovery_on_empty_set():
    assert discover_columns(()) == []
    assert discover_text_columns(()) == []
