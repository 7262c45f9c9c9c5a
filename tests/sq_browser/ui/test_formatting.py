from __future__ import annotations

import pytest

from sq_browser.core.cells import MISSING, Number, Text
from sq_browser.ui.formatting import format_amount, format_cell, group_indian, is_numeric_display


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (999, "999"),
        (1234.5, "1,234.5"),
        (123456, "1,23,456"),
        (12345678.125, "1,23,45,678.125"),
        (-98765, "-98,765"),
    ],
)
def test_group_indian(value, expected):
    assert group_indian(value) == expected


def test_format_amount_abbreviations():
    assert format_amount(25_000_000) == "₹2.50Cr"
    assert format_amount(250_000) == "₹2.50L"
    assert format_amount(2_500) == "₹2.50K"
    assert format_amount(250.5) == "250.5"


def test_format_cell():
    assert format_cell("S.No", Number(1234)) == "1234"
    assert format_cell("ROCE %", Number(21.5)) == "21.5%"
    assert format_cell("Mar Cap Rs.Cr.", Number(40380.6)) == "₹40.38K"
    assert format_cell("Name", Text("ITC")) == "ITC"
    assert format_cell("P/E", MISSING) == ""


def test_is_numeric_display():
    assert is_numeric_display("P/E", Number(1))
    assert not is_numeric_display("S.No", Number(1))
    assert not is_numeric_display("Name", Text("1"))
