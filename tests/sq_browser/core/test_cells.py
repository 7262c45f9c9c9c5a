from __future__ import annotations

import math

from sq_browser.core.cells import MISSING, Missing, Number, Text, cell_text, cell_to_raw, format_number, to_cell


def test_to_cell_wraps_raw_scalars():
    assert to_cell("Infosys") == Text("Infosys")
    assert to_cell(12) == Number(12.0)
    assert to_cell(3.5) == Number(3.5)
    assert to_cell(None) is MISSING
    assert to_cell(math.nan) == Missing()


def test_bool_becomes_text_not_number():
    assert to_cell(True) == Text("true")
    assert to_cell(False) == Text("false")


def test_cell_text_coercion():
    assert cell_text(Number(12.0)) == "12"
    assert cell_text(Number(12.5)) == "12.5"
    assert cell_text(Number(-3.0)) == "-3"
    assert cell_text(Text("HDFC")) == "HDFC"
    assert cell_text(MISSING) == ""


def test_format_number_infinity():
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"


def test_cell_to_raw_inverts_to_cell():
    assert cell_to_raw(Number(7.0)) == 7
    assert isinstance(cell_to_raw(Number(7.0)), int)
    assert cell_to_raw(Number(7.25)) == 7.25
    assert cell_to_raw(Text("x")) == "x"
    assert cell_to_raw(MISSING) is None
