from __future__ import annotations

import pytest

from sq_browser.engine.view_state_codec import decode_filters, split_query_token
from sq_browser.validation.errors import ValidationError
from sq_browser.validation.search_validation import build_company_search, build_search_params


def test_company_and_query_become_results_link():
    href = build_search_params(" Tata ", "P/E < 15 AND\nROCE > 20%")
    assert href.startswith("/query-result?")

    filters, query = split_query_token(decode_filters(href.split("?", 1)[1]))
    assert filters.to_dict() == {"Name": "Tata"}
    assert query == "P/E < 15 AND\nROCE > 20%"


def test_extra_filters_are_appended():
    href = build_search_params("", "x", {"Industry": "Banks", "Sector": ""})
    assert href == "/query-result?query=x&Industry=Banks"


def test_empty_search_is_rejected():
    with pytest.raises(ValidationError) as exc:
        build_search_params("  ", None)
    assert exc.value.messages == ["Please enter a search query or company name"]
    assert exc.value.issues[0].code == "SEARCH_EMPTY"


def test_company_search():
    assert build_company_search("Infosys") == "/query-result?Name=Infosys"
    with pytest.raises(ValidationError):
        build_company_search("")
