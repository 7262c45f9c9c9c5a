from __future__ import annotations

import pytest

from sq_browser.core.filter_state import FilterState
from sq_browser.queries.model import QueryDraft, SavedQueryCandidate
from sq_browser.validation.errors import ValidationError
from sq_browser.validation.saved_query_validation import validate_candidate


def _candidate(name="My query", tags=(), result_count=1, total_count=5):
    draft = QueryDraft(
        filters=FilterState({"Name": "a"}),
        sort=None,
        timestamp="2024-01-01T00:00:00+00:00",
        result_count=result_count,
        total_count=total_count,
    )
    return SavedQueryCandidate(name=name, draft=draft, tags=tags)


def _codes(candidate):
    with pytest.raises(ValidationError) as exc:
        validate_candidate(candidate)
    return [i.code for i in exc.value.issues]


def test_valid_candidate_passes():
    validate_candidate(_candidate(tags=("a1", "a30")))


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_rejected(name):
    assert _codes(_candidate(name=name)) == ["NAME_EMPTY"]


def test_unknown_tag_rejected():
    assert _codes(_candidate(tags=("a1", "a31"))) == ["TAG_UNKNOWN"]


def test_counts_checked():
    assert _codes(_candidate(result_count=-1)) == ["COUNTS_NEGATIVE"]
    assert _codes(_candidate(result_count=6, total_count=5)) == ["COUNTS_INCONSISTENT"]


def test_all_issues_reported_together():
    with pytest.raises(ValidationError) as exc:
        validate_candidate(_candidate(name="", tags=("bogus",)))
    assert exc.value.messages[0] == "Please enter a name for your query"
    assert len(exc.value.issues) == 2
