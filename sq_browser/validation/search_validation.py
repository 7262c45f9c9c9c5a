from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import urlencode

from sq_browser.engine.view_state_codec import QUERY_PARAM, RESULTS_PATH, with_path
from sq_browser.validation.errors import ValidationError, ValidationIssue

NAME_COLUMN = "Name"


def build_search_params(
        company: Optional[str],
        query: Optional[str],
        filters: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Turn the search page inputs into a results-page link.

    The company name becomes a ``Name`` predicate, the boolean query text
    is passed through untouched as ``query``, extra filters follow.
    """
    company = (company or "").strip()
    query = (query or "").strip()
    if not company and not query:
        raise ValidationError(
            [ValidationIssue("SEARCH_EMPTY", "Please enter a search query or company name")]
        )

    pairs: list[tuple[str, str]] = []
    if company:
        pairs.append((NAME_COLUMN, company))
    if query:
        pairs.append((QUERY_PARAM, query))
    for key, value in (filters or {}).items():
        if value:
            pairs.append((key, value))
    return with_path(RESULTS_PATH, urlencode(pairs))


def build_company_search(company: Optional[str]) -> str:
    company = (company or "").strip()
    if not company:
        raise ValidationError(
            [ValidationIssue("COMPANY_EMPTY", "Please enter a company name to search")]
        )
    return with_path(RESULTS_PATH, urlencode([(NAME_COLUMN, company)]))
