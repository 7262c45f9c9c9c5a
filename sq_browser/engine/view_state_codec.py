from __future__ import annotations

import json
import logging
from typing import Mapping, Optional, Tuple
from urllib.parse import parse_qs, parse_qsl, quote, urlencode

from sq_browser.core.filter_state import FilterState, SortState
from sq_browser.queries.model import QueryDraft

logger = logging.getLogger(__name__)

# Reserved parameter carrying the opaque boolean query text
QUERY_PARAM = "query"
# Reserved parameter carrying the save-page transfer payload
DATA_PARAM = "data"

RESULTS_PATH = "/query-result"
SAVE_PATH = "/save-query"


def encode_filters(filters: Mapping[str, str], sort: Optional[SortState] = None) -> str:
    """
    Address-bar representation of a filter state: one key=value pair per
    non-empty predicate, standard query-string escaping only.

    ``sort`` is accepted for call-site symmetry but never written; the
    address bar only carries filters.
    """
    pairs = [(str(k), str(v)) for k, v in filters.items() if v]
    return urlencode(pairs)


def decode_filters(search: Optional[str]) -> FilterState:
    """
    Every pair in the query string becomes one predicate, unknown columns
    included. A repeated key keeps its last value.
    """
    if not search:
        return FilterState()
    search = search[1:] if search.startswith("?") else search
    predicates: dict[str, str] = {}
    for key, value in parse_qsl(search, keep_blank_values=True):
        predicates[key] = value
    return FilterState(predicates)


def split_query_token(filters: FilterState) -> Tuple[FilterState, Optional[str]]:
    """
    Separate the opaque ``query`` token from real column predicates so
    it is forwarded to the data source instead of matched against rows.
    """
    token = filters.get(QUERY_PARAM) or None
    if QUERY_PARAM not in filters:
        return filters, None
    return filters.without(QUERY_PARAM), token


def with_path(path: str, search: str) -> str:
    return f"{path}?{search}" if search else path


def encode_search(filters: Mapping[str, str], query: Optional[str] = None) -> str:
    """Filters plus the query token, if any, as one address-bar string."""
    search = encode_filters(filters)
    if not query:
        return search
    token = urlencode([(QUERY_PARAM, query)])
    return f"{search}&{token}" if search else token


def results_href(filters: Mapping[str, str], query: Optional[str] = None) -> str:
    """Link to the results page; the query token, if any, rides along."""
    return with_path(RESULTS_PATH, encode_search(filters, query))

# -------------------------------------------------------------------------
# Transfer payload
# -------------------------------------------------------------------------

def encode_transfer_payload(draft: QueryDraft) -> str:
    payload = json.dumps(draft.to_dict(), separators=(",", ":"), ensure_ascii=False)
    return f"{DATA_PARAM}={quote(payload, safe='')}"


def save_href(draft: QueryDraft) -> str:
    return with_path(SAVE_PATH, encode_transfer_payload(draft))


def decode_transfer_payload(search: Optional[str]) -> Optional[QueryDraft]:
    """
    Rebuild the draft carried by ``?data=...``.
    Returns None when the parameter is absent or cannot be parsed; the
    save form then renders without a summary.
    """
    if not search:
        return None
    search = search[1:] if search.startswith("?") else search
    values = parse_qs(search, keep_blank_values=True).get(DATA_PARAM)
    if not values:
        return None
    try:
        return QueryDraft.from_dict(json.loads(values[-1]))
    except (ValueError, TypeError):
        logger.warning("Failed to parse query transfer payload", exc_info=True)
        return None
