from __future__ import annotations

import logging
from typing import Any, List, Optional

import dash_bootstrap_components as dbc
from dash import html

from sq_browser.core.state import ViewState
from sq_browser.queries.model import QueryDraft

logger = logging.getLogger(__name__)


def try_parse_view_state(data: object) -> Optional[ViewState]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return ViewState.from_dict(data)
    except Exception:
        logger.exception("Invalid view-state: %r", data)
        return None


def try_parse_draft(data: object) -> Optional[QueryDraft]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return QueryDraft.from_dict(data)
    except (ValueError, TypeError):
        logger.exception("Invalid query draft: %r", data)
        return None


def triggered_index(triggered_id: Any, triggered_value: Any) -> Optional[str]:
    """
    The ``index`` of a pattern-matching trigger, or None when the trigger
    is a fresh render (n_clicks 0/None) rather than a real click.
    """
    if not isinstance(triggered_id, dict) or not triggered_value:
        return None
    index = triggered_id.get("index")
    return str(index) if index is not None else None


def values_for_pattern(outputs_list: List[dict], column_values: dict[str, str], default: Any) -> List[Any]:
    """
    Build the value list for an ALL pattern output: matching ids get the
    mapped value, everything else ``default``.
    """
    values = []
    for out in outputs_list or []:
        index = out.get("id", {}).get("index")
        values.append(column_values.get(index, default))
    return values


def alert(messages: List[str] | str, color: str = "danger") -> dbc.Alert:
    if isinstance(messages, str):
        messages = [messages]
    children = messages[0] if len(messages) == 1 else html.Ul([html.Li(m) for m in messages], className="mb-0")
    return dbc.Alert(children, color=color, className="py-2 small mb-0", dismissable=True)
