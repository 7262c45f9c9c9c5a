from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from sq_browser.core.cells import cell_text
from sq_browser.core.record import Record


def _normalise_predicates(filters: Mapping[str, str]) -> Dict[str, str]:
    active = getattr(filters, "active", None)
    items = active() if callable(active) else {k: v for k, v in filters.items() if v}
    return {col: text.lower() for col, text in items.items()}


def matches(record: Record, filters: Mapping[str, str]) -> bool:
    """True if the record satisfies every non-empty predicate."""
    return _matches_lowered(record, _normalise_predicates(filters))


def _matches_lowered(record: Record, lowered: Mapping[str, str]) -> bool:
    for column, needle in lowered.items():
        # Missing cells coerce to "" and can never contain a non-empty needle
        if needle not in cell_text(record.cell(column)).lower():
            return False
    return True


def apply_filters(records: Sequence[Record], filters: Mapping[str, str]) -> List[Record]:
    """
    Return the records that pass every non-empty predicate, in their
    original relative order. The input is never mutated.
    """
    lowered = _normalise_predicates(filters)
    if not lowered:
        return list(records)
    return [r for r in records if _matches_lowered(r, lowered)]
