from __future__ import annotations

import locale
from functools import cmp_to_key
from typing import List, Optional, Sequence

from sq_browser.core.cells import Cell, Number, cell_text
from sq_browser.core.filter_state import SortDirection, SortState
from sq_browser.core.record import Record


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


def compare_text(a: str, b: str) -> int:
    """
    Case-insensitive first, so "apple" < "Banana" even under the C locale;
    ties fall back to LC_COLLATE and then to the raw text.
    """
    result = _sign(locale.strcoll(a.casefold(), b.casefold()))
    if result == 0:
        result = _sign(locale.strcoll(a, b))
    if result == 0:
        result = (a > b) - (a < b)
    return result


def compare_cells(a: Cell, b: Cell) -> int:
    """
    Ascending comparator.

    Two numbers compare numerically; any other pairing compares the text
    forms with :func:`compare_text`. Missing cells become "" and therefore
    sort first.

    On a column mixing numbers and text this is not transitive
    (9 < 10 numerically, "10" < "1a" < "9" as text), so the order of
    such a column is stable but not a total order.
    """
    if isinstance(a, Number) and isinstance(b, Number):
        return _sign(a.value - b.value)
    return compare_text(cell_text(a), cell_text(b))


def compare_records(a: Record, b: Record, sort: SortState) -> int:
    result = compare_cells(a.cell(sort.column), b.cell(sort.column))
    return -result if sort.direction is SortDirection.DESC else result


def apply_sort(records: Sequence[Record], sort: Optional[SortState]) -> List[Record]:
    """
    Return a new, stably ordered list. With no sort key the input order
    is kept as-is.
    """
    if sort is None:
        return list(records)
    return sorted(records, key=cmp_to_key(lambda a, b: compare_records(a, b, sort)))
