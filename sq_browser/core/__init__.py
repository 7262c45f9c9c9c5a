"""
Core domain layer: cell variants, records, filter/sort/view state
and the collaborator interfaces for browser side effects
"""

from .cells import Cell, Missing, Number, Text, to_cell
from .filter_state import FilterState, SortDirection, SortState
from .record import Record
from .state import ViewState

__all__ = [
    "Cell", "Missing", "Number", "Text", "to_cell",
    "FilterState", "SortDirection", "SortState",
    "Record", "ViewState",
]
