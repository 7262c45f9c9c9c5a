from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from sq_browser.core.cells import MISSING, Cell, Text, cell_to_raw, to_cell

# Ordinal identifier column; never offered as a free-text filter
ORDINAL_COLUMN = "S.No"


class Record(Mapping[str, Cell]):
    """
    One immutable row of the dataset.

    Behaves like a read-only mapping of column -> Cell that preserves the
    column order of the source row. Looking up a column the row does not
    carry through :meth:`cell` yields ``Missing`` instead of raising.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Mapping[str, Cell]):
        self._cells = MappingProxyType(dict(cells))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> Record:
        return cls({str(k): to_cell(v) for k, v in raw.items()})

    def __getitem__(self, column: str) -> Cell:
        return self._cells[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Record({dict(self._cells)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return list(self._cells.items()) == list(other._cells.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._cells.items()))

    def cell(self, column: str) -> Cell:
        return self._cells.get(column, MISSING)

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self._cells)

    def to_raw(self) -> Dict[str, Any]:
        return {k: cell_to_raw(v) for k, v in self._cells.items()}


def records_from_raw(rows: List[Mapping[str, Any]]) -> Tuple[Record, ...]:
    return tuple(Record.from_raw(r) for r in rows)


def discover_columns(records: Tuple[Record, ...] | List[Record]) -> List[str]:
    """Column order as seen on the first record."""
    if not records:
        return []
    return list(records[0].columns)


def discover_text_columns(records: Tuple[Record, ...] | List[Record]) -> List[str]:
    """
    Columns offered as free-text filters: textual on the first record,
    excluding the ordinal column.
    """
    if not records:
        return []
    first = records[0]
    return [
        col for col in first.columns
        if isinstance(first[col], Text) and col != ORDINAL_COLUMN
    ]
