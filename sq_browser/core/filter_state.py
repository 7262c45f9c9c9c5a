from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortState:
    """
    The single active sort key.

    Fields:

    - column: column name the rows are ordered by
    - direction: ascending or descending

    A view with no SortState keeps the Filter Engine's output order.
    """

    column: str
    direction: SortDirection = SortDirection.ASC

    def to_dict(self) -> Dict[str, Any]:
        # Same wire shape as the transfer payload's sortConfig
        return {"key": self.column, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional[SortState]:
        if not data or not isinstance(data, Mapping):
            return None
        column = data.get("key") or data.get("column")
        if not column:
            return None
        try:
            direction = SortDirection(data.get("direction", "asc"))
        except ValueError:
            direction = SortDirection.ASC
        return cls(column=str(column), direction=direction)


def next_sort(current: Optional[SortState], column: str) -> SortState:
    """
    Header-click transition: a new column starts ascending, clicking the
    ascending column flips it to descending, clicking it again goes back
    to ascending.
    """
    if current is not None and current.column == column and current.direction is SortDirection.ASC:
        return SortState(column, SortDirection.DESC)
    return SortState(column, SortDirection.ASC)


@dataclass(frozen=True)
class FilterState(Mapping[str, str]):
    """
    Per-column text predicates typed by the user.

    Entries with an empty predicate are kept (the input box still shows
    them) but behave exactly like absent entries; :meth:`active` is the
    canonical view used for matching, encoding and naming.
    """

    predicates: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType({str(k): "" if v is None else str(v) for k, v in self.predicates.items()})
        object.__setattr__(self, "predicates", frozen)

    def __getitem__(self, column: str) -> str:
        return self.predicates[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self.predicates)

    def __len__(self) -> int:
        return len(self.predicates)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterState):
            return dict(self.predicates) == dict(other.predicates)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self.predicates.items()))

    def active(self) -> Dict[str, str]:
        """Non-empty predicates only, in insertion order."""
        return {k: v for k, v in self.predicates.items() if v}

    def is_empty(self) -> bool:
        return not self.active()

    def with_predicate(self, column: str, value: Optional[str]) -> FilterState:
        updated = dict(self.predicates)
        updated[column] = value or ""
        return FilterState(updated)

    def without(self, column: str) -> FilterState:
        return FilterState({k: v for k, v in self.predicates.items() if k != column})

    def to_dict(self) -> Dict[str, str]:
        return dict(self.predicates)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> FilterState:
        if not data or not isinstance(data, Mapping):
            return cls()
        return cls({str(k): "" if v is None else str(v) for k, v in data.items()})
