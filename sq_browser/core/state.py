from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from sq_browser.core.filter_state import FilterState, SortState, next_sort


@dataclass(frozen=True)
class ViewState:
    """
    Represents everything the results page needs to reproduce a view.

    Fields:

    - filters: per-column text predicates
    - sort: active sort key, or None to keep filter order
    - query: the opaque boolean query token forwarded to the data source
    - loading: True while the record fetch is pending; engines must not run

    Every transition returns a new ViewState.
    """

    filters: FilterState = field(default_factory=FilterState)
    sort: Optional[SortState] = None
    query: Optional[str] = None
    loading: bool = True

    def with_filter(self, column: str, value: Optional[str]) -> ViewState:
        return replace(self, filters=self.filters.with_predicate(column, value))

    def without_filter(self, column: str) -> ViewState:
        return replace(self, filters=self.filters.with_predicate(column, ""))

    def cleared(self) -> ViewState:
        return replace(self, filters=FilterState())

    def with_sort_click(self, column: str) -> ViewState:
        return replace(self, sort=next_sort(self.sort, column))

    def loaded(self) -> ViewState:
        return replace(self, loading=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": self.filters.to_dict(),
            "sort": self.sort.to_dict() if self.sort else None,
            "query": self.query,
            "loading": self.loading,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> ViewState:
        if not data:
            return cls()
        return cls(
            filters=FilterState.from_dict(data.get("filters")),
            sort=SortState.from_dict(data.get("sort")),
            query=data.get("query") or None,
            loading=bool(data.get("loading", True)),
        )
