from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sq_browser.core.filter_state import FilterState, SortState

# -------------------------------------------------------------------------
# Tag vocabulary
# -------------------------------------------------------------------------

TAG_VOCABULARY: Tuple[str, ...] = tuple(f"a{i}" for i in range(1, 31))

# -------------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------------

def now_iso() -> str:
    """
    Return a current UTC timestamp in ISO-8601 format.
    """
    return datetime.now(timezone.utc).isoformat()


def now_millis() -> int:
    return int(time.time() * 1000)


def generate_query_id(existing_ids: Iterable[str], millis: Optional[int] = None) -> str:
    """
    Timestamp-derived id (epoch milliseconds). Bumped by one millisecond
    until it no longer collides with an id already in the collection.
    """
    taken = set(existing_ids)
    candidate = now_millis() if millis is None else millis
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def normalise_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    """Collapse duplicates, keeping first-selection order."""
    seen: List[str] = []
    for tag in tags:
        tag = str(tag).strip()
        if tag and tag not in seen:
            seen.append(tag)
    return tuple(seen)


def toggle_tag(selected: Sequence[str], tag: str) -> List[str]:
    """Remove the tag if selected, otherwise append it."""
    if tag in selected:
        return [t for t in selected if t != tag]
    return [*selected, tag]


def suggest_query_name(filters: FilterState, today: Optional[date] = None) -> str:
    """
    Default name for the save form: the filtered columns, or a dated
    fallback when nothing is filtered.
    """
    columns = list(filters.active())
    if columns:
        return f"Query with {', '.join(columns)}"
    today = today or date.today()
    return f"Stock Query {today.month}/{today.day}/{today.year}"

# -------------------------------------------------------------------------
# Transfer payload (results page -> save page)
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class QueryDraft:
    """
    Snapshot of a results view handed to the save form.

    - filters: filter state at the time of the click
    - sort: sort state at the time of the click
    - timestamp: ISO8601 time the draft was taken
    - result_count: rows surviving the filters
    - total_count: rows in the full record set
    """

    filters: FilterState
    sort: Optional[SortState]
    timestamp: str
    result_count: int
    total_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": self.filters.to_dict(),
            "sortConfig": self.sort.to_dict() if self.sort else None,
            "timestamp": self.timestamp,
            "resultCount": self.result_count,
            "totalCount": self.total_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QueryDraft:
        if not isinstance(data, dict):
            raise ValueError("Query payload must be a JSON object")
        return cls(
            filters=FilterState.from_dict(data.get("filters") or {}),
            sort=SortState.from_dict(data.get("sortConfig")),
            timestamp=str(data.get("timestamp") or now_iso()),
            result_count=int(data.get("resultCount", 0)),
            total_count=int(data.get("totalCount", 0)),
        )

# -------------------------------------------------------------------------
# Saved query
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class SavedQueryCandidate:
    """
    What the save form submits: user-facing fields plus the draft.
    """

    name: str
    draft: QueryDraft
    description: str = ""
    tags: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class SavedQuery:
    """
    Immutable description of a single saved query.

    - id: epoch-millisecond string, unique within the repository
    - name: non-empty display name
    - description: free text, may be empty
    - tags: subset of TAG_VOCABULARY in selection order
    - filters / sort: frozen copies taken at save time
    - timestamp: ISO8601 time the underlying view was captured
    - result_count / total_count: row counts at save time
    """

    id: str
    name: str
    description: str
    tags: Tuple[str, ...]
    filters: FilterState
    sort: Optional[SortState]
    timestamp: str
    result_count: int
    total_count: int

    @classmethod
    def from_candidate(cls, *, query_id: str, candidate: SavedQueryCandidate) -> SavedQuery:
        draft = candidate.draft
        return cls(
            id=query_id,
            name=candidate.name.strip(),
            description=(candidate.description or "").strip(),
            tags=normalise_tags(candidate.tags),
            filters=FilterState(draft.filters.to_dict()),
            sort=draft.sort,
            timestamp=draft.timestamp,
            result_count=draft.result_count,
            total_count=draft.total_count,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "filters": self.filters.to_dict(),
            "sortConfig": self.sort.to_dict() if self.sort else None,
            "timestamp": self.timestamp,
            "resultCount": self.result_count,
            "totalCount": self.total_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SavedQuery:
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            description=str(data.get("description") or ""),
            tags=normalise_tags(t for t in (data.get("tags") or []) if t in TAG_VOCABULARY),
            filters=FilterState.from_dict(data.get("filters") or {}),
            sort=SortState.from_dict(data.get("sortConfig")),
            timestamp=str(data.get("timestamp") or ""),
            result_count=int(data.get("resultCount", 0)),
            total_count=int(data.get("totalCount", 0)),
        )


def summary_lines(draft: QueryDraft | SavedQuery) -> List[str]:
    """
    Human-readable summary shown above the save form and in the list.
    """
    lines = [f"Results: {draft.result_count} of {draft.total_count} stocks"]
    created = _display_timestamp(draft.timestamp)
    if created:
        lines.append(f"Created: {created}")
    active = draft.filters.active()
    if active:
        lines.append("Filters: " + ", ".join(f"{k}: {v}" for k, v in active.items()))
    if draft.sort:
        lines.append(f"Sort: {draft.sort.column} ({draft.sort.direction.value})")
    return lines


def _display_timestamp(raw: str) -> str:
    if not raw:
        return ""
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return raw
    return parsed.strftime("%Y-%m-%d %H:%M:%S")
