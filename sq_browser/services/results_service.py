from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from sq_browser.core.collaborators import AddressBarSync, FileDownloader
from sq_browser.core.record import Record
from sq_browser.core.state import ViewState
from sq_browser.engine.export_engine import FILENAME_PREFIX, ExportOutcome, export_csv
from sq_browser.engine.filter_engine import apply_filters
from sq_browser.engine.sort_engine import apply_sort
from sq_browser.engine.view_state_codec import (
    decode_filters,
    encode_search,
    save_href,
    split_query_token,
)
from sq_browser.queries.model import QueryDraft, now_iso
from sq_browser.services.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultView:
    """
    What the results table renders for one ViewState.
    """

    rows: Tuple[Record, ...] = ()
    columns: List[str] = field(default_factory=list)
    text_columns: List[str] = field(default_factory=list)
    result_count: int = 0
    total_count: int = 0
    loading: bool = False

    @property
    def counter_text(self) -> str:
        return f"{self.result_count} of {self.total_count} stocks"


class ResultsService:
    """
    Drives Record Store -> Filter Engine -> Sort Engine for the results
    page and keeps the address bar in step with every filter edit.
    """

    def __init__(
            self,
            record_store: RecordStore,
            address_bar: Optional[AddressBarSync] = None,
            *,
            export_prefix: str = FILENAME_PREFIX,
    ):
        self.record_store = record_store
        self.address_bar = address_bar
        self.export_prefix = export_prefix

    # ------------------------------------------------------------------
    # Initial load
    # ------------------------------------------------------------------
    def open(self, search: Optional[str]) -> ViewState:
        """
        Build the initial state from the address bar and fetch records.
        Sort never comes from the address bar.
        """
        filters, query = split_query_token(decode_filters(search))
        state = ViewState(filters=filters, query=query, loading=True)
        self.record_store.load(query)
        return state.loaded()

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def filtered(self, state: ViewState) -> List[Record]:
        return apply_filters(self.record_store.records, state.filters)

    def rows(self, state: ViewState) -> List[Record]:
        return apply_sort(self.filtered(state), state.sort)

    def view(self, state: ViewState) -> ResultView:
        store = self.record_store
        if state.loading or store.is_loading:
            return ResultView(loading=True)

        rows = self.rows(state)
        return ResultView(
            rows=tuple(rows),
            columns=store.columns(),
            text_columns=store.text_columns(),
            result_count=len(rows),
            total_count=store.total_count,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _sync_address_bar(self, state: ViewState) -> None:
        if self.address_bar is not None:
            self.address_bar.replace(encode_search(state.filters, state.query))

    def update_filter(self, state: ViewState, column: str, value: Optional[str]) -> ViewState:
        new_state = state.with_filter(column, value)
        self._sync_address_bar(new_state)
        return new_state

    def clear_filters(self, state: ViewState) -> ViewState:
        new_state = state.cleared()
        self._sync_address_bar(new_state)
        return new_state

    def sort_by(self, state: ViewState, column: str) -> ViewState:
        return state.with_sort_click(column)

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------
    def export(
            self,
            state: ViewState,
            downloader: FileDownloader,
            today: Optional[date] = None,
    ) -> ExportOutcome:
        return export_csv(self.rows(state), downloader, today=today, prefix=self.export_prefix)

    def draft(self, state: ViewState, timestamp: Optional[str] = None) -> QueryDraft:
        return QueryDraft(
            filters=state.filters,
            sort=state.sort,
            timestamp=timestamp or now_iso(),
            result_count=len(self.filtered(state)),
            total_count=self.record_store.total_count,
        )

    def save_href(self, state: ViewState) -> str:
        return save_href(self.draft(state))
