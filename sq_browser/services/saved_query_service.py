from __future__ import annotations

import json
import logging
from typing import Callable, List, Optional, Sequence

from sq_browser.core.collaborators import ConfirmationPrompt
from sq_browser.core.exceptions import SavedQueryNotFoundError
from sq_browser.engine.view_state_codec import encode_filters, results_href
from sq_browser.queries.model import (
    TAG_VOCABULARY,
    SavedQuery,
    SavedQueryCandidate,
    generate_query_id,
    now_millis,
)
from sq_browser.services.storage import KeyValueStore
from sq_browser.validation.saved_query_validation import validate_candidate

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "savedStockQueries"
DELETE_CONFIRMATION = "Are you sure you want to delete this saved query?"


class SavedQueryRepository:
    """
    Owns the collection of saved queries and its persistence.

    Every mutation reads the whole collection, changes it and writes the
    whole collection back. There is no locking: two contexts (e.g. two
    browser tabs sharing the same store) saving at the same time can
    overwrite each other's changes. This is an accepted limitation.
    """

    def __init__(
            self,
            store: KeyValueStore,
            *,
            storage_key: str = DEFAULT_STORAGE_KEY,
            vocabulary: Sequence[str] = TAG_VOCABULARY,
            clock: Callable[[], int] = now_millis,
    ):
        self.store = store
        self.storage_key = storage_key
        self.vocabulary = tuple(vocabulary)
        self._clock = clock

    def _read(self) -> List[SavedQuery]:
        """Load the collection; a missing or corrupt entry reads as empty."""
        raw = self.store.get_item(self.storage_key)
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except (ValueError, TypeError):
            logger.warning(
                "Saved query collection is not valid JSON; treating as empty",
                extra={"storage_key": self.storage_key},
            )
            return []
        if not isinstance(items, list):
            logger.warning(
                "Saved query collection is not a list; treating as empty",
                extra={"storage_key": self.storage_key},
            )
            return []

        queries: List[SavedQuery] = []
        for i, item in enumerate(items):
            try:
                queries.append(SavedQuery.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Skipping malformed saved query at index %d", i)
        return queries

    def _write(self, queries: List[SavedQuery]) -> None:
        payload = json.dumps([q.to_dict() for q in queries], ensure_ascii=False)
        self.store.set_item(self.storage_key, payload)

    def list(self) -> List[SavedQuery]:
        return self._read()

    def recent(self, limit: int = 5) -> List[SavedQuery]:
        return self._read()[:max(limit, 0)]

    def get(self, query_id: str) -> Optional[SavedQuery]:
        return next((q for q in self._read() if q.id == query_id), None)

    def save(self, candidate: SavedQueryCandidate) -> SavedQuery:
        """
        Validate, freeze and append a new saved query.
        Raises ValidationError without touching storage on bad input.
        """
        validate_candidate(candidate, self.vocabulary)

        queries = self._read()
        query_id = generate_query_id((q.id for q in queries), millis=self._clock())
        saved = SavedQuery.from_candidate(query_id=query_id, candidate=candidate)

        queries.append(saved)
        self._write(queries)

        logger.info(
            "Saved query created",
            extra={"query_id": saved.id, "query_name": saved.name, "total_saved": len(queries)},
        )
        return saved

    def delete(self, query_id: str) -> None:
        """Remove the entry if present; unknown ids are ignored."""
        queries = self._read()
        remaining = [q for q in queries if q.id != query_id]
        if len(remaining) == len(queries):
            return
        self._write(remaining)
        logger.info("Saved query deleted", extra={"query_id": query_id})

    def load(self, query_id: str) -> str:
        """Address-bar representation of a saved query's filters."""
        query = self.get(query_id)
        if query is None:
            raise SavedQueryNotFoundError(query_id)
        return encode_filters(query.filters)

    def results_href(self, query_id: str) -> str:
        query = self.get(query_id)
        if query is None:
            raise SavedQueryNotFoundError(query_id)
        return results_href(query.filters)


def delete_with_confirmation(
        repository: SavedQueryRepository,
        query_id: str,
        prompt: ConfirmationPrompt,
) -> bool:
    """Ask first, then delete. Returns whether the delete went ahead."""
    if not prompt.confirm(DELETE_CONFIRMATION):
        return False
    repository.delete(query_id)
    return True
