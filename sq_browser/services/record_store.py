from __future__ import annotations

import logging
import threading
from typing import List, Optional, Tuple

from sq_browser.core.exceptions import DataSourceError
from sq_browser.core.record import (
    Record,
    discover_columns,
    discover_text_columns,
    records_from_raw,
)
from sq_browser.services.data_source import DataSource

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Holds the fetched dataset for the lifetime of a page session.

    While a fetch is pending ``is_loading`` is True and ``records`` still
    returns the previous (complete) set; callers show a loading state and
    skip filtering until the fetch settles. A failed fetch leaves an empty
    set and clears the loading flag.

    One store is shared by every browser session of the process. State
    changes are serialised by a lock, but the dataset itself is global:
    while another session's fetch is in flight a results page renders its
    loading state and is only refreshed by the next interaction. This is
    an accepted single-user limitation.
    """

    def __init__(self, source: DataSource):
        self.source = source
        self._records: Tuple[Record, ...] = ()
        self._loading = False
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def total_count(self) -> int:
        return len(self._records)

    def columns(self) -> List[str]:
        return discover_columns(self._records)

    def text_columns(self) -> List[str]:
        return discover_text_columns(self._records)

    def load(self, query: Optional[str] = None) -> Tuple[Record, ...]:
        """
        Fetch the full record array. Never raises; a failure degrades to
        an empty record set. If a newer load started meanwhile, this
        result is dropped.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._loading = True
        logger.info("Fetching records", extra={"query": query})

        try:
            records = records_from_raw(self.source.fetch(query))
        except DataSourceError as e:
            logger.error("Error fetching data", extra={"error": str(e)})
            records = ()
        except Exception:
            logger.exception("Unexpected error while fetching data")
            records = ()

        with self._lock:
            if generation != self._generation:
                logger.info("Dropping stale fetch result", extra={"generation": generation})
                return self._records

            self._records = records
            self._loading = False
        logger.info("Records loaded", extra={"rows": len(records)})
        return records
