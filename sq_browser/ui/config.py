from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from sq_browser.config.model import GlobalConfig
from sq_browser.queries.model import now_millis
from sq_browser.services.record_store import RecordStore
from sq_browser.services.results_service import ResultsService
from sq_browser.services.saved_query_service import SavedQueryRepository
from sq_browser.services.storage import InMemoryKeyValueStore, KeyValueStore

REVISION_KEY = "_revision"


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    record_store: Optional[RecordStore] = None
    results_service: Optional[ResultsService] = None
    # Set when saved queries live on the server instead of in the browser
    file_store: Optional[KeyValueStore] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.record_store is None:
            raise RuntimeError("AppConfig.record_store must be initialized.")
        if self.results_service is None:
            raise RuntimeError("AppConfig.results_service must be initialized.")

    def repository(self, local_data: Optional[Dict[str, Any]]) -> SavedQueryRepository:
        """
        Repository over the configured key-value store. For the browser
        backend the store is seeded from the dcc.Store(local) snapshot.
        """
        store = self.file_store if self.file_store is not None else InMemoryKeyValueStore(local_data)
        return SavedQueryRepository(store, storage_key=self.global_config.storage_key)

    def local_snapshot(self, repository: SavedQueryRepository) -> Dict[str, str]:
        """
        Data to write back into dcc.Store(local). The file backend only
        records a revision marker so list views still re-render.
        """
        store = repository.store
        if isinstance(store, InMemoryKeyValueStore):
            return store.snapshot()
        return {REVISION_KEY: str(now_millis())}
