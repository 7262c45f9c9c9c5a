from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pandas as pd

from sq_browser.core.exceptions import DataSourceError

logger = logging.getLogger(__name__)


class DataSource(ABC):
    """
    Upstream provider of the full record array.

    ``query`` is the opaque boolean query text from the search page.
    Sources may forward it; none of them evaluates it here.
    """

    @abstractmethod
    def fetch(self, query: Optional[str] = None) -> List[Dict[str, Any]]:
        pass


class InMemoryDataSource(DataSource):
    def __init__(self, rows: Sequence[Mapping[str, Any]]):
        self._rows = [dict(r) for r in rows]

    def fetch(self, query: Optional[str] = None) -> List[Dict[str, Any]]:
        return [dict(r) for r in self._rows]


class FileDataSource(DataSource):
    """
    Reads the record array from a ``.json`` file (array of objects, each
    row keeping its own keys and key order) or a ``.csv`` file with
    pandas (NaN cells come back as None).
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read_json(self) -> List[Dict[str, Any]]:
        with self.path.open(encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise DataSourceError(f"{self.path} must contain a JSON array of records")
        for i, row in enumerate(rows):
            if not isinstance(row, dict):
                raise DataSourceError(f"Record {i} in {self.path} is not a JSON object")
        return rows

    def _read_csv(self) -> List[Dict[str, Any]]:
        df = pd.read_csv(self.path)
        df = df.astype(object).where(pd.notna(df), None)
        return df.to_dict(orient="records")

    def fetch(self, query: Optional[str] = None) -> List[Dict[str, Any]]:
        if query:
            logger.debug("Query token passed through unevaluated", extra={"query": query})

        if not self.path.is_file():
            raise DataSourceError(f"Data file not found at {self.path}")

        suffix = self.path.suffix.lower()
        if suffix == ".json":
            reader = self._read_json
        elif suffix == ".csv":
            reader = self._read_csv
        else:
            raise DataSourceError(f"Unsupported data file type: {self.path.name}")

        try:
            return reader()
        except DataSourceError:
            raise
        except Exception as e:
            raise DataSourceError(f"Could not parse {self.path}: {e}") from e
