from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class GlobalConfig:
    """
    Application-wide settings parsed from ``global.json``.

    - ui_title: browser title and navbar brand
    - data_path: record file served as the upstream data source
    - storage_key: key of the saved-query collection in the key-value store
    - storage_root: directory of the file-backed key-value store
    - collation_locale: LC_COLLATE locale used for text sorting (None keeps the process default)
    - storage_backend: "browser" keeps saved queries in the browser's localStorage,
      "file" keeps them under storage_root on the server
    - recent_limit: number of saved queries shown under "Recent"
    """

    ui_title: str
    data_path: Path
    storage_key: str
    storage_root: Path
    collation_locale: Optional[str] = None
    storage_backend: str = "browser"
    recent_limit: int = 5
