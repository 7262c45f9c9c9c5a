from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping, Optional


class KeyValueStore(ABC):
    """
    Abstract interface for a local string key-value store
    (browser localStorage, a directory on disk, memory).
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass


class InMemoryKeyValueStore(KeyValueStore):
    """
    Dict-backed store. In the Dash app it is seeded from a
    dcc.Store(storage_type="local") snapshot and written back via snapshot().
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._items: Dict[str, str] = {
            str(k): v for k, v in (initial or {}).items() if isinstance(v, str)
        }

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._items)


_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalFileKeyValueStore(KeyValueStore):
    """
    Local filesystem implementation: one ``<key>.json`` file per key
    under a root directory.
    """

    SUFFIX = ".json"

    def __init__(self, root: Path):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        # Prevent path traversal attacks
        full_path = (self.root / f"{key}{self.SUFFIX}").resolve()
        if full_path.parent != self.root:
            raise ValueError(f"Access denied: {key}")
        return full_path

    def get_item(self, key: str) -> Optional[str]:
        p = self._resolve(key)
        if not p.is_file():
            return None
        return p.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        p = self._resolve(key)
        tmp = p.with_name(p.name + ".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(p)

    def remove_item(self, key: str) -> None:
        p = self._resolve(key)
        if p.exists():
            p.unlink()

    def keys(self) -> List[str]:
        return sorted(f.name[: -len(self.SUFFIX)] for f in self.root.glob(f"*{self.SUFFIX}") if f.is_file())
