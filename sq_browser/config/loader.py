from __future__ import annotations

import json
import locale
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from sq_browser.config.model import GlobalConfig
from sq_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_UI_TITLE = "Stock Screener"
DEFAULT_DATA_PATH = "data/stocks.json"
DEFAULT_STORAGE_KEY = "savedStockQueries"
DEFAULT_STORAGE_ROOT = "storage"
STORAGE_BACKENDS = ("browser", "file")

ENV_DATA_PATH = "SQ_BROWSER_DATA_PATH"
ENV_STORAGE_ROOT = "SQ_BROWSER_STORAGE_ROOT"


def _resolve(root: Path, raw: str) -> Path:
    # Absolute paths are used as-is, relative ones hang off the config root
    p = Path(raw)
    return p if p.is_absolute() else (root / p).resolve()


def _expect_str(raw: Dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from ``root/global.json``.

    Expected structure (every key optional):

        {
            "ui_title": "Stock Screener",
            "data_path": "data/stocks.json",
            "storage_key": "savedStockQueries",
            "storage_root": "storage",
            "storage_backend": "browser",
            "collation_locale": "en_US.UTF-8",
            "recent_limit": 5
        }

    A missing file yields the defaults. ``SQ_BROWSER_DATA_PATH`` and
    ``SQ_BROWSER_STORAGE_ROOT`` override the file.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json is not valid JSON or has wrong types.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    raw: Dict[str, Any] = {}
    if global_path.is_file():
        try:
            with global_path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning("No global.json found; using defaults", extra={"config_root": str(root)})

    data_path = os.getenv(ENV_DATA_PATH) or _expect_str(raw, "data_path", DEFAULT_DATA_PATH)
    storage_root = os.getenv(ENV_STORAGE_ROOT) or _expect_str(raw, "storage_root", DEFAULT_STORAGE_ROOT)

    recent_limit = raw.get("recent_limit", 5)
    if isinstance(recent_limit, bool) or not isinstance(recent_limit, int) or recent_limit < 0:
        raise ConfigError("'recent_limit' must be a non-negative integer")

    storage_backend = raw.get("storage_backend", "browser")
    if storage_backend not in STORAGE_BACKENDS:
        raise ConfigError(f"'storage_backend' must be one of {STORAGE_BACKENDS}")

    collation_locale: Optional[str] = raw.get("collation_locale")
    if collation_locale is not None and not isinstance(collation_locale, str):
        raise ConfigError("'collation_locale' must be a string")

    return GlobalConfig(
        ui_title=_expect_str(raw, "ui_title", DEFAULT_UI_TITLE),
        data_path=_resolve(root, data_path),
        storage_key=_expect_str(raw, "storage_key", DEFAULT_STORAGE_KEY),
        storage_root=_resolve(root, storage_root),
        collation_locale=collation_locale or None,
        storage_backend=storage_backend,
        recent_limit=recent_limit,
    )


def apply_collation_locale(config: GlobalConfig) -> bool:
    """
    Switch LC_COLLATE for text sorting. An unavailable locale is logged
    and the process default kept.
    """
    if not config.collation_locale:
        return False
    try:
        locale.setlocale(locale.LC_COLLATE, config.collation_locale)
    except locale.Error:
        logger.warning(
            "Collation locale unavailable; keeping default",
            extra={"collation_locale": config.collation_locale},
        )
        return False
    return True
