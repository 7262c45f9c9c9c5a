from __future__ import annotations

import json
import locale

import pytest

from sq_browser.config.loader import (
    ENV_DATA_PATH,
    ENV_STORAGE_ROOT,
    apply_collation_locale,
    load_global_config,
)
from sq_browser.config.model import GlobalConfig
from sq_browser.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv(ENV_DATA_PATH, raising=False)
    monkeypatch.delenv(ENV_STORAGE_ROOT, raising=False)


def _write(root, payload):
    (root / "global.json").write_text(json.dumps(payload), encoding="utf-8")


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_global_config(tmp_path)
    assert cfg.ui_title == "Stock Screener"
    assert cfg.storage_key == "savedStockQueries"
    assert cfg.storage_backend == "browser"
    assert cfg.recent_limit == 5
    assert cfg.data_path == (tmp_path / "data" / "stocks.json").resolve()
    assert cfg.storage_root == (tmp_path / "storage").resolve()


def test_values_from_file(tmp_path):
    _write(tmp_path, {
        "ui_title": "Screener",
        "data_path": "rows.csv",
        "storage_backend": "file",
        "recent_limit": 3,
        "collation_locale": "C",
    })
    cfg = load_global_config(tmp_path)
    assert cfg.ui_title == "Screener"
    assert cfg.data_path == (tmp_path / "rows.csv").resolve()
    assert cfg.storage_backend == "file"
    assert cfg.recent_limit == 3
    assert cfg.collation_locale == "C"


def test_env_overrides_file(tmp_path, monkeypatch):
    _write(tmp_path, {"data_path": "rows.csv"})
    other = tmp_path / "elsewhere" / "stocks.json"
    monkeypatch.setenv(ENV_DATA_PATH, str(other))
    monkeypatch.setenv(ENV_STORAGE_ROOT, "kv")

    cfg = load_global_config(tmp_path)
    assert cfg.data_path == other
    assert cfg.storage_root == (tmp_path / "kv").resolve()


@pytest.mark.parametrize(
    "payload",
    [
        {"ui_title": ""},
        {"storage_backend": "cloud"},
        {"recent_limit": -1},
        {"recent_limit": True},
        {"collation_locale": 5},
    ],
)
def test_invalid_values_raise(tmp_path, payload):
    _write(tmp_path, payload)
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_invalid_json_raises(tmp_path):
    (tmp_path / "global.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def _config(collation_locale):
    return GlobalConfig(
        ui_title="t",
        data_path=None,
        storage_key="k",
        storage_root=None,
        collation_locale=collation_locale,
    )


def test_apply_collation_locale():
    previous = locale.setlocale(locale.LC_COLLATE)
    try:
        assert apply_collation_locale(_config(None)) is False
        assert apply_collation_locale(_config("C")) is True
        assert apply_collation_locale(_config("xx_NOT.A-LOCALE")) is False
    finally:
        locale.setlocale(locale.LC_COLLATE, previous)
