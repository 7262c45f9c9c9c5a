from __future__ import annotations

import logging

import pytest
from pythonjsonlogger import jsonlogger

from sq_browser.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_is_default(restore_root_logger, monkeypatch):
    monkeypatch.delenv("SQ_BROWSER_LOG_FORMAT", raising=False)
    configure_logging()
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, jsonlogger.JsonFormatter)


def test_plain_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("SQ_BROWSER_LOG_FORMAT", "plain")
    configure_logging(level=logging.DEBUG)
    formatter = restore_root_logger.handlers[0].formatter
    assert not isinstance(formatter, jsonlogger.JsonFormatter)
    assert restore_root_logger.level == logging.DEBUG


def test_force_format_wins(restore_root_logger, monkeypatch):
    monkeypatch.setenv("SQ_BROWSER_LOG_FORMAT", "plain")
    configure_logging(force_format="json")
    assert isinstance(restore_root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)
