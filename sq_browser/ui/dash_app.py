from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from sq_browser.config.loader import apply_collation_locale, load_global_config
from sq_browser.services.data_source import FileDataSource
from sq_browser.services.record_store import RecordStore
from sq_browser.services.results_service import ResultsService
from sq_browser.services.storage import LocalFileKeyValueStore
from sq_browser.ui.callbacks.callbacks_results import register_results_callbacks
from sq_browser.ui.callbacks.callbacks_routing import register_routing_callbacks
from sq_browser.ui.callbacks.callbacks_save import register_save_callbacks
from sq_browser.ui.callbacks.callbacks_saved_queries import register_saved_queries_callbacks
from sq_browser.ui.callbacks.callbacks_search import register_search_callbacks
from sq_browser.ui.config import AppConfig
from sq_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)
    apply_collation_locale(global_config)

    # 2) Record pipeline
    record_store = RecordStore(FileDataSource(global_config.data_path))
    results_service = ResultsService(record_store)

    # 3) Saved-query storage: browser localStorage unless configured otherwise
    file_store = None
    if global_config.storage_backend == "file":
        file_store = LocalFileKeyValueStore(global_config.storage_root)

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        record_store=record_store,
        results_service=results_service,
        file_store=file_store,
    )
    ctx.validate()

    logger.info(
        "Starting stock query browser",
        extra={
            "data_path": str(global_config.data_path),
            "storage_backend": global_config.storage_backend,
        },
    )

    # Pages are swapped in by the routing callback, so most callback
    # targets are absent from the initial layout.
    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        suppress_callback_exceptions=True,
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_routing_callbacks(app, ctx)
    register_search_callbacks(app, ctx)
    register_results_callbacks(app, ctx)
    register_save_callbacks(app, ctx)
    register_saved_queries_callbacks(app, ctx)

    return app
