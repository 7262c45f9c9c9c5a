from __future__ import annotations

__all__ = [
    "IDs",
    "column_filter_id",
    "sort_header_id",
    "filter_chip_id",
    "tag_toggle_id",
    "saved_load_id",
    "saved_delete_id",
]


class IDs:
    class Location:
        URL = "url"

    class Store:
        VIEW_STATE = "view-state"
        ADDRESS_SYNC = "address-sync"
        QUERY_DRAFT = "query-draft"
        SELECTED_TAGS = "selected-tags"
        SAVED_QUERIES = "saved-queries"
        PENDING_DELETE = "pending-delete"

    class Control:
        PAGE_CONTENT = "page-content"
        ADDRESS_SYNC_SINK = "address-sync-sink"

        # Search page
        SEARCH_COMPANY_INPUT = "search-company-input"
        SEARCH_COMPANY_BTN = "search-company-btn"
        SEARCH_QUERY_INPUT = "search-query-input"
        SEARCH_RUN_BTN = "search-run-btn"
        SEARCH_CLEAR_BTN = "search-clear-btn"
        SEARCH_STATUS = "search-status"

        # Results page
        RESULTS_COUNTER = "results-counter"
        RESULTS_TABLE = "results-table"
        RESULTS_FILTER_PANEL = "results-filter-panel"
        RESULTS_ACTIVE_FILTERS = "results-active-filters"
        RESULTS_CLEAR_FILTERS_BTN = "results-clear-filters-btn"
        RESULTS_EXPORT_BTN = "results-export-btn"
        RESULTS_EXPORT_STATUS = "results-export-status"
        RESULTS_SAVE_BTN = "results-save-btn"
        RESULTS_DOWNLOAD = "results-download"

        # Save page
        SAVE_SUMMARY = "save-summary"
        SAVE_FORM = "save-form"
        SAVE_NAME_INPUT = "save-name-input"
        SAVE_DESCRIPTION_INPUT = "save-description-input"
        SAVE_TAGS = "save-tags"
        SAVE_SELECTED_TAGS = "save-selected-tags"
        SAVE_BTN = "save-btn"
        SAVE_STATUS = "save-status"
        SAVE_RECENT_TOGGLE_BTN = "save-recent-toggle-btn"
        SAVE_RECENT_LIST = "save-recent-list"
        SAVE_MY_QUERIES_BTN = "save-my-queries-btn"

        # My queries page
        MY_QUERIES_LIST = "my-queries-list"
        MY_QUERIES_SUMMARY = "my-queries-summary"

        DELETE_CONFIRM = "delete-confirm"

    class Pattern:
        # pattern-matching "type" strings
        COLUMN_FILTER = "column-filter"
        SORT_HEADER = "sort-header"
        FILTER_CHIP = "filter-chip-remove"
        TAG_TOGGLE = "tag-toggle"
        SAVED_LOAD = "saved-query-load"
        SAVED_DELETE = "saved-query-delete"


def column_filter_id(column: str) -> dict:
    return {"type": IDs.Pattern.COLUMN_FILTER, "index": column}


def sort_header_id(column: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "index": column}


def filter_chip_id(column: str) -> dict:
    return {"type": IDs.Pattern.FILTER_CHIP, "index": column}


def tag_toggle_id(tag: str) -> dict:
    return {"type": IDs.Pattern.TAG_TOGGLE, "index": tag}


def saved_load_id(query_id: str) -> dict:
    return {"type": IDs.Pattern.SAVED_LOAD, "index": query_id}


def saved_delete_id(query_id: str) -> dict:
    return {"type": IDs.Pattern.SAVED_DELETE, "index": query_id}
