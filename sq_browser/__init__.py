"""
Top-level package for the stock query browser.

This package exposes the core architecture (records, engines, services, UI adapters).
Most code should import from submodules such as:
    sq_browser.core
    sq_browser.engine
    sq_browser.services
    sq_browser.ui
"""

__all__: list[str] = []
