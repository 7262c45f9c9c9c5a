"""
Pure pipeline stages: filter -> sort -> (render | export),
plus the codec that mirrors filter state into URL parameters.
"""

from .filter_engine import apply_filters
from .sort_engine import apply_sort

__all__ = ["apply_filters", "apply_sort"]
