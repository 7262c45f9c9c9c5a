from __future__ import annotations

from sq_browser.core.cells import Cell, Number, cell_text
from sq_browser.core.record import ORDINAL_COLUMN

RUPEE = "₹"


def group_indian(value: float) -> str:
    """
    Indian digit grouping (12,34,567) with up to three decimals,
    trailing zeros dropped.
    """
    sign = "-" if value < 0 else ""
    text = f"{abs(value):.3f}".rstrip("0").rstrip(".")
    whole, _, frac = text.partition(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])
    return f"{sign}{whole}.{frac}" if frac else f"{sign}{whole}"


def format_amount(value: float) -> str:
    """Crore / lakh / thousand abbreviations for large amounts."""
    if value >= 10_000_000:
        return f"{RUPEE}{value / 10_000_000:.2f}Cr"
    if value >= 100_000:
        return f"{RUPEE}{value / 100_000:.2f}L"
    if value >= 1_000:
        return f"{RUPEE}{value / 1_000:.2f}K"
    return group_indian(value)


def format_cell(column: str, cell: Cell) -> str:
    """Display text for a results-table cell."""
    if not isinstance(cell, Number) or column == ORDINAL_COLUMN:
        return cell_text(cell)
    if "%" in column:
        return f"{cell_text(cell)}%"
    return format_amount(cell.value)


def is_numeric_display(column: str, cell: Cell) -> bool:
    """Numbers other than the ordinal column are right-aligned."""
    return isinstance(cell, Number) and column != ORDINAL_COLUMN
