from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union


@dataclass(frozen=True)
class Text:
    """A textual cell value."""
    value: str


@dataclass(frozen=True)
class Number:
    """A numeric cell value. Integers are stored as floats."""
    value: float


@dataclass(frozen=True)
class Missing:
    """An absent cell (null, NaN, or a column the record does not carry)."""
    pass


Cell = Union[Text, Number, Missing]

MISSING = Missing()


def to_cell(raw: Any) -> Cell:
    """
    Wrap a raw JSON/pandas scalar into its cell variant.

    - None and NaN -> Missing
    - bool -> Text("true"/"false") (checked before Real, bool is an int subclass)
    - int/float (incl. numpy scalars) -> Number
    - anything else -> Text(str(raw))
    """
    if raw is None:
        return MISSING
    if isinstance(raw, (Text, Number, Missing)):
        return raw
    if isinstance(raw, bool):
        return Text("true" if raw else "false")
    if isinstance(raw, Real):
        value = float(raw)
        if math.isnan(value):
            return MISSING
        return Number(value)
    return Text(str(raw))


def format_number(value: float) -> str:
    """Plain text form of a number: 12.0 -> "12", 12.5 -> "12.5"."""
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def cell_text(cell: Cell) -> str:
    """Coerce a cell to the text used for matching, collation and export."""
    if isinstance(cell, Text):
        return cell.value
    if isinstance(cell, Number):
        return format_number(cell.value)
    return ""


def cell_to_raw(cell: Cell) -> Any:
    """Inverse of :func:`to_cell` for JSON transport (Missing -> None)."""
    if isinstance(cell, Text):
        return cell.value
    if isinstance(cell, Number):
        value = cell.value
        return int(value) if value.is_integer() and abs(value) < 2 ** 53 else value
    return None
