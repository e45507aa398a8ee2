"""Data structures shared by the table layout and rendering modules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Column:
    """Display column: header text and the width needed by its widest value."""

    header: str
    width: int


@dataclass(frozen=True, slots=True)
class TableView:
    """Neutral row/column structure handed to the templating layer.

    Each row starts with the item name followed by the record's own attribute
    values, so rows may be shorter than ``columns``.
    """

    columns: Sequence[Column]
    rows: Sequence[tuple[str, ...]]
