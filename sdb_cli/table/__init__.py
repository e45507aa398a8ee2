"""Public exports for result-set layout and rendering."""

from .layout import ITEM_NAME_HEADER, compute_columns
from .render import build_table_view, pad, render_lines
from .types import Column, TableView

__all__ = [
    "ITEM_NAME_HEADER",
    "Column",
    "TableView",
    "build_table_view",
    "compute_columns",
    "pad",
    "render_lines",
]
