"""Text and template-ready rendering of result sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sdb_cli.shared.models import Record

from .types import Column, TableView


def pad(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces to ``width``; longer text is left untouched."""
    return text.ljust(width)


def render_lines(records: Sequence[Record], columns: Sequence[Column]) -> list[str]:
    """Render records as a fixed-width grid framed by dashed borders.

    Rows only carry cells for the attributes their record actually has, so a
    short record produces a short row.
    """
    header = _frame(pad(column.header, column.width) for column in columns)
    border = "-" * len(header)

    lines = [border, header, border]
    for record in records:
        cells = [pad(record.name, columns[0].width)]
        cells.extend(
            pad(attribute.value, columns[index + 1].width)
            for index, attribute in enumerate(record.attributes)
        )
        lines.append(_frame(cells))
    lines.append(border)
    return lines


def build_table_view(records: Sequence[Record], columns: Sequence[Column]) -> TableView:
    """Pair columns and records for the HTML templates (no padding applied)."""
    rows = [
        (record.name, *(attribute.value for attribute in record.attributes))
        for record in records
    ]
    return TableView(columns=tuple(columns), rows=tuple(rows))


def _frame(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |"
