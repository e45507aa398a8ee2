"""Column layout for schema-less result sets.

Columns after the identity column are aligned by attribute *position*, not by
attribute name: column ``i`` holds whatever attribute sits at index ``i - 1``
of each record. The header comes from the first record reaching that position
and is never replaced; later records only widen the column.
"""

from __future__ import annotations

from collections.abc import Sequence

from sdb_cli.shared.models import Record

from .types import Column

ITEM_NAME_HEADER = "ItemName"


def compute_columns(records: Sequence[Record]) -> tuple[Column, ...]:
    """Return the display columns for ``records`` in arrival order."""
    headers = [ITEM_NAME_HEADER]
    widths = [max([len(ITEM_NAME_HEADER), *(len(record.name) for record in records)])]

    for record in records:
        for index, attribute in enumerate(record.attributes):
            position = index + 1
            if position >= len(headers):
                headers.append(attribute.name)
                widths.append(0)
            widths[position] = max(widths[position], len(attribute.name), len(attribute.value))

    return tuple(Column(header=header, width=width) for header, width in zip(headers, widths))
