from __future__ import annotations

from sdb_cli.shared.models import Record
from sdb_cli.table import ITEM_NAME_HEADER, Column, compute_columns


def test_example_records_produce_expected_columns(sample_records) -> None:
    columns = compute_columns(sample_records)

    assert columns == (
        Column(header="ItemName", width=8),
        Column(header="color", width=5),
        Column(header="size", width=4),
    )


def test_empty_result_has_only_item_name_column() -> None:
    assert compute_columns([]) == (Column(header=ITEM_NAME_HEADER, width=len(ITEM_NAME_HEADER)),)


def test_item_name_column_widens_for_long_names() -> None:
    records = [Record(name="a-very-long-item-name")]

    columns = compute_columns(records)

    assert columns == (Column(header="ItemName", width=len("a-very-long-item-name")),)


def test_column_count_follows_longest_attribute_list() -> None:
    records = [
        Record.from_pairs("a", [("x", "1")]),
        Record.from_pairs("b", [("x", "1"), ("y", "2"), ("z", "3")]),
        Record.from_pairs("c", []),
    ]

    columns = compute_columns(records)

    assert len(columns) == 1 + max(len(record.attributes) for record in records)
    assert [column.header for column in columns] == ["ItemName", "x", "y", "z"]


def test_headers_are_positional_and_never_overwritten() -> None:
    records = [
        Record.from_pairs("first", [("color", "red")]),
        Record.from_pairs("second", [("weight", "12kg"), ("owner", "someone")]),
    ]

    columns = compute_columns(records)

    assert [column.header for column in columns] == ["ItemName", "color", "owner"]
    # The later "weight" attribute only influences the width of column 1.
    assert columns[1].width == len("weight")
    assert columns[2].width == len("someone")


def test_widths_are_tight_maximum_of_names_and_values() -> None:
    records = [
        Record.from_pairs("r1", [("k", "short"), ("longer-name", "v")]),
        Record.from_pairs("r2", [("k", "a much longer value")]),
    ]

    columns = compute_columns(records)

    for position, column in enumerate(columns[1:]):
        texts = [
            text
            for record in records
            if position < len(record.attributes)
            for text in (record.attributes[position].name, record.attributes[position].value)
        ]
        assert column.width == max(len(text) for text in texts)
