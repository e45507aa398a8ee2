"""Data models for results returned by the remote store."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class Attribute:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Record:
    """One item of a result set; attributes keep the order the store returned."""

    name: str
    attributes: tuple[Attribute, ...] = ()

    @classmethod
    def from_pairs(cls, name: str, pairs: Iterable[tuple[str, str]]) -> Record:
        return cls(name=name, attributes=tuple(Attribute(key, value) for key, value in pairs))


@dataclass(frozen=True, slots=True)
class DomainMetadata:
    item_count: int
    item_names_size_bytes: int
    attribute_name_count: int
    attribute_value_count: int
    attribute_names_size_bytes: int
    attribute_values_size_bytes: int
    timestamp: int

    def recorded_at(self) -> datetime:
        """Return the metadata timestamp as a local, timezone-aware datetime."""
        return datetime.fromtimestamp(self.timestamp).astimezone()

    def fields(self) -> list[tuple[str, int]]:
        """Return the numeric fields in display order with their store names."""
        return [
            ("ItemCount", self.item_count),
            ("ItemNamesSizeBytes", self.item_names_size_bytes),
            ("AttributeNameCount", self.attribute_name_count),
            ("AttributeValueCount", self.attribute_value_count),
            ("AttributeNamesSizeBytes", self.attribute_names_size_bytes),
            ("AttributeValuesSizeBytes", self.attribute_values_size_bytes),
        ]


def record_from_item(item: Mapping[str, Any]) -> Record:
    """Build a Record from a SimpleDB ``Item`` payload."""
    attributes = tuple(
        Attribute(str(attr.get("Name", "")), str(attr.get("Value", "")))
        for attr in item.get("Attributes", ())
    )
    return Record(name=str(item["Name"]), attributes=attributes)


def metadata_from_response(payload: Mapping[str, Any]) -> DomainMetadata:
    """Build DomainMetadata from a SimpleDB ``DomainMetadata`` response."""
    return DomainMetadata(
        item_count=int(payload.get("ItemCount", 0)),
        item_names_size_bytes=int(payload.get("ItemNamesSizeBytes", 0)),
        attribute_name_count=int(payload.get("AttributeNameCount", 0)),
        attribute_value_count=int(payload.get("AttributeValueCount", 0)),
        attribute_names_size_bytes=int(payload.get("AttributeNamesSizeBytes", 0)),
        attribute_values_size_bytes=int(payload.get("AttributeValuesSizeBytes", 0)),
        timestamp=int(payload.get("Timestamp", 0)),
    )
