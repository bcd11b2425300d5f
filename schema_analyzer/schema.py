# schema_analyzer/schema.py
"""
Aggregated schema model.

to_dict() walks nested entries with a deque, like the merge, so deeply
nested schemas serialize without growing the call stack.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .bson_types import BSONType, to_json_type


@dataclass
class TypeEntry:
    """One (field, type tag) combination with its counters and statistics."""

    bson_type: BSONType
    type_occurrence: int = 0
    stats: Optional[Any] = None
    # object entries
    properties: Optional[Dict[str, "PropertySchema"]] = None
    min_properties: Optional[int] = None
    max_properties: Optional[int] = None
    # array entries
    items: Optional[Dict[BSONType, "TypeEntry"]] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    @property
    def json_type(self) -> str:
        return to_json_type(self.bson_type)

    def to_dict(self) -> Dict[str, Any]:
        queue = deque()
        out = _entry_to_dict(self, queue)
        _drain(queue)
        return out


@dataclass
class PropertySchema:
    """All type entries seen for one field name, keyed by tag in first-seen order."""

    occurrence: int = 0
    types: Dict[BSONType, TypeEntry] = field(default_factory=dict)

    def find_or_create(self, bson_type: BSONType) -> TypeEntry:
        return _find_or_create_entry(self.types, bson_type)

    def to_dict(self) -> Dict[str, Any]:
        queue = deque()
        any_of = []
        _fill_entries(self.types, any_of, queue)
        _drain(queue)
        return {"anyOf": any_of, "x-occurrence": self.occurrence}


@dataclass
class Schema:
    """Root of an aggregated schema; mutated in place by every merge."""

    properties: Dict[str, PropertySchema] = field(default_factory=dict)
    documents_inspected: int = 0

    def to_dict(self) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        _drain(deque([(_fill_properties, self.properties, properties)]))
        return {"x-documentsInspected": self.documents_inspected, "properties": properties}


def _entry_to_dict(entry, queue):
    # nested containers are appended empty and filled when dequeued
    out: Dict[str, Any] = {
        "type": entry.json_type,
        "x-bsonType": entry.bson_type.value,
        "x-typeOccurrence": entry.type_occurrence,
    }
    if entry.stats is not None:
        out.update(entry.stats.to_dict())
    if entry.properties is not None:
        out["properties"] = {}
        queue.append((_fill_properties, entry.properties, out["properties"]))
    if entry.min_properties is not None:
        out["x-minProperties"] = entry.min_properties
        out["x-maxProperties"] = entry.max_properties
    if entry.items is not None:
        any_of = []
        out["items"] = {"anyOf": any_of}
        queue.append((_fill_entries, entry.items, any_of))
    if entry.min_items is not None:
        out["x-minItems"] = entry.min_items
        out["x-maxItems"] = entry.max_items
    return out


def _fill_entries(entries, out, queue):
    for entry in entries.values():
        out.append(_entry_to_dict(entry, queue))


def _fill_properties(properties, out, queue):
    for name, prop in properties.items():
        any_of = []
        out[name] = {"anyOf": any_of, "x-occurrence": prop.occurrence}
        _fill_entries(prop.types, any_of, queue)


def _drain(queue):
    while queue:
        fill, source, out = queue.popleft()
        fill(source, out, queue)


def _find_or_create_entry(entries: Dict[BSONType, TypeEntry], bson_type: BSONType) -> TypeEntry:
    entry = entries.get(bson_type)
    if entry is None:
        entry = TypeEntry(bson_type=bson_type)
        entries[bson_type] = entry
    return entry


def find_or_create_property(properties: Dict[str, PropertySchema], name: str) -> PropertySchema:
    prop = properties.get(name)
    if prop is None:
        prop = PropertySchema()
        properties[name] = prop
    return prop


def find_or_create_item_entry(items: Dict[BSONType, TypeEntry], bson_type: BSONType) -> TypeEntry:
    return _find_or_create_entry(items, bson_type)
