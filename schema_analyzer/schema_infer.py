# schema_analyzer/schema_infer.py
"""
Folds documents into an aggregated Schema, one document per call.

The walk is breadth-first over an explicit deque of work items, so deeply
nested documents never grow the call stack.
"""
import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .bson_types import BSONType, infer_bson_type
from .schema import (
    Schema,
    TypeEntry,
    find_or_create_item_entry,
    find_or_create_property,
)
from .stats import aggregate_stats, initialize_stats, update_min_max

logger = logging.getLogger(__name__)


@dataclass
class WorkItem:
    bson_type: BSONType
    entry: TypeEntry
    value: Any
    path: str


def _add_property(properties, name, value, path, queue):
    bson_type = infer_bson_type(value)
    prop = find_or_create_property(properties, name)
    prop.occurrence += 1
    entry = prop.find_or_create(bson_type)
    entry.type_occurrence += 1
    queue.append(WorkItem(bson_type, entry, value, path))


def update_schema_with_document(schema: Schema, document) -> None:
    """Merge one document into schema. Never raises on unexpected values."""
    schema.documents_inspected += 1

    if not isinstance(document, Mapping):
        logger.debug("skipping non-mapping document of type %s", type(document).__name__)
        return

    queue = deque()

    for name, value in document.items():
        name = str(name)
        _add_property(schema.properties, name, value, name, queue)

    while queue:
        item = queue.popleft()

        if item.bson_type is BSONType.OBJECT:
            obj = item.value
            update_min_max(item.entry, "min_properties", "max_properties", len(obj))
            if item.entry.properties is None:
                item.entry.properties = {}
            for name, value in obj.items():
                name = str(name)
                _add_property(item.entry.properties, name, value, f"{item.path}.{name}", queue)

        elif item.bson_type is BSONType.ARRAY:
            elements = item.value
            update_min_max(item.entry, "min_items", "max_items", len(elements))
            if item.entry.items is None:
                item.entry.items = {}

            # tags already seen in this array only; not kept across arrays
            encountered = set()
            for element in elements:
                element_type = infer_bson_type(element)
                item_entry = find_or_create_item_entry(item.entry.items, element_type)
                item_entry.type_occurrence += 1

                if element_type not in encountered and item_entry.stats is None:
                    initialize_stats(element, element_type, item_entry)
                else:
                    aggregate_stats(element, element_type, item_entry)
                encountered.add(element_type)

                if element_type in (BSONType.OBJECT, BSONType.ARRAY):
                    queue.append(WorkItem(element_type, item_entry, element, f"{item.path}[]"))

        else:
            if item.entry.type_occurrence == 1:
                initialize_stats(item.value, item.bson_type, item.entry)
            else:
                aggregate_stats(item.value, item.bson_type, item.entry)
