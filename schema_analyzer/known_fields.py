# schema_analyzer/known_fields.py
from collections import deque
from dataclasses import dataclass
from typing import List, Optional

from .schema import PropertySchema, Schema, TypeEntry


@dataclass
class FieldEntry:
    path: str
    type: str


def _most_common_entry(prop: PropertySchema) -> Optional[TypeEntry]:
    best = None
    for entry in prop.types.values():
        if best is None or entry.type_occurrence > best.type_occurrence:
            best = entry
    return best


def get_known_fields(schema: Schema) -> List[FieldEntry]:
    """
    List every leaf field path with its most common JSON type.

    Breadth-first over the schema: for each property the type entry with
    the highest occurrence decides; object entries with properties are
    descended into, everything else is a leaf.
    """
    result: List[FieldEntry] = []
    queue = deque((name, prop) for name, prop in schema.properties.items())

    while queue:
        path, prop = queue.popleft()
        entry = _most_common_entry(prop)
        if entry is None:
            continue
        if entry.json_type == "object" and entry.properties:
            for child_name, child in entry.properties.items():
                queue.append((f"{path}.{child_name}", child))
        else:
            result.append(FieldEntry(path=path, type=entry.json_type))

    return result
