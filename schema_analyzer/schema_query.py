# schema_analyzer/schema_query.py
from typing import List, Sequence

from . import config


class SchemaPathNotFound(LookupError):
    """Raised when a path segment has no property in the schema."""

    def __init__(self, path: Sequence[str]):
        self.path = list(path)
        super().__init__(f'No properties found in the schema at path "{"/".join(self.path)}"')


def get_schema_at_path(schema, path: Sequence[str]):
    """
    Walk the schema along path and return the node reached.

    Each segment moves into the first object-typed entry of the named
    property. A property without an object entry ends the walk early and
    the node reached so far is returned; a missing property raises
    SchemaPathNotFound with the prefix up to that segment.
    """
    node = schema
    for i, key in enumerate(path):
        properties = node.properties or {}
        prop = properties.get(key)
        if prop is None:
            raise SchemaPathNotFound(path[: i + 1])

        object_entry = next(
            (entry for entry in prop.types.values() if entry.json_type == "object"), None
        )
        if object_entry is None:
            return node
        node = object_entry
    return node


def _header_sort_key(name):
    return (name != config.ID_FIELD, name.casefold(), name)


def get_property_names_at_level(schema, path: Sequence[str]) -> List[str]:
    """Property names at path, identifier field first, the rest alphabetical."""
    node = get_schema_at_path(schema, path)
    names = list(node.properties or {})
    return sorted(names, key=_header_sort_key)


def build_full_paths(path: Sequence[str], property_names: Sequence[str]) -> List[str]:
    return [".".join([*path, name]) for name in property_names]
