# schema_analyzer/serialization.py
import orjson
from bson import json_util
from bson.errors import BSONError


class DocumentParseError(ValueError):
    """Input could not be read as MongoDB Extended JSON."""


def dump_schema(schema):
    """Serialize a Schema (or None) to JSON bytes."""
    if schema is None:
        return orjson.dumps(None)
    return orjson.dumps(schema.to_dict())


def loads_extended_json(text):
    try:
        return json_util.loads(text)
    except (ValueError, TypeError, BSONError) as e:
        raise DocumentParseError(str(e)) from e


def load_documents(data):
    """
    Parse Extended JSON into a list of documents with BSON-typed values.

    Accepts a single document, a JSON array of documents, or one document
    per line.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentParseError(str(e)) from e

    text = data.strip()
    if not text:
        return []

    try:
        parsed = loads_extended_json(text)
    except DocumentParseError:
        lines = [line for line in text.splitlines() if line.strip()]
        if len(lines) < 2:
            raise
        parsed = [loads_extended_json(line) for line in lines]

    if isinstance(parsed, list):
        return parsed
    return [parsed]


def documents_from_json(values):
    """Convert already-decoded JSON values carrying $-type wrappers to BSON values."""
    return load_documents(orjson.dumps(values))
