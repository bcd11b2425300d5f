# schema_analyzer/bson_types.py
"""
BSON type vocabulary and the classifier that maps one decoded value
(as handed out by pymongo / bson.json_util) to exactly one type tag.
"""
import datetime
import decimal
import re
import uuid
from collections.abc import Mapping
from enum import Enum

from bson.binary import Binary
from bson.code import Code
from bson.datetime_ms import DatetimeMS
from bson.dbref import DBRef
from bson.decimal128 import Decimal128
from bson.int64 import Int64
from bson.max_key import MaxKey
from bson.min_key import MinKey
from bson.objectid import ObjectId
from bson.regex import Regex
from bson.timestamp import Timestamp

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class BSONType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INT32 = "int32"
    DOUBLE = "double"
    DECIMAL128 = "decimal128"
    LONG = "long"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"
    UNDEFINED = "undefined"
    DATE = "date"
    REGEXP = "regexp"
    BINARY = "binary"
    OBJECTID = "objectid"
    SYMBOL = "symbol"
    TIMESTAMP = "timestamp"
    MINKEY = "minkey"
    MAXKEY = "maxkey"
    DBREF = "dbref"
    CODE = "code"
    CODE_WITH_SCOPE = "codewithscope"
    MAP = "map"
    UNKNOWN = "_unknown_"


class _Undefined:
    """Marker for a field that is present but holds no value (BSON undefined)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"


UNDEFINED = _Undefined()


NUMERIC_TYPES = frozenset(
    {BSONType.NUMBER, BSONType.INT32, BSONType.LONG, BSONType.DOUBLE, BSONType.DECIMAL128}
)

_JSON_TYPES = {
    BSONType.STRING: "string",
    BSONType.SYMBOL: "string",
    BSONType.DATE: "string",
    BSONType.TIMESTAMP: "string",
    BSONType.OBJECTID: "string",
    BSONType.REGEXP: "string",
    BSONType.BINARY: "string",
    BSONType.CODE: "string",
    BSONType.BOOLEAN: "boolean",
    BSONType.NUMBER: "number",
    BSONType.INT32: "number",
    BSONType.LONG: "number",
    BSONType.DOUBLE: "number",
    BSONType.DECIMAL128: "number",
    BSONType.OBJECT: "object",
    BSONType.MAP: "object",
    BSONType.DBREF: "object",
    BSONType.CODE_WITH_SCOPE: "object",
    BSONType.ARRAY: "array",
    BSONType.NULL: "null",
    BSONType.UNDEFINED: "null",
    BSONType.MINKEY: "null",
    BSONType.MAXKEY: "null",
}

_DISPLAY_NAMES = {
    BSONType.STRING: "String",
    BSONType.NUMBER: "Number",
    BSONType.INT32: "Int32",
    BSONType.DOUBLE: "Double",
    BSONType.DECIMAL128: "Decimal128",
    BSONType.LONG: "Long",
    BSONType.BOOLEAN: "Boolean",
    BSONType.OBJECT: "Object",
    BSONType.ARRAY: "Array",
    BSONType.NULL: "Null",
    BSONType.UNDEFINED: "Undefined",
    BSONType.DATE: "Date",
    BSONType.REGEXP: "RegExp",
    BSONType.BINARY: "Binary",
    BSONType.OBJECTID: "ObjectId",
    BSONType.SYMBOL: "Symbol",
    BSONType.TIMESTAMP: "Timestamp",
    BSONType.MINKEY: "MinKey",
    BSONType.MAXKEY: "MaxKey",
    BSONType.DBREF: "DBRef",
    BSONType.CODE: "Code",
    BSONType.CODE_WITH_SCOPE: "CodeWithScope",
    BSONType.MAP: "Map",
    BSONType.UNKNOWN: "Unknown",
}

# checked in this order, first match wins
_WRAPPER_TYPES = (
    (ObjectId, BSONType.OBJECTID),
    ((Decimal128, decimal.Decimal), BSONType.DECIMAL128),
    ((datetime.datetime, DatetimeMS), BSONType.DATE),
    (Timestamp, BSONType.TIMESTAMP),
    (MinKey, BSONType.MINKEY),
    (MaxKey, BSONType.MAXKEY),
    (DBRef, BSONType.DBREF),
    ((Binary, bytes, bytearray, memoryview, uuid.UUID), BSONType.BINARY),
    ((re.Pattern, Regex), BSONType.REGEXP),
)


def to_json_type(bson_type):
    """Coarse JSON type for a tag; unknown tags report as "string"."""
    return _JSON_TYPES.get(bson_type, "string")


def to_display_string(bson_type):
    return _DISPLAY_NAMES.get(bson_type, "Unknown")


def infer_bson_type(value):
    """
    Classify a decoded document value. Never raises: anything that is not
    a known BSON shape comes back as BSONType.UNKNOWN.

    Code and Int64 subclass str and int, and bool subclasses int, so those
    are tested before the plain primitives.
    """
    if value is None:
        return BSONType.NULL
    if value is UNDEFINED:
        return BSONType.UNDEFINED

    if isinstance(value, Code):
        return BSONType.CODE_WITH_SCOPE if value.scope else BSONType.CODE
    if isinstance(value, str):
        return BSONType.STRING
    if isinstance(value, bool):
        return BSONType.BOOLEAN
    if isinstance(value, Int64):
        return BSONType.LONG
    if isinstance(value, int):
        # same rule pymongo uses when encoding a python int
        if INT32_MIN <= value <= INT32_MAX:
            return BSONType.INT32
        return BSONType.LONG
    if isinstance(value, float):
        return BSONType.DOUBLE
    if isinstance(value, (list, tuple)):
        return BSONType.ARRAY

    for wrapper, bson_type in _WRAPPER_TYPES:
        if isinstance(value, wrapper):
            return bson_type

    if isinstance(value, dict):
        return BSONType.OBJECT
    if isinstance(value, Mapping):
        return BSONType.MAP
    return BSONType.UNKNOWN
