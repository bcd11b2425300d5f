# schema_analyzer/stats.py
"""
Per-type value statistics attached to a TypeEntry.

Each tag with statistics maps to one payload class and one measure
function; tags without an entry in the table carry no payload.
"""
import datetime
import decimal
import math
from dataclasses import dataclass

from bson.binary import Binary
from bson.datetime_ms import DatetimeMS
from bson.decimal128 import Decimal128

from .bson_types import BSONType, NUMERIC_TYPES

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


@dataclass
class LengthStats:
    min_length: int
    max_length: int

    @classmethod
    def start(cls, length):
        return cls(length, length)

    def add(self, length):
        if length < self.min_length:
            self.min_length = length
        if length > self.max_length:
            self.max_length = length

    def to_dict(self):
        return {"x-minLength": self.min_length, "x-maxLength": self.max_length}


@dataclass
class ValueStats:
    # float approximation: long and decimal128 lose precision past 2**53,
    # out-of-range integers saturate to +/-inf
    min_value: float
    max_value: float

    @classmethod
    def start(cls, value):
        return cls(value, value)

    def add(self, value):
        # NaN is sticky: once seen, both bounds stay NaN
        if math.isnan(self.min_value):
            return
        if math.isnan(value):
            self.min_value = self.max_value = value
            return
        if value < self.min_value:
            self.min_value = value
        if value > self.max_value:
            self.max_value = value

    def to_dict(self):
        return {"x-minValue": self.min_value, "x-maxValue": self.max_value}


@dataclass
class BooleanStats:
    true_count: int
    false_count: int

    @classmethod
    def start(cls, flag):
        return cls(1 if flag else 0, 0 if flag else 1)

    def add(self, flag):
        if flag:
            self.true_count += 1
        else:
            self.false_count += 1

    def to_dict(self):
        return {"x-trueCount": self.true_count, "x-falseCount": self.false_count}


@dataclass
class DateStats:
    min_date: int
    max_date: int

    @classmethod
    def start(cls, millis):
        return cls(millis, millis)

    def add(self, millis):
        if millis < self.min_date:
            self.min_date = millis
        if millis > self.max_date:
            self.max_date = millis

    def to_dict(self):
        return {"x-minDate": self.min_date, "x-maxDate": self.max_date}


def _string_length(value):
    return len(value)


def _binary_length(value):
    if isinstance(value, (bytes, bytearray, Binary)):
        return len(value)
    if isinstance(value, memoryview):
        return value.nbytes
    # uuid.UUID
    return len(value.bytes)


def _numeric_value(value):
    if isinstance(value, Decimal128):
        value = value.to_decimal()
    if isinstance(value, decimal.Decimal) and value.is_snan():
        return float("nan")
    try:
        return float(value)
    except OverflowError:
        # int too large for a float; copysign would overflow converting it too
        return math.inf if value > 0 else -math.inf


def _epoch_millis(value):
    if isinstance(value, DatetimeMS):
        return int(value)
    if value.tzinfo is None:
        # naive datetimes are UTC, as bson decodes them
        value = value.replace(tzinfo=datetime.timezone.utc)
    delta = value - EPOCH
    return (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000


_HANDLERS = {
    BSONType.STRING: (LengthStats, _string_length),
    BSONType.BINARY: (LengthStats, _binary_length),
    BSONType.BOOLEAN: (BooleanStats, bool),
    BSONType.DATE: (DateStats, _epoch_millis),
}
_HANDLERS.update({tag: (ValueStats, _numeric_value) for tag in NUMERIC_TYPES})


def initialize_stats(value, bson_type, entry):
    """Start the entry's statistics from a single observed value."""
    handler = _HANDLERS.get(bson_type)
    if handler is None:
        return
    stats_cls, measure = handler
    entry.stats = stats_cls.start(measure(value))


def aggregate_stats(value, bson_type, entry):
    """Fold one more value into the entry's statistics, only ever widening bounds."""
    handler = _HANDLERS.get(bson_type)
    if handler is None:
        return
    if entry.stats is None:
        initialize_stats(value, bson_type, entry)
        return
    _, measure = handler
    entry.stats.add(measure(value))


def update_min_max(entry, min_attr, max_attr, value):
    current_min = getattr(entry, min_attr)
    if current_min is None or value < current_min:
        setattr(entry, min_attr, value)
    current_max = getattr(entry, max_attr)
    if current_max is None or value > current_max:
        setattr(entry, max_attr, value)
