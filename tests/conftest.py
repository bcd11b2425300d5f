"""Sample documents shared across the test modules."""

import datetime
import re

import pytest
from bson.binary import Binary
from bson.code import Code
from bson.dbref import DBRef
from bson.decimal128 import Decimal128
from bson.int64 import Int64
from bson.max_key import MaxKey
from bson.min_key import MinKey
from bson.objectid import ObjectId
from bson.timestamp import Timestamp

from schema_analyzer.bson_types import UNDEFINED


@pytest.fixture
def flat_document():
    return {
        "_id": ObjectId(),
        "stringField": "Example String",
        "int32Field": 42,
        "longField": Int64(9007199254740991),
        "doubleField": 3.14,
        "decimalField": Decimal128("123.45"),
        "booleanField": True,
        "dateField": datetime.datetime(2024, 5, 1, 12, 0, 0),
        "nullField": None,
        "binaryField": Binary(b"BinaryData", 0),
        "objectIdField": ObjectId(),
        "regexField": re.compile("pattern", re.IGNORECASE),
        "codeField": Code("function() { return true; }"),
        "dbRefField": DBRef("otherCollection", ObjectId()),
        "timestampField": Timestamp(1, 2),
        "maxKeyField": MaxKey(),
        "minKeyField": MinKey(),
        "undefinedField": UNDEFINED,
    }


@pytest.fixture
def embedded_document():
    return {
        "_id": ObjectId(),
        "personalInfo": {
            "name": "John Doe",
            "age": 29,
            "married": False,
            "address": {
                "street": "123 Main St",
                "city": "Somewhere",
                "zip": "12345",
            },
        },
        "jobInfo": {
            "company": "Tech Inc.",
            "role": "Software Engineer",
            "salary": 80000,
        },
    }


@pytest.fixture
def arrays_document():
    return {
        "_id": ObjectId(),
        "integersArray": [1, 2, 3, 4, 5],
        "stringsArray": ["one", "two", "three"],
        "booleansArray": [True, False, True],
        "mixedArray": [42, "text", True, datetime.datetime(2021, 1, 1), None, {"key": "value"}],
        "datesArray": [
            datetime.datetime(2021, 6, 1),
            datetime.datetime(2020, 1, 1),
            datetime.datetime(2022, 1, 1),
        ],
    }


@pytest.fixture
def complex_document():
    return {
        "_id": ObjectId(),
        "user": {
            "username": "john_doe",
            "email": "john@example.com",
            "profile": {
                "firstName": "John",
                "lastName": "Doe",
                "hobbies": ["reading", "coding", "hiking"],
                "addresses": [
                    {"street": "123 Main St", "city": "Somewhere", "zip": "12345"},
                    {"street": "456 Second St", "city": "Elsewhere", "zip": "54321"},
                ],
            },
        },
        "orders": [
            {
                "orderId": 1,
                "items": [
                    {"itemName": "Laptop", "quantity": 1, "price": Decimal128("999.99")},
                    {"itemName": "Mouse", "quantity": 2, "price": Decimal128("19.99")},
                ],
                "orderDate": datetime.datetime(2023, 6, 1),
                "shipped": False,
            },
            {
                "orderId": 2,
                "items": [{"itemName": "Desk", "quantity": 1, "price": Decimal128("199.99")}],
                "orderDate": datetime.datetime(2023, 8, 1),
                "shipped": True,
            },
        ],
    }


@pytest.fixture
def sparse_documents():
    return [
        {"_id": ObjectId(), "name": "Alice", "age": 25, "email": "alice@example.com", "isActive": True, "score": 87},
        {"_id": ObjectId(), "name": "Bob", "age": 30, "email": "bob@example.com", "isActive": False},
        {"_id": ObjectId(), "name": "Charlie", "description": "Loves hiking and outdoor adventures."},
        {"_id": ObjectId(), "age": 45, "email": "eve@example.com", "isActive": True, "score": 92,
         "description": "Senior manager at a tech company."},
        {"_id": ObjectId(), "name": "Frank", "isActive": False, "score": 56},
        {"_id": ObjectId(), "email": "grace@example.com", "score": 78,
         "description": "Enthusiastic about art and design."},
        {"_id": ObjectId(), "name": "Heidi", "age": 32, "isActive": True},
        {"_id": ObjectId(), "email": "ivan@example.com", "score": 66,
         "description": "Enjoys software development and open-source."},
        {"_id": ObjectId(), "name": "Judy", "age": 28, "isActive": False, "score": 74},
        {"_id": ObjectId(), "name": "Ken", "age": 38, "email": "ken@example.com"},
    ]
