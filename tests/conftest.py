"""Test configuration and fixtures."""
import pytest
from datetime import datetime, timezone
from decimal import Decimal

from bson.code import Code
from bson.decimal128 import Decimal128
from bson.int64 import Int64
from bson.objectid import ObjectId
from bson.son import SON
from bson.timestamp import Timestamp

@pytest.fixture
def object_id():
    """A fixed ObjectId."""
    return ObjectId("5f43a1b2c3d4e5f6a7b8c9d0")

@pytest.fixture
def bson_document(object_id):
    """A BSON document covering every variant with a JSON representation."""
    return SON([
        ("_id", object_id),
        ("name", "Ada"),
        ("active", True),
        ("score", 9.5),
        ("visits", Int64(9007199254740993)),
        ("age", 36),
        ("balance", Decimal128("1234.5678")),
        ("tags", ["admin", "user"]),
        ("created", datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)),
        ("seen", Timestamp(1700000000, 7)),
        ("deleted", None),
        ("validator", Code("function() { return true; }")),
        ("profile", SON([("city", "London"), ("zip", None)])),
    ])

@pytest.fixture
def json_document():
    """A JSON object as produced by json.loads(..., parse_float=Decimal)."""
    return {
        "name": "Ada",
        "active": True,
        "visits": 42,
        "price": Decimal("19.99"),
        "ratio": 0.25,
        "created": {"$date": 1700000000000},
        "tags": ["admin", "user"],
        "profile": {"city": "London", "zip": None},
    }
