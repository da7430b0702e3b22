"""
BSON to JSON conversion.

Turns a tree of values as produced by ``bson.decode`` into plain JSON values:
``None``, ``bool``, ``str``, ``int``/``float``/``Decimal``, ``list`` and ``dict``.
"""
import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from bson.code import Code
from bson.datetime_ms import DatetimeMS
from bson.dbref import DBRef
from bson.decimal128 import Decimal128
from bson.errors import InvalidId
from bson.objectid import ObjectId
from bson.timestamp import Timestamp

from bsonjson.services.codec.exceptions import (
    IdentifierRoundTripError,
    NumericRangeError,
    UnsupportedVariantError,
)
from bsonjson.services.codec.traverse import traverse, traverse_fields
from bsonjson.utils.bson_helpers import (
    DATE_FIELD,
    NEGATIVE_ZERO,
    datetime_to_millis,
    timestamp_to_int,
)

logger = logging.getLogger(__name__)

def _unsupported(value: Any) -> UnsupportedVariantError:
    logger.debug(f"No JSON representation for {type(value).__name__}")
    return UnsupportedVariantError(
        f"Cannot convert {value!r}: {type(value).__name__} has no JSON representation",
        value,
    )

def _decimal_to_json(value: Decimal128) -> Any:
    # Decimal128("-0") is matched on its exact bit pattern
    if value == NEGATIVE_ZERO:
        return -0.0
    number = value.to_decimal()
    if not number.is_finite():
        raise NumericRangeError(f"Cannot convert {value!r}: JSON has no {number} literal", value)
    return number

def _object_id_to_json(value: ObjectId) -> str:
    canonical = str(value)
    try:
        return str(ObjectId(canonical))
    except InvalidId as e:
        raise IdentifierRoundTripError(
            f"ObjectId canonical form {canonical!r} does not parse back: {str(e)}", value
        ) from e

def bson_to_json(value: Any) -> Any:
    """
    Convert a BSON value tree into a JSON value tree.

    Args:
        value: A value as decoded by the bson library (document, list or scalar)

    Returns:
        A freshly built JSON value; the input is left untouched

    Raises:
        ConversionError: for the first value in the tree without a JSON form
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, Code):
        if value.scope is None:
            return str(value)
        return {str(value): bson_to_json(value.scope)}
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise NumericRangeError(f"Cannot convert {value!r}: JSON numbers must be finite", value)
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, Decimal128):
        return _decimal_to_json(value)
    # bson.decode turns $ref/$id documents into DBRef
    if isinstance(value, DBRef):
        return traverse_fields(value.as_doc(), bson_to_json)
    if isinstance(value, Mapping):
        return traverse_fields(value, bson_to_json)
    if isinstance(value, (list, tuple)):
        return traverse(value, bson_to_json)
    if isinstance(value, (datetime, DatetimeMS)):
        return {DATE_FIELD: datetime_to_millis(value)}
    if isinstance(value, Timestamp):
        return timestamp_to_int(value)
    if isinstance(value, ObjectId):
        return _object_id_to_json(value)
    # MaxKey, MinKey, Binary, Regex and any foreign type
    raise _unsupported(value)
