"""
JSON to BSON conversion.

Numbers are mapped to the narrowest BSON type that keeps them exact:
negative zero becomes ``Decimal128("-0")``, integers in the signed 64-bit
range become ``Int64`` and everything else becomes ``Decimal128``.
Objects with a ``$date`` field are read back as BSON datetimes.
"""
import logging
from collections.abc import Mapping
from decimal import DecimalException
from typing import Any

from bson.datetime_ms import DatetimeMS
from bson.decimal128 import Decimal128
from bson.int64 import Int64

from bsonjson.services.codec.exceptions import (
    MalformedSpecialFieldError,
    NumericRangeError,
    UnsupportedVariantError,
)
from bsonjson.services.codec.traverse import traverse, traverse_fields
from bsonjson.utils.bson_helpers import (
    DATE_FIELD,
    NEGATIVE_ZERO,
    JsonNumber,
    is_json_number,
    is_negative_zero,
    to_exact_decimal,
    to_int64,
)

logger = logging.getLogger(__name__)

def number_to_bson(number: JsonNumber) -> Any:
    """
    Pick the BSON representation of a JSON number.

    The checks run in a fixed order and the first match wins:
    negative zero, 64-bit integer, exact decimal, then a parse of the
    number's text. Integers are never narrowed to 32 bits.

    Args:
        number: int, float or Decimal

    Returns:
        Decimal128 or Int64

    Raises:
        NumericRangeError: if the number does not fit a Decimal128
    """
    if is_negative_zero(number):
        return NEGATIVE_ZERO

    integral = to_int64(number)
    if integral is not None:
        return Int64(integral)

    exact = to_exact_decimal(number)
    if exact is not None:
        try:
            return Decimal128(exact)
        except DecimalException as e:
            logger.debug(f"Decimal128 rejected {exact}: {e!r}")
            raise NumericRangeError(
                f"Cannot convert {number!r} to Decimal128: exceeds precision or exponent range", number
            ) from e

    text = str(number)
    try:
        return Decimal128(text)
    except DecimalException as e:
        raise NumericRangeError(f"Cannot parse {text!r} as Decimal128", number) from e

def _date_to_bson(fields: Mapping) -> DatetimeMS:
    millis = fields[DATE_FIELD]
    if is_json_number(millis):
        millis = to_int64(millis)
        if millis is not None:
            return DatetimeMS(millis)
    raise MalformedSpecialFieldError(
        f"Unable to convert object with {DATE_FIELD} to a BSON datetime: "
        f"expected a 64-bit integer, got {fields[DATE_FIELD]!r}",
        fields[DATE_FIELD],
    )

def json_to_bson(value: Any) -> Any:
    """
    Convert a JSON value tree into a BSON value tree.

    Args:
        value: None, bool, str, int/float/Decimal, list or dict (nested freely)

    Returns:
        A freshly built tree of values the bson library can encode

    Raises:
        ConversionError: for the first value in the tree that cannot be converted
    """
    if value is None:
        return None
    if isinstance(value, (bool, str)):
        return value
    if is_json_number(value):
        return number_to_bson(value)
    if isinstance(value, Mapping):
        if DATE_FIELD in value:
            return _date_to_bson(value)
        return traverse_fields(value, json_to_bson)
    if isinstance(value, (list, tuple)):
        return traverse(value, json_to_bson)

    logger.debug(f"No BSON representation for {type(value).__name__}")
    raise UnsupportedVariantError(
        f"Cannot convert {value!r}: {type(value).__name__} is not a JSON value", value
    )
