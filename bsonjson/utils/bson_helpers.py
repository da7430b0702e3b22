"""BSON helper utilities."""
import math
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Union

from bson.datetime_ms import DatetimeMS
from bson.decimal128 import Decimal128
from bson.timestamp import Timestamp

# Key of the single-field object wrapping a BSON datetime on the JSON side
DATE_FIELD = "$date"

NEGATIVE_ZERO = Decimal128("-0")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

JsonNumber = Union[int, float, Decimal]


def is_json_number(value: Any) -> bool:
    """Return True for int, float and Decimal values, excluding bool."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_negative_zero(number: JsonNumber) -> bool:
    """Check whether the double approximation of a number is -0.0."""
    if isinstance(number, int):
        return False
    if isinstance(number, Decimal) and not number.is_finite():
        return False
    approx = float(number)
    return approx == 0.0 and math.copysign(1.0, approx) < 0


def to_int64(number: JsonNumber) -> Optional[int]:
    """
    Return the exact integral value of a number if it fits a signed 64-bit range.

    Args:
        number: A JSON number (int, float or Decimal)

    Returns:
        The integer, or None when the number is fractional, non-finite or out of range
    """
    if isinstance(number, bool):
        return None
    if isinstance(number, int):
        value = number
    elif isinstance(number, float):
        if not math.isfinite(number) or not number.is_integer():
            return None
        value = int(number)
    elif isinstance(number, Decimal):
        if not number.is_finite():
            return None
        # 2**63 has 19 digits; skip materialising huge exponents
        if not number.is_zero() and number.adjusted() > 18:
            return None
        if number != number.to_integral_value():
            return None
        value = int(number)
    else:
        return None

    if INT64_MIN <= value <= INT64_MAX:
        return value
    return None


def to_exact_decimal(number: JsonNumber) -> Optional[Decimal]:
    """Exact decimal form of a finite number; floats go through their shortest repr."""
    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        return Decimal(repr(number))
    if isinstance(number, Decimal):
        return number if number.is_finite() else None
    return Decimal(number)


def datetime_to_millis(value: Union[datetime, DatetimeMS]) -> int:
    """Milliseconds since the Unix epoch; naive datetimes are taken as UTC."""
    if isinstance(value, DatetimeMS):
        return int(value)
    return int(DatetimeMS(value))


def timestamp_to_int(value: Timestamp) -> int:
    """Raw 64-bit value of a BSON timestamp (seconds high, increment low)."""
    return (value.time << 32) | value.inc
