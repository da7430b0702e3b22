"""Exceptions raised by the BSON/JSON conversion services."""
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Category of a conversion failure."""
    UNSUPPORTED_VARIANT = "unsupported_variant"
    NUMERIC_RANGE = "numeric_range"
    MALFORMED_SPECIAL_FIELD = "malformed_special_field"
    IDENTIFIER_ROUND_TRIP = "identifier_round_trip"


class ConversionError(Exception):
    """Base exception for conversion errors"""
    kind: ErrorKind

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value
        self.value_type = type(value).__name__


class UnsupportedVariantError(ConversionError):
    """Value has no representation on the target side (MaxKey, Binary, ...)"""
    kind = ErrorKind.UNSUPPORTED_VARIANT


class NumericRangeError(ConversionError):
    """Number cannot be represented in the target numeric model"""
    kind = ErrorKind.NUMERIC_RANGE


class MalformedSpecialFieldError(ConversionError):
    """A ``$date`` object whose value is not a 64-bit integer"""
    kind = ErrorKind.MALFORMED_SPECIAL_FIELD


class IdentifierRoundTripError(ConversionError):
    """ObjectId canonical string did not parse back"""
    kind = ErrorKind.IDENTIFIER_ROUND_TRIP
