"""
Adapters plugging the JSON/BSON conversions into the bson library.

``JsonBsonReader`` and ``JsonBsonWriter`` report failures with the bson
library's own exceptions. ``JsonNumberEncoder`` lets ``bson.encode`` accept
``decimal.Decimal`` JSON numbers directly. The ``try_*`` helpers return a
``ConversionResult`` instead of raising.
"""
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

import bson
from bson.codec_options import CodecOptions, DatetimeConversion, TypeEncoder, TypeRegistry
from bson.errors import InvalidBSON, InvalidDocument

from bsonjson.schemas.conversion import ConversionFailure, ConversionResult
from bsonjson.services.codec.bson_to_json import bson_to_json
from bsonjson.services.codec.exceptions import ConversionError
from bsonjson.services.codec.json_to_bson import json_to_bson, number_to_bson

logger = logging.getLogger(__name__)


class JsonNumberEncoder(TypeEncoder):
    """Encode ``decimal.Decimal`` values as Int64 or Decimal128."""

    @property
    def python_type(self):
        return Decimal

    def transform_python(self, value: Decimal) -> Any:
        try:
            return number_to_bson(value)
        except ConversionError as e:
            logger.warning(f"Cannot encode JSON number: {str(e)}")
            raise InvalidDocument(str(e)) from e


def json_codec_options(**kwargs) -> CodecOptions:
    """
    CodecOptions for documents exchanged with JSON.

    - decimal.Decimal is encoded through JsonNumberEncoder
    - datetimes decode to DatetimeMS so every epoch-millis value survives
    - datetimes are timezone aware when decoded as datetime
    """
    options = {
        "tz_aware": True,
        "datetime_conversion": DatetimeConversion.DATETIME_MS,
        "type_registry": TypeRegistry([JsonNumberEncoder()]),
    }
    options.update(kwargs)
    return CodecOptions(**options)


class JsonBsonReader:
    """Reads JSON values out of BSON values."""

    def read(self, value: Any) -> Any:
        """Convert a BSON value to JSON, raising InvalidBSON on failure."""
        try:
            return bson_to_json(value)
        except ConversionError as e:
            logger.warning(f"BSON to JSON conversion failed for {e.value_type}: {str(e)}")
            raise InvalidBSON(
                f"Cannot convert {e.value_type} to JSON (in {type(value).__name__}): {str(e)}"
            ) from e

    def read_bytes(self, data: bytes, codec_options: Optional[CodecOptions] = None) -> Any:
        """Decode one BSON document and read it as a JSON object."""
        if codec_options is None:
            codec_options = json_codec_options()
        return self.read(bson.decode(data, codec_options=codec_options))


class JsonBsonWriter:
    """Writes JSON values as BSON values."""

    def write(self, value: Any) -> Any:
        """Convert a JSON value to BSON, raising InvalidDocument on failure."""
        try:
            return json_to_bson(value)
        except ConversionError as e:
            logger.warning(f"JSON to BSON conversion failed for {e.value_type}: {str(e)}")
            raise InvalidDocument(
                f"Cannot convert {e.value_type} to BSON (in {type(value).__name__}): {str(e)}"
            ) from e

    def write_bytes(self, document: Any, codec_options: Optional[CodecOptions] = None) -> bytes:
        """Convert a JSON object and encode it as a BSON document."""
        converted = self.write(document)
        if not isinstance(converted, Mapping):
            raise InvalidDocument(
                f"Top-level BSON value must be a document, got {type(converted).__name__}"
            )
        if codec_options is None:
            codec_options = json_codec_options()
        return bson.encode(converted, codec_options=codec_options)


def try_bson_to_json(value: Any) -> ConversionResult:
    """Convert BSON to JSON, returning failures as a ConversionResult."""
    try:
        return ConversionResult(value=bson_to_json(value))
    except ConversionError as e:
        return ConversionResult(error=ConversionFailure.from_error(e))


def try_json_to_bson(value: Any) -> ConversionResult:
    """Convert JSON to BSON, returning failures as a ConversionResult."""
    try:
        return ConversionResult(value=json_to_bson(value))
    except ConversionError as e:
        return ConversionResult(error=ConversionFailure.from_error(e))
