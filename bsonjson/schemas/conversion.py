"""Conversion result schemas."""
from pydantic import BaseModel, Field
from typing import Any, Optional

from bsonjson.services.codec.exceptions import ConversionError, ErrorKind

class ConversionFailure(BaseModel):
    """A conversion error expressed as data."""
    kind: ErrorKind = Field(..., description="Category of the failure")
    value_type: str = Field(..., description="Class name of the value that failed to convert")
    message: str = Field(..., description="Human-readable description")

    @classmethod
    def from_error(cls, error: ConversionError) -> "ConversionFailure":
        return cls(kind=error.kind, value_type=error.value_type, message=str(error))

class ConversionResult(BaseModel):
    """Outcome of a single conversion: either a value or a failure."""
    value: Any = None
    error: Optional[ConversionFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None
