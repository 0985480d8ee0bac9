"""Core domain models and protocols for Transmute."""

from transmute.core.exceptions import (
    ConversionError,
    FormatDetectionError,
    ParseError,
    StructuralError,
    TransmuteError,
    UnsupportedFormatError,
)
from transmute.core.models import (
    NULL,
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    Value,
    ValueVisitor,
    from_native,
    to_native,
)
from transmute.core.protocols import FormatDecoder, FormatEncoder

__all__ = [
    # Models
    "NULL",
    "Array",
    "Bool",
    "Null",
    "Number",
    "Object",
    "String",
    "Value",
    "ValueVisitor",
    "from_native",
    "to_native",
    # Protocols
    "FormatDecoder",
    "FormatEncoder",
    # Exceptions
    "ConversionError",
    "FormatDetectionError",
    "ParseError",
    "StructuralError",
    "TransmuteError",
    "UnsupportedFormatError",
]
