"""Transmute - convert structured text between JSON, XML, CSV and YAML.

Every format is decoded into one Canonical Value tree and encoded back out
of it, so any format can be converted into any other. Conversions are pure,
in-memory and stateless; a call either returns the full output or raises.

Key Characteristics:
- Ordered, format-agnostic value model
- Fixed, documented policies for XML attributes, repeated tags and CSV rows
- Bounded nesting depth instead of unbounded recursion

Example:
    >>> import transmute
    >>> transmute.convert('{"item": ["a", "b"]}', "json", "xml", pretty_print=False)
    '<?xml version="1.0" encoding="UTF-8"?><root><item>a</item><item>b</item></root>'

    >>> transmute.validate("a: 1", "yaml").valid
    True
"""

from transmute.config.models import ConversionConfig
from transmute.convert.converter import (
    Converter,
    ValidationResult,
    convert,
    validate,
)
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
from transmute.formats.registry import DataFormat, FormatRegistry

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core models
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
    # Exceptions
    "ConversionError",
    "FormatDetectionError",
    "ParseError",
    "StructuralError",
    "TransmuteError",
    "UnsupportedFormatError",
    # Registry
    "DataFormat",
    "FormatRegistry",
    # Converter
    "Converter",
    "ConversionConfig",
    "ValidationResult",
    # Module-level functions
    "convert",
    "validate",
]
