"""Conversion module for Transmute.

Provides the conversion service that decodes text into the Canonical Value
and encodes it into another format.
"""

from transmute.config.models import ConversionConfig
from transmute.convert.converter import (
    Converter,
    ValidationResult,
    convert,
    validate,
)

__all__ = ["Converter", "ConversionConfig", "ValidationResult", "convert", "validate"]
