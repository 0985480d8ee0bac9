"""Custom exceptions for Transmute.

All Transmute-specific exceptions inherit from TransmuteError, allowing users
to catch all Transmute errors with a single except clause if desired.

The conversion taxonomy (ParseError, UnsupportedFormatError, StructuralError)
derives from ConversionError, whose ``message`` is meant to be shown to the
end user verbatim.
"""

from __future__ import annotations


class TransmuteError(Exception):
    """Base exception for all Transmute errors."""

    pass


class ConversionError(TransmuteError):
    """Base class for errors raised by a convert or validate call.

    Attributes:
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParseError(ConversionError):
    """Raised when input text does not conform to its format's grammar.

    Attributes:
        format_name: Format that was being decoded.
        reason: Specific reason reported by the decoder.
        position: Character offset of the failure, if known.
        line: 1-based line of the failure, if known.
        column: 1-based column of the failure, if known.
    """

    def __init__(
        self,
        format_name: str,
        reason: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.format_name = format_name
        self.reason = reason
        self.position = position
        self.line = line
        self.column = column

        message = f"Invalid {format_name.upper()}: {reason}"
        if line is not None and column is not None:
            message += f" (line {line}, column {column})"
        elif position is not None:
            message += f" (position {position})"

        super().__init__(message)


class UnsupportedFormatError(ConversionError):
    """Raised when a format is not supported.

    Attributes:
        format_name: The unsupported format identifier.
        available_formats: List of available format names.
    """

    def __init__(
        self,
        format_name: str,
        available_formats: list[str] | None = None,
        message: str | None = None,
    ):
        self.format_name = format_name
        self.available_formats = available_formats or []

        if message:
            super().__init__(message)
        elif available_formats:
            super().__init__(
                f"Unsupported format: '{format_name}'. "
                f"Available formats: {', '.join(available_formats)}"
            )
        else:
            super().__init__(f"Unsupported format: '{format_name}'")


class StructuralError(ConversionError):
    """Raised when a value is well-formed but has the wrong shape.

    Covers values a target encoder cannot represent (CSV-encoding a
    non-array, XML-encoding a non-object) and documents nested deeper
    than the configured limit.
    """


class FormatDetectionError(TransmuteError):
    """Raised when the format of some input cannot be detected.

    Attributes:
        source: Description of the input that was inspected.
    """

    def __init__(self, source: str, message: str | None = None):
        self.source = source

        if message:
            super().__init__(message)
        else:
            super().__init__(f"Could not detect format for: {source}")
