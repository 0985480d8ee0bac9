"""Main converter facade for Transmute.

Provides the high-level conversion API that orchestrates decoder lookup,
decoding, encoder lookup and encoding. Every call is independent: the
converter holds only its immutable configuration, so one instance can be
shared across threads.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from transmute.config.models import ConversionConfig
from transmute.core.exceptions import ConversionError
from transmute.core.models import Value
from transmute.formats.registry import DataFormat, FormatRegistry

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        valid: True if the text decoded successfully.
        format: Format the text was checked against.
        error: The decoding error when invalid.
    """

    valid: bool
    format: str
    error: ConversionError | None = None

    @property
    def message(self) -> str:
        """Human-readable outcome, suitable for showing to a user."""
        if self.valid:
            return f"Valid {self.format.upper()}"
        if self.error is None:
            return f"Invalid {self.format.upper()}"
        return self.error.message


class Converter:
    """Converts text between JSON, XML, CSV and YAML.

    Example:
        >>> converter = Converter(ConversionConfig(pretty_print=False))
        >>> converter.convert("a,b\\n1,2", "csv", "json")
        '[{"a":"1","b":"2"}]'
    """

    def __init__(self, config: ConversionConfig | None = None):
        """Initialize converter.

        Args:
            config: Conversion configuration.
        """
        self.config = config or ConversionConfig()

    def _settings(self, pretty_print: bool | None) -> ConversionConfig:
        if pretty_print is None or pretty_print == self.config.pretty_print:
            return self.config
        return dataclasses.replace(self.config, pretty_print=pretty_print)

    def decode(self, text: str, source_format: DataFormat | str) -> Value:
        """Decode text into a Canonical Value.

        Args:
            text: Raw input text.
            source_format: Format of the text.

        Returns:
            The decoded value.

        Raises:
            UnsupportedFormatError: If the format is unknown.
            ParseError: If the text is malformed.
            StructuralError: If the document nests too deeply.
        """
        decoder = FormatRegistry.get_decoder(source_format)
        return decoder.decode(text, self.config)

    def encode(
        self,
        value: Value,
        target_format: DataFormat | str,
        pretty_print: bool | None = None,
    ) -> str:
        """Encode a Canonical Value as text.

        Args:
            value: Value to render.
            target_format: Output format.
            pretty_print: Override the configured pretty printing.

        Returns:
            The encoded text.

        Raises:
            UnsupportedFormatError: If the format is unknown.
            StructuralError: If the value has the wrong shape for the format.
        """
        encoder = FormatRegistry.get_encoder(target_format)
        return encoder.encode(value, self._settings(pretty_print))

    def convert(
        self,
        text: str,
        source_format: DataFormat | str,
        target_format: DataFormat | str,
        pretty_print: bool | None = None,
    ) -> str:
        """Convert text from one format to another.

        Both formats are resolved before anything is decoded, and a failure
        at any stage propagates unchanged; no partial output is produced.
        Converting a format to itself runs the full decode and encode as a
        normalization pass.

        Args:
            text: Raw input text.
            source_format: Format of the input.
            target_format: Format of the output.
            pretty_print: Override the configured pretty printing.

        Returns:
            The converted text.

        Raises:
            ConversionError: ParseError, StructuralError or
                UnsupportedFormatError from the failing stage.
        """
        decoder = FormatRegistry.get_decoder(source_format)
        encoder = FormatRegistry.get_encoder(target_format)
        settings = self._settings(pretty_print)

        logger.debug(
            "Converting %d characters from %s to %s",
            len(text),
            decoder.format_name,
            encoder.format_name,
        )
        value = decoder.decode(text, settings)
        output = encoder.encode(value, settings)
        logger.debug("Produced %d characters of %s", len(output), encoder.format_name)
        return output

    def validate(self, text: str, format: DataFormat | str) -> ValidationResult:
        """Check whether text is valid in the given format.

        Runs only the decoder and discards the decoded value.

        Args:
            text: Raw input text.
            format: Format to validate against.

        Returns:
            ValidationResult carrying the error when invalid.
        """
        format_name = format.value if isinstance(format, DataFormat) else str(format)
        try:
            decoder = FormatRegistry.get_decoder(format)
            format_name = decoder.format_name
            decoder.decode(text, self.config)
        except ConversionError as e:
            logger.debug("Validation of %s input failed: %s", format_name, e.message)
            return ValidationResult(valid=False, format=format_name, error=e)

        return ValidationResult(valid=True, format=format_name)


def convert(
    text: str,
    source_format: DataFormat | str,
    target_format: DataFormat | str,
    pretty_print: bool = True,
    max_depth: int | None = None,
) -> str:
    """Convenience function to convert text between formats.

    Args:
        text: Raw input text.
        source_format: Format of the input.
        target_format: Format of the output.
        pretty_print: Indent JSON and XML output.
        max_depth: Override the nesting limit.

    Returns:
        The converted text.
    """
    config = ConversionConfig(pretty_print=pretty_print)
    if max_depth is not None:
        config = ConversionConfig(pretty_print=pretty_print, max_depth=max_depth)
    return Converter(config).convert(text, source_format, target_format)


def validate(text: str, format: DataFormat | str) -> ValidationResult:
    """Convenience function to validate text against a format.

    Args:
        text: Raw input text.
        format: Format to validate against.

    Returns:
        ValidationResult for the text.
    """
    return Converter().validate(text, format)
