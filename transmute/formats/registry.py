"""Format registry for Transmute.

The registry provides a plugin pattern for format decoders and encoders.
Codecs register themselves using decorators, and the registry handles
format lookup, detection and instantiation.

The set of formats is closed: every codec is registered against a
``DataFormat`` member, and ``FormatRegistry.missing()`` reports members
that lack a decoder or encoder.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from transmute.core.exceptions import FormatDetectionError, UnsupportedFormatError

if TYPE_CHECKING:
    from transmute.core.protocols import FormatDecoder, FormatEncoder

logger = logging.getLogger(__name__)


class DataFormat(str, Enum):
    """Text formats Transmute converts between."""

    JSON = "json"
    XML = "xml"
    CSV = "csv"
    YAML = "yaml"

    @classmethod
    def parse(cls, name: DataFormat | str) -> DataFormat:
        """Resolve a format selector, case-insensitively.

        Raises:
            UnsupportedFormatError: If the name is not a known format.
        """
        if isinstance(name, DataFormat):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnsupportedFormatError(
                str(name),
                available_formats=[member.value for member in cls],
            ) from None


# File extensions recognised when reading from disk
_EXTENSIONS: dict[str, DataFormat] = {
    ".json": DataFormat.JSON,
    ".xml": DataFormat.XML,
    ".csv": DataFormat.CSV,
    ".yaml": DataFormat.YAML,
    ".yml": DataFormat.YAML,
}


class FormatRegistry:
    """Central registry for format decoders and encoders.

    Formats register themselves using class decorators:

        @FormatRegistry.register_decoder(DataFormat.JSON)
        class JSONDecoder:
            ...

    Usage:
        decoder = FormatRegistry.get_decoder("json")
        encoder = FormatRegistry.get_encoder(DataFormat.XML)
        detected = FormatRegistry.detect_format(text)
    """

    _decoders: dict[DataFormat, type[FormatDecoder]] = {}
    _encoders: dict[DataFormat, type[FormatEncoder]] = {}

    @classmethod
    def register_decoder(cls, data_format: DataFormat):
        """Decorator to register a decoder class.

        Args:
            data_format: Format the decoder handles.

        Returns:
            Decorator function.
        """

        def decorator(decoder_cls: type[FormatDecoder]) -> type[FormatDecoder]:
            cls._decoders[data_format] = decoder_cls
            return decoder_cls

        return decorator

    @classmethod
    def register_encoder(cls, data_format: DataFormat):
        """Decorator to register an encoder class.

        Args:
            data_format: Format the encoder handles.

        Returns:
            Decorator function.
        """

        def decorator(encoder_cls: type[FormatEncoder]) -> type[FormatEncoder]:
            cls._encoders[data_format] = encoder_cls
            return encoder_cls

        return decorator

    @classmethod
    def get_decoder(cls, format_name: DataFormat | str) -> FormatDecoder:
        """Get an instantiated decoder for the specified format.

        Args:
            format_name: Format member or identifier.

        Returns:
            Instantiated FormatDecoder.

        Raises:
            UnsupportedFormatError: If no decoder registered for format.
        """
        data_format = DataFormat.parse(format_name)
        if data_format not in cls._decoders:
            raise UnsupportedFormatError(
                data_format.value,
                available_formats=[f.value for f in cls._decoders],
            )
        return cls._decoders[data_format]()

    @classmethod
    def get_encoder(cls, format_name: DataFormat | str) -> FormatEncoder:
        """Get an instantiated encoder for the specified format.

        Args:
            format_name: Format member or identifier.

        Returns:
            Instantiated FormatEncoder.

        Raises:
            UnsupportedFormatError: If no encoder registered for format.
        """
        data_format = DataFormat.parse(format_name)
        if data_format not in cls._encoders:
            raise UnsupportedFormatError(
                data_format.value,
                available_formats=[f.value for f in cls._encoders],
            )
        return cls._encoders[data_format]()

    # Priority order for content sniffing (stricter formats first)
    _detection_priority: list[DataFormat] = [
        DataFormat.JSON,
        DataFormat.XML,
        DataFormat.YAML,
        DataFormat.CSV,
    ]

    @classmethod
    def detect_format(cls, text: str) -> DataFormat:
        """Try each decoder's can_decode() to detect the format of some text.

        Formats are checked in priority order (stricter first).

        Args:
            text: Raw input text.

        Returns:
            Detected format.

        Raises:
            FormatDetectionError: If no decoder recognises the text.
        """
        for data_format in cls._detection_priority:
            decoder_cls = cls._decoders.get(data_format)
            if decoder_cls is not None and decoder_cls.can_decode(text):
                logger.debug("Detected %s input", data_format.value)
                return data_format

        preview = text.strip()[:40]
        raise FormatDetectionError(repr(preview) if preview else "empty input")

    @classmethod
    def format_for_path(cls, path: Path | str) -> DataFormat | None:
        """Map a file extension to a format, or None if unrecognised."""
        return _EXTENSIONS.get(Path(path).suffix.lower())

    @classmethod
    def extensions_for(cls, data_format: DataFormat) -> list[str]:
        """File extensions associated with a format."""
        return [ext for ext, fmt in _EXTENSIONS.items() if fmt is data_format]

    @classmethod
    def list_formats(cls) -> dict[str, dict[str, bool]]:
        """List available formats and their capabilities.

        Returns:
            Dictionary mapping format names to capability dicts.

        Example:
            {
                "json": {"can_decode": True, "can_encode": True},
                "xml": {"can_decode": True, "can_encode": True},
            }
        """
        return {
            data_format.value: {
                "can_decode": data_format in cls._decoders,
                "can_encode": data_format in cls._encoders,
            }
            for data_format in DataFormat
        }

    @classmethod
    def missing(cls) -> list[str]:
        """Return a description of every format lacking a decoder or encoder."""
        gaps = []
        for data_format in DataFormat:
            if data_format not in cls._decoders:
                gaps.append(f"{data_format.value}: decoder")
            if data_format not in cls._encoders:
                gaps.append(f"{data_format.value}: encoder")
        return gaps

    @classmethod
    def has_decoder(cls, format_name: DataFormat | str) -> bool:
        """Check if a decoder is registered for the format."""
        try:
            return DataFormat.parse(format_name) in cls._decoders
        except UnsupportedFormatError:
            return False

    @classmethod
    def has_encoder(cls, format_name: DataFormat | str) -> bool:
        """Check if an encoder is registered for the format."""
        try:
            return DataFormat.parse(format_name) in cls._encoders
        except UnsupportedFormatError:
            return False
