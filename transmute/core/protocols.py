"""Protocol interfaces for Transmute.

This module defines the abstract interfaces (protocols) that format codecs
must satisfy. Using protocols allows for type-safe duck typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from transmute.config.models import ConversionConfig
    from transmute.core.models import Value


@runtime_checkable
class FormatDecoder(Protocol):
    """Strategy interface for decoding one text format.

    Decoders are responsible for:
    - Sniffing whether a piece of text looks like their format
    - Turning text into a Canonical Value or raising ParseError
    """

    @property
    def format_name(self) -> str:
        """Return identifier like 'json', 'xml'."""
        ...

    @classmethod
    def can_decode(cls, text: str) -> bool:
        """Check cheaply whether the text looks like this format.

        Args:
            text: Raw input text.

        Returns:
            True if this decoder is likely to accept the text.
        """
        ...

    def decode(self, text: str, config: ConversionConfig | None = None) -> Value:
        """Parse text into a Canonical Value.

        Args:
            text: Raw input text.
            config: Conversion settings (depth limit).

        Returns:
            The decoded value.

        Raises:
            ParseError: If the text is malformed.
            StructuralError: If the document is nested too deeply.
        """
        ...


@runtime_checkable
class FormatEncoder(Protocol):
    """Strategy interface for encoding one text format.

    Encoders are responsible for:
    - Checking the value has a shape the format can carry
    - Rendering it, pretty-printed or compact
    """

    @property
    def format_name(self) -> str:
        """Return identifier like 'csv', 'yaml'."""
        ...

    def encode(self, value: Value, config: ConversionConfig | None = None) -> str:
        """Render a Canonical Value as text.

        Args:
            value: Value to render.
            config: Conversion settings (pretty printing, depth limit).

        Returns:
            The encoded text.

        Raises:
            StructuralError: If the value cannot be represented.
        """
        ...
