"""JSON format encoder for Transmute."""

from __future__ import annotations

import json

from transmute.config.models import ConversionConfig
from transmute.core.models import Value, nesting_error, to_native
from transmute.formats.registry import DataFormat, FormatRegistry


@FormatRegistry.register_encoder(DataFormat.JSON)
class JSONEncoder:
    """Encoder for JSON documents.

    Pretty output uses two-space indentation with one member per line;
    compact output has no insignificant whitespace at all.
    """

    @property
    def format_name(self) -> str:
        return DataFormat.JSON.value

    def encode(self, value: Value, config: ConversionConfig | None = None) -> str:
        """Render a value as JSON.

        Args:
            value: Value to render.
            config: Conversion settings.

        Returns:
            JSON text.

        Raises:
            StructuralError: On non-finite numbers or excessive nesting.
        """
        config = config or ConversionConfig()
        data = to_native(value, config.max_depth)

        try:
            if config.pretty_print:
                return json.dumps(data, indent=2, ensure_ascii=False)
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        except RecursionError as e:
            raise nesting_error(config.max_depth) from e
