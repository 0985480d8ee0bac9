"""CSV format encoder for Transmute."""

from __future__ import annotations

import csv
import io
import json

from transmute.config.models import ConversionConfig
from transmute.core.exceptions import StructuralError
from transmute.core.models import Array, Object, Value, check_depth, scalar_text, to_native
from transmute.formats.registry import DataFormat, FormatRegistry


def _cell(value: Value | None, max_depth: int) -> str:
    if value is None:
        return ""
    if value.is_scalar:
        return scalar_text(value)
    # Nested containers are flattened to compact JSON text
    return json.dumps(to_native(value, max_depth), separators=(",", ":"), ensure_ascii=False)


@FormatRegistry.register_encoder(DataFormat.CSV)
class CSVEncoder:
    """Encoder for comma-separated tables.

    The header row comes from the keys of the first row only: later rows
    missing a key get an empty cell, and keys the first row lacks are
    dropped. Every cell is double-quoted. Pretty printing has no effect.
    """

    @property
    def format_name(self) -> str:
        return DataFormat.CSV.value

    def encode(self, value: Value, config: ConversionConfig | None = None) -> str:
        """Render an Array of Objects as CSV.

        Args:
            value: Array whose items are all Objects.
            config: Conversion settings (depth limit for nested cells).

        Returns:
            CSV text without a trailing newline; empty for an empty Array.

        Raises:
            StructuralError: If the value is not an Array of Objects.
        """
        config = config or ConversionConfig()

        if not isinstance(value, Array):
            raise StructuralError(
                f"CSV output requires an array of objects, got {type(value).__name__}"
            )
        for index, item in enumerate(value):
            if not isinstance(item, Object):
                raise StructuralError(
                    f"CSV output requires an array of objects; item {index} is "
                    f"{type(item).__name__}"
                )
        if not value:
            return ""

        check_depth(2, config.max_depth)
        headers = list(value[0].keys())
        cell_depth = config.max_depth - 2

        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(headers)
        for row in value:
            writer.writerow([_cell(row.get(header), cell_depth) for header in headers])

        return buffer.getvalue().removesuffix("\n")
