"""CSV format decoder for Transmute.

The first line is the header row; every later non-empty line is a record
mapped positionally onto the headers. Fields are split on every comma, even
inside quotes, then trimmed and stripped of all double quotes. Short rows
are padded with empty strings and long rows are truncated.
"""

from __future__ import annotations

from transmute.config.models import ConversionConfig
from transmute.core.exceptions import ParseError
from transmute.core.models import Array, Object, String, Value, check_depth
from transmute.formats.registry import DataFormat, FormatRegistry


def _split(line: str) -> list[str]:
    return [cell.strip().replace('"', "") for cell in line.split(",")]


@FormatRegistry.register_decoder(DataFormat.CSV)
class CSVDecoder:
    """Decoder for comma-separated tables with a header row."""

    @property
    def format_name(self) -> str:
        return DataFormat.CSV.value

    @classmethod
    def can_decode(cls, text: str) -> bool:
        """A CSV header line holds at least one comma."""
        stripped = text.strip()
        return bool(stripped) and "," in stripped.split("\n", 1)[0]

    def decode(self, text: str, config: ConversionConfig | None = None) -> Value:
        """Parse CSV text into an Array of row Objects.

        Args:
            text: CSV document with a header row.
            config: Conversion settings (depth limit).

        Returns:
            Array of Objects whose values are all Strings.

        Raises:
            ParseError: If there is no header row.
        """
        config = config or ConversionConfig()

        lines = text.strip().split("\n")
        if not lines[0].strip():
            raise ParseError(self.format_name, "missing header row", position=0, line=1, column=1)

        headers = _split(lines[0])
        rows = Array()

        for line in lines[1:]:
            if not line.strip():
                continue
            cells = _split(line)
            row = Object()
            for index, header in enumerate(headers):
                row[header] = String(cells[index] if index < len(cells) else "")
            rows.append(row)

        check_depth(2 if rows else 1, config.max_depth)
        return rows
