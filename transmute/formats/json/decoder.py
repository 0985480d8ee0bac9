"""JSON format decoder for Transmute.

Parses standard JSON with the standard library and maps it one-to-one onto
the Canonical Value cases. Non-standard constants (NaN, Infinity) and
numbers outside the float64 range are rejected.
"""

from __future__ import annotations

import json
import math
import re

from transmute.config.models import ConversionConfig
from transmute.core.exceptions import ParseError
from transmute.core.models import Value, from_native, nesting_error
from transmute.formats.registry import DataFormat, FormatRegistry

# Either a string literal (skipped) or a bare literal we may have rejected
_TOKEN_RE = re.compile(
    r'"(?:[^"\\]|\\.)*"|(-?(?:NaN|Infinity)|-?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)'
)


class _InvalidLiteral(Exception):
    """Raised from json hooks; carries the offending literal text."""

    def __init__(self, literal: str, reason: str):
        self.literal = literal
        self.reason = reason
        super().__init__(reason)


def _reject_constant(name: str) -> float:
    raise _InvalidLiteral(name, f"non-standard constant '{name}'")


def _parse_number(literal: str) -> float:
    number = float(literal)
    if not math.isfinite(number):
        raise _InvalidLiteral(literal, f"number out of range '{literal}'")
    return number


def _locate(text: str, literal: str) -> int | None:
    """Offset of the first bare (non-string) occurrence of ``literal``."""
    for match in _TOKEN_RE.finditer(text):
        if match.group(1) == literal:
            return match.start(1)
    return None


def _line_col(text: str, position: int) -> tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


@FormatRegistry.register_decoder(DataFormat.JSON)
class JSONDecoder:
    """Decoder for JSON documents."""

    @property
    def format_name(self) -> str:
        return DataFormat.JSON.value

    @classmethod
    def can_decode(cls, text: str) -> bool:
        """JSON is recognised only if the whole text parses."""
        stripped = text.strip()
        if not stripped or stripped[0] not in '{["-0123456789tfn':
            return False
        try:
            json.loads(stripped)
        except (ValueError, RecursionError):
            return False
        return True

    def decode(self, text: str, config: ConversionConfig | None = None) -> Value:
        """Parse JSON text into a Canonical Value.

        Args:
            text: JSON document.
            config: Conversion settings (depth limit).

        Returns:
            Decoded value.

        Raises:
            ParseError: On any syntax violation, with offset, line and column.
            StructuralError: If the document is nested deeper than allowed.
        """
        config = config or ConversionConfig()

        try:
            data = json.loads(
                text,
                parse_constant=_reject_constant,
                parse_float=_parse_number,
                parse_int=_parse_number,
            )
        except json.JSONDecodeError as e:
            raise ParseError(
                self.format_name, e.msg, position=e.pos, line=e.lineno, column=e.colno
            ) from e
        except _InvalidLiteral as e:
            position = _locate(text, e.literal)
            line, column = _line_col(text, position) if position is not None else (None, None)
            raise ParseError(
                self.format_name, e.reason, position=position, line=line, column=column
            ) from e
        except RecursionError as e:
            raise nesting_error(config.max_depth) from e

        return from_native(data, config.max_depth)
