"""YAML format decoder for Transmute (minimal subset).

Only a flat mapping of ``key: value`` pairs is decoded. The text is composed
into a PyYAML node graph without implicit typing, then checked:

- an empty document decodes to an empty Object;
- the root must be a mapping and every key and value a scalar, so
  indentation-based nesting, sequences and flow collections are rejected;
- unquoted scalars that look like decimal numbers become Numbers, all other
  scalars (including ``true`` and ``null``) stay Strings.

The YAML encoder can emit nested documents this decoder refuses; the two are
deliberately not inverses.
"""

from __future__ import annotations

import math
import re

import yaml

from transmute.config.models import ConversionConfig
from transmute.core.exceptions import ConversionError, ParseError
from transmute.core.models import Number, Object, String, Value, check_depth, nesting_error
from transmute.formats.registry import DataFormat, FormatRegistry

NUMBER_RE = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


def _coerce(node: yaml.ScalarNode) -> Value:
    if node.style is None and NUMBER_RE.fullmatch(node.value):
        number = float(node.value)
        if math.isfinite(number):
            return Number(number)
    return String(node.value)


@FormatRegistry.register_decoder(DataFormat.YAML)
class YAMLDecoder:
    """Decoder for flat YAML mappings."""

    @property
    def format_name(self) -> str:
        return DataFormat.YAML.value

    @classmethod
    def can_decode(cls, text: str) -> bool:
        """Recognised only if the text is a flat mapping this decoder accepts."""
        if not text.strip():
            return False
        try:
            cls().decode(text)
        except ConversionError:
            return False
        return True

    def _error(self, reason: str, mark: yaml.Mark | None) -> ParseError:
        if mark is None:
            return ParseError(self.format_name, reason)
        return ParseError(
            self.format_name,
            reason,
            position=mark.index,
            line=mark.line + 1,
            column=mark.column + 1,
        )

    def decode(self, text: str, config: ConversionConfig | None = None) -> Value:
        """Parse a flat YAML mapping into an Object.

        Args:
            text: YAML document.
            config: Conversion settings (depth limit).

        Returns:
            Object of Number and String values.

        Raises:
            ParseError: On YAML syntax errors, multiple documents, a non-mapping
                root, or any nested value.
        """
        config = config or ConversionConfig()

        try:
            node = yaml.compose(text, Loader=yaml.BaseLoader)
        except yaml.MarkedYAMLError as e:
            raise self._error(e.problem or str(e), e.problem_mark or e.context_mark) from e
        except yaml.YAMLError as e:
            raise self._error(str(e), None) from e
        except RecursionError as e:
            raise nesting_error(config.max_depth) from e

        if node is None:
            return Object()
        if not isinstance(node, yaml.MappingNode):
            raise self._error("expected a mapping of 'key: value' pairs", node.start_mark)

        check_depth(1, config.max_depth)
        result = Object()
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise self._error("complex mapping keys are not supported", key_node.start_mark)
            if not isinstance(value_node, yaml.ScalarNode):
                raise self._error(
                    f"nested values are not supported (key '{key_node.value}')",
                    value_node.start_mark,
                )
            result[key_node.value] = _coerce(value_node)

        return result
