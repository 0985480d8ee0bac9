"""XML format decoder for Transmute.

Turns a well-formed, single-root XML document into an Object using a fixed
policy applied to every element:

1. Attributes, if any, go under the reserved "@attributes" key as an Object
   of name -> String.
2. An element without child elements is its text content as a String
   (empty text gives "", never Null). When it also has attributes the text
   goes under the reserved "#text" key next to "@attributes".
3. Otherwise each distinct child tag maps to the decoded child, or to an
   Array of all occurrences in document order when the tag repeats.
4. The root element's tag name is discarded.

Text interleaved with child elements, comments and processing instructions
are dropped. Namespaces and DTDs are not interpreted: a namespaced tag or
attribute keeps the expanded ``{uri}local`` name ElementTree reports, so
``xml:lang`` becomes ``{http://www.w3.org/XML/1998/namespace}lang``. The XML
encoder rejects such keys as invalid names, so documents using namespaces
(including the built-in ``xml:`` prefix) cannot be re-encoded as XML.
"""

from __future__ import annotations

import re
from xml.etree import ElementTree

from transmute.config.models import ConversionConfig
from transmute.core.exceptions import ParseError
from transmute.core.models import (
    ATTRIBUTES_KEY,
    TEXT_KEY,
    Array,
    Object,
    String,
    Value,
    check_depth,
    nesting_error,
)
from transmute.formats.registry import DataFormat, FormatRegistry

_POSITION_SUFFIX = re.compile(r": line \d+, column \d+$")


def _offset(text: str, line: int, column: int) -> int:
    """Character offset of a 1-based line and 0-based column."""
    lines = text.split("\n")
    return sum(len(part) + 1 for part in lines[: line - 1]) + column


def _attributes(element: ElementTree.Element) -> Object:
    return Object({name: String(value) for name, value in element.attrib.items()})


def _element_to_value(element: ElementTree.Element, max_depth: int, depth: int) -> Value:
    check_depth(depth, max_depth)
    children = list(element)

    if not children:
        text = String(element.text or "")
        if not element.attrib:
            return text
        return Object({ATTRIBUTES_KEY: _attributes(element), TEXT_KEY: text})

    result = Object()
    if element.attrib:
        result[ATTRIBUTES_KEY] = _attributes(element)

    for child in children:
        value = _element_to_value(child, max_depth, depth + 1)
        existing = result.get(child.tag)
        if existing is None:
            result[child.tag] = value
        elif isinstance(existing, Array):
            # Elements never decode to arrays, so an Array here means the tag repeated
            existing.append(value)
        else:
            result[child.tag] = Array([existing, value])

    return result


@FormatRegistry.register_decoder(DataFormat.XML)
class XMLDecoder:
    """Decoder for XML documents."""

    @property
    def format_name(self) -> str:
        return DataFormat.XML.value

    @classmethod
    def can_decode(cls, text: str) -> bool:
        """XML documents start with a tag or declaration."""
        return text.lstrip().startswith("<")

    def decode(self, text: str, config: ConversionConfig | None = None) -> Value:
        """Parse XML text into a Canonical Value.

        Args:
            text: XML document.
            config: Conversion settings (depth limit).

        Returns:
            The decoded root element.

        Raises:
            ParseError: If the document is not well-formed.
            StructuralError: If elements nest deeper than allowed.
        """
        config = config or ConversionConfig()

        try:
            root = ElementTree.fromstring(text)
        except ElementTree.ParseError as e:
            line, column = e.position
            reason = _POSITION_SUFFIX.sub("", str(e))
            raise ParseError(
                self.format_name,
                reason,
                position=_offset(text, line, column),
                line=line,
                column=column + 1,
            ) from e
        except RecursionError as e:
            raise nesting_error(config.max_depth) from e

        try:
            return _element_to_value(root, config.max_depth, 1)
        except RecursionError as e:
            raise nesting_error(config.max_depth) from e
