"""XML format encoder for Transmute.

The inverse of the decoding policy. The value is wrapped in a synthetic
``<root>`` element after an XML declaration. For each key of an Object:

- an Array emits one sibling element per item, all named after the key;
- an Object recurses into a child element;
- a scalar becomes a leaf element holding its text form.

"@attributes" renders as attributes of the enclosing element and "#text"
as its text content.
"""

from __future__ import annotations

import re
from xml.etree import ElementTree

from transmute.config.models import ConversionConfig
from transmute.core.exceptions import StructuralError
from transmute.core.models import (
    ATTRIBUTES_KEY,
    TEXT_KEY,
    Array,
    Object,
    Value,
    check_depth,
    nesting_error,
    scalar_text,
)
from transmute.formats.registry import DataFormat, FormatRegistry

DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_NAME_RE = re.compile(r"[^\W\d][\w.\-]*")
_ILLEGAL_CHARS_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _kind(value: Value) -> str:
    return type(value).__name__


def _check_name(name: str, what: str) -> None:
    if not _NAME_RE.fullmatch(name):
        raise StructuralError(f"'{name}' is not a valid XML {what} name")


def _text(value: Value, context: str) -> str:
    if not value.is_scalar:
        raise StructuralError(f"{context} must be a scalar, got {_kind(value)}")
    text = scalar_text(value)
    if _ILLEGAL_CHARS_RE.search(text):
        raise StructuralError(f"{context} contains characters not allowed in XML")
    return text


def _set_attributes(element: ElementTree.Element, attributes: Value) -> None:
    if not isinstance(attributes, Object):
        raise StructuralError(f"'{ATTRIBUTES_KEY}' must be an object, got {_kind(attributes)}")
    for name, value in attributes.items():
        _check_name(name, "attribute")
        element.set(name, _text(value, f"attribute '{name}'"))


def _fill(element: ElementTree.Element, obj: Object, max_depth: int, depth: int) -> None:
    check_depth(depth, max_depth)

    for key, member in obj.items():
        if key == ATTRIBUTES_KEY:
            _set_attributes(element, member)
            continue
        if key == TEXT_KEY:
            element.text = _text(member, f"'{TEXT_KEY}'")
            continue

        _check_name(key, "element")
        if isinstance(member, Array):
            for item in member:
                if isinstance(item, Array):
                    raise StructuralError(
                        f"nested arrays under '{key}' cannot be represented in XML"
                    )
                _append(element, key, item, max_depth, depth)
        else:
            _append(element, key, member, max_depth, depth)


def _append(
    parent: ElementTree.Element,
    tag: str,
    member: Value,
    max_depth: int,
    depth: int,
) -> None:
    child = ElementTree.SubElement(parent, tag)
    if isinstance(member, Object):
        _fill(child, member, max_depth, depth + 1)
    else:
        child.text = _text(member, f"element '{tag}'")


@FormatRegistry.register_encoder(DataFormat.XML)
class XMLEncoder:
    """Encoder for XML documents."""

    @property
    def format_name(self) -> str:
        return DataFormat.XML.value

    def encode(self, value: Value, config: ConversionConfig | None = None) -> str:
        """Render an Object as an XML document.

        Args:
            value: Top-level Object.
            config: Conversion settings. Pretty output indents two spaces
                per level; compact output is a single line.

        Returns:
            XML text, starting with the XML declaration.

        Raises:
            StructuralError: If the value is not an Object, holds nested
                arrays or invalid names, or nests too deeply.
        """
        config = config or ConversionConfig()

        if not isinstance(value, Object):
            raise StructuralError(
                f"XML output requires an object at the top level, got {_kind(value)}"
            )

        root = ElementTree.Element("root")
        try:
            _fill(root, value, config.max_depth, 1)
            if config.pretty_print:
                ElementTree.indent(root, space="  ")
                return DECLARATION + "\n" + ElementTree.tostring(root, encoding="unicode")
            return DECLARATION + ElementTree.tostring(root, encoding="unicode")
        except RecursionError as e:
            raise nesting_error(config.max_depth) from e
