"""Core domain models for Transmute.

This module defines the Canonical Value, the format-agnostic tree that every
decoder produces and every encoder consumes. A value is one of six cases:

    Null, Bool, Number, String, Array, Object

Numbers are always stored as ``float``; integer and fractional literals
collapse into one numeric kind. Objects keep insertion order, and two objects
holding the same pairs in a different order compare unequal.

Example:
    >>> doc = Object({"name": String("ada"), "tags": Array([Number(1)])})
    >>> to_native(doc)
    {'name': 'ada', 'tags': [1]}
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from transmute.core.exceptions import StructuralError

T = TypeVar("T")

DEFAULT_MAX_DEPTH = 128

# Reserved keys understood by the XML codec only
ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "#text"


class Value:
    """Base class for all Canonical Value cases."""

    __slots__ = ()

    def accept(self, visitor: ValueVisitor[T]) -> T:
        raise NotImplementedError

    @property
    def is_scalar(self) -> bool:
        return not isinstance(self, (Array, Object))


@dataclass(frozen=True)
class Null(Value):
    """The absence of a value (JSON ``null``)."""

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_null(self)


@dataclass(frozen=True)
class Bool(Value):
    """A boolean value."""

    value: bool

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_bool(self)


@dataclass(frozen=True)
class Number(Value):
    """A numeric value, always held as a 64-bit float."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_number(self)


@dataclass(frozen=True)
class String(Value):
    """A text value."""

    value: str

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_string(self)


@dataclass(eq=False)
class Array(Value):
    """An ordered sequence of values.

    Attributes:
        items: Member values in document order.
    """

    items: list[Value] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = list(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.items == other.items

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def append(self, item: Value) -> None:
        self.items.append(item)

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_array(self)


@dataclass(eq=False)
class Object(Value):
    """An insertion-ordered mapping from string keys to values.

    Equality is order-sensitive: re-serialization preserves member order,
    so objects with the same pairs in different orders are different
    artifacts.

    Attributes:
        members: Key/value pairs in insertion order.
    """

    members: dict[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.members = dict(self.members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return list(self.members.items()) == list(other.members.items())

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __setitem__(self, key: str, value: Value) -> None:
        self.members[key] = value

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self.members.get(key, default)

    def keys(self):
        return self.members.keys()

    def items(self):
        return self.members.items()

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_object(self)


NULL = Null()


class ValueVisitor(Generic[T]):
    """Tree-walk interface over the Canonical Value cases.

    Subclasses override one method per case; ``Value.accept`` dispatches.
    Container methods are responsible for visiting their children.
    """

    def visit_null(self, value: Null) -> T:
        raise NotImplementedError

    def visit_bool(self, value: Bool) -> T:
        raise NotImplementedError

    def visit_number(self, value: Number) -> T:
        raise NotImplementedError

    def visit_string(self, value: String) -> T:
        raise NotImplementedError

    def visit_array(self, value: Array) -> T:
        raise NotImplementedError

    def visit_object(self, value: Object) -> T:
        raise NotImplementedError


def nesting_error(max_depth: int) -> StructuralError:
    """The error reported for documents nested deeper than ``max_depth``.

    Also raised when the interpreter runs out of stack before reaching it.
    """
    return StructuralError(f"document too deeply nested (max depth {max_depth})")


def check_depth(depth: int, max_depth: int) -> None:
    """Raise StructuralError when ``depth`` exceeds ``max_depth``."""
    if depth > max_depth:
        raise nesting_error(max_depth)


def format_number(number: float) -> str:
    """Render a number the way every text format in Transmute spells it.

    Integral values below 1e21 drop the fractional part (``7`` rather than
    ``7.0``); everything else uses the shortest round-tripping repr.

    Raises:
        StructuralError: For NaN and infinities.
    """
    if not math.isfinite(number):
        raise StructuralError(f"cannot represent non-finite number: {number!r}")
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def scalar_text(value: Value) -> str:
    """Text form of a scalar value for element bodies and table cells."""
    if isinstance(value, Null):
        return ""
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, String):
        return value.value
    raise StructuralError(f"expected a scalar value, got {type(value).__name__}")


class _NativeBuilder(ValueVisitor[Any]):
    """Visitor that lowers a Value tree into plain Python data."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        self._depth = 0

    def visit_null(self, value: Null) -> None:
        return None

    def visit_bool(self, value: Bool) -> bool:
        return value.value

    def visit_number(self, value: Number) -> int | float:
        number = value.value
        format_number(number)  # rejects NaN and infinities
        if number.is_integer() and abs(number) < 1e21:
            return int(number)
        return number

    def visit_string(self, value: String) -> str:
        return value.value

    def visit_array(self, value: Array) -> list[Any]:
        self._enter()
        try:
            return [item.accept(self) for item in value.items]
        finally:
            self._depth -= 1

    def visit_object(self, value: Object) -> dict[str, Any]:
        self._enter()
        try:
            return {key: member.accept(self) for key, member in value.members.items()}
        finally:
            self._depth -= 1

    def _enter(self) -> None:
        self._depth += 1
        check_depth(self._depth, self.max_depth)


def to_native(value: Value, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Convert a Value into plain Python data (dict, list, str, int, float, bool, None).

    Args:
        value: Value to convert.
        max_depth: Maximum container nesting allowed.

    Returns:
        The equivalent Python object.

    Raises:
        StructuralError: If the tree is nested deeper than ``max_depth``
            or holds a non-finite number.
    """
    try:
        return value.accept(_NativeBuilder(max_depth))
    except RecursionError as e:
        raise nesting_error(max_depth) from e


def from_native(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Convert plain Python data into a Value.

    Args:
        obj: None, bool, int, float, str, list/tuple or a mapping with
            string keys.
        max_depth: Maximum container nesting allowed.

    Returns:
        The equivalent Value tree.

    Raises:
        StructuralError: On unsupported types, non-string keys, or nesting
            beyond ``max_depth``.
    """
    try:
        return _from_native(obj, max_depth, 0)
    except RecursionError as e:
        raise nesting_error(max_depth) from e


def _from_native(obj: Any, max_depth: int, depth: int) -> Value:
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, str):
        return String(obj)

    check_depth(depth + 1, max_depth)
    if isinstance(obj, (list, tuple)):
        return Array([_from_native(item, max_depth, depth + 1) for item in obj])
    if isinstance(obj, Mapping):
        members: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise StructuralError(f"object keys must be strings, got {type(key).__name__}")
            members[key] = _from_native(item, max_depth, depth + 1)
        return Object(members)

    raise StructuralError(f"unsupported value type: {type(obj).__name__}")
