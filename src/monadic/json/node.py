"""Tagged, immutable representation of a parsed JSON document."""

from __future__ import annotations

import enum
import json
import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeAlias, cast

from ..errors import JSONTypeError

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = (
    JSONScalar | list["JSONValue"] | tuple["JSONValue", ...] | dict[str, "JSONValue"]
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class JSONType(enum.Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    UINTEGER = "uinteger"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


_NUMERIC_TYPES = frozenset({JSONType.INTEGER, JSONType.UINTEGER, JSONType.FLOAT})

# (key in parent, container, child iterator, children built so far)
_Frame: TypeAlias = tuple[
    "str | int",
    object,
    "Iterator[tuple[str | int, object]]",
    "list[tuple[str | int, JSONNode]]",
]


def _is_container(value: object) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def _child_items(value: object) -> Iterator[tuple[str | int, object]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise JSONTypeError(
                    f"JSON object keys must be strings, got {type(key).__name__}"
                )
            yield key, item
    else:
        yield from enumerate(value)  # type: ignore[call-overload]


@dataclass(frozen=True, eq=False, repr=False)
class JSONNode:
    """One node of a document tree.

    ``payload`` holds a Python scalar for scalar variants, a tuple of nodes
    for arrays, and a read-only ``str -> JSONNode`` mapping for objects. Use
    the typed accessors rather than reading ``payload`` directly; they raise
    ``JSONTypeError`` when the node is of another variant.

    Integer, unsigned and float nodes compare equal when their numeric values
    are equal; every other variant only equals itself.
    """

    type: JSONType
    payload: Any = None

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_python(cls, value: object) -> JSONNode:
        """Build a node tree from plain Python values.

        Integers beyond the signed and unsigned 64-bit ranges are stored as
        ``FLOAT``. Integers too large for a float, non-finite floats,
        non-string object keys and any other Python type raise
        ``JSONTypeError``. Containers are built from an explicit stack, so
        nesting depth is not bounded by the recursion limit.
        """

        if not _is_container(value):
            return cls._from_scalar(value)

        root: JSONNode | None = None
        stack: list[_Frame] = [(0, value, _child_items(value), [])]
        while stack:
            _, container, items, built = stack[-1]
            for key, item in items:
                if _is_container(item):
                    stack.append((key, item, _child_items(item), []))
                    break
                built.append((key, cls._from_scalar(item)))
            else:
                key, _, _, _ = stack.pop()
                if isinstance(container, Mapping):
                    node = cls(JSONType.OBJECT, MappingProxyType(dict(built)))
                else:
                    node = cls(JSONType.ARRAY, tuple(child for _, child in built))
                if stack:
                    stack[-1][3].append((key, node))
                else:
                    root = node
        return cast(JSONNode, root)

    @classmethod
    def _from_scalar(cls, value: object) -> JSONNode:
        if isinstance(value, JSONNode):
            return value
        if value is None:
            return cls(JSONType.NULL)
        if isinstance(value, bool):
            return cls(JSONType.BOOLEAN, value)
        if isinstance(value, int):
            if _INT64_MIN <= value <= _INT64_MAX:
                return cls(JSONType.INTEGER, value)
            if _INT64_MAX < value <= _UINT64_MAX:
                return cls(JSONType.UINTEGER, value)
            try:
                return cls(JSONType.FLOAT, float(value))
            except OverflowError as exc:
                raise JSONTypeError(
                    f"{value.bit_length()}-bit integer is too large for a float"
                ) from exc
        if isinstance(value, float):
            if not math.isfinite(value):
                raise JSONTypeError(f"non-finite float {value!r} is not valid JSON")
            return cls(JSONType.FLOAT, value)
        if isinstance(value, str):
            return cls(JSONType.STRING, value)
        raise JSONTypeError(f"cannot represent {type(value).__name__} as JSON")

    def to_python(self) -> JSONValue:
        """Return the plain Python equivalent (dicts, lists and scalars)."""

        if self.type not in (JSONType.ARRAY, JSONType.OBJECT):
            return self.payload

        root: list[JSONValue] | dict[str, JSONValue] = (
            [] if self.type is JSONType.ARRAY else {}
        )
        pending: list[tuple[JSONNode, list[JSONValue] | dict[str, JSONValue]]] = [
            (self, root)
        ]
        while pending:
            node, out = pending.pop()
            items = (
                node.payload.items()
                if node.type is JSONType.OBJECT
                else enumerate(node.payload)
            )
            for key, child in items:
                converted: JSONValue
                if child.type is JSONType.ARRAY:
                    converted = []
                    pending.append((child, converted))
                elif child.type is JSONType.OBJECT:
                    converted = {}
                    pending.append((child, converted))
                else:
                    converted = child.payload
                if isinstance(out, list):
                    out.append(converted)
                else:
                    out[key] = converted
        return root

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONNode):
            return NotImplemented
        pending: list[tuple[JSONNode, JSONNode]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left.type in _NUMERIC_TYPES and right.type in _NUMERIC_TYPES:
                if left.payload != right.payload:
                    return False
                continue
            if left.type is not right.type:
                return False
            if left.type is JSONType.ARRAY:
                if len(left.payload) != len(right.payload):
                    return False
                pending.extend(zip(left.payload, right.payload))
            elif left.type is JSONType.OBJECT:
                if left.payload.keys() != right.payload.keys():
                    return False
                pending.extend(
                    (item, right.payload[key]) for key, item in left.payload.items()
                )
            elif left.payload != right.payload:
                return False
        return True

    def dumps(self, *, indent: int | None = None, sort_keys: bool = False) -> str:
        return json.dumps(
            self.to_python(),
            indent=indent,
            sort_keys=sort_keys,
            ensure_ascii=False,
            allow_nan=False,
        )

    def _expect(self, *expected: JSONType) -> Any:
        if self.type not in expected:
            names = " or ".join(kind.value for kind in expected)
            raise JSONTypeError(f"JSON node is {self.type.value}, not {names}")
        return self.payload

    @property
    def is_null(self) -> bool:
        return self.type is JSONType.NULL

    @property
    def str(self) -> str:
        return self._expect(JSONType.STRING)

    @property
    def integer(self) -> int:
        return self._expect(JSONType.INTEGER)

    @property
    def uinteger(self) -> int:
        return self._expect(JSONType.UINTEGER)

    @property
    def floating(self) -> float:
        return self._expect(JSONType.FLOAT)

    @property
    def boolean(self) -> bool:
        return self._expect(JSONType.BOOLEAN)

    @property
    def array(self) -> tuple[JSONNode, ...]:
        return self._expect(JSONType.ARRAY)

    @property
    def object(self) -> Mapping[str, JSONNode]:
        return self._expect(JSONType.OBJECT)

    def __repr__(self) -> str:
        return f"JSONNode({self.type.value}, {self.dumps()})"


__all__ = ["JSONNode", "JSONScalar", "JSONType", "JSONValue"]
