"""Option-powered traversal over parsed JSON documents.

Every query returns an ``Option``. A path that cannot be followed, whether
because of a missing key, an index out of bounds or a step of the wrong kind,
yields ``Nothing``; traversal itself never raises::

    doc = parse('{"applications": [{"name": "cool programming"}]}')
    doc.dig_with_cast("applications", 0, "name")   # Some('cool programming')
    doc.dig("applications", 6)                     # Nothing
"""

from __future__ import annotations

from functools import partial

from ..config import MONADIC_CONFIG
from ..option import NOTHING, Option, Some
from ..runtime.logging import get_logger
from .node import JSONNode, JSONType
from .parse import parse_node
from .paths import Index, Key, Path, Step, StepLike, iter_steps


def resolve_step(step: Step, node: JSONNode) -> Option[JSONNode]:
    """Follow a single ``step`` from ``node``."""

    if isinstance(step, Index):
        if node.type is not JSONType.ARRAY:
            return NOTHING
        if 0 <= step.value < len(node.payload):
            return Some(node.payload[step.value])
        return NOTHING

    if node.type is not JSONType.OBJECT:
        return NOTHING
    if step.value in node.payload:
        return Some(node.payload[step.value])
    return NOTHING


def unjson(node: JSONNode) -> Option[object]:
    """Map a node to its natural Python value; containers stay nodes."""

    if node.type in (JSONType.ARRAY, JSONType.OBJECT):
        return Some(node)
    # Scalar payloads are already str/int/float/bool/None.
    return Some(node.payload)


def dig(root: JSONNode | MonadicJSON, *steps: StepLike) -> Option[JSONNode]:
    node = root.root if isinstance(root, MonadicJSON) else root
    resolved = list(iter_steps(steps))
    current: Option[JSONNode] = Some(node)
    for depth, step in enumerate(resolved):
        current = current.flatmap(partial(resolve_step, step), target=JSONNode)
        if current.is_none():
            if MONADIC_CONFIG.trace_traversal:
                get_logger().debug(
                    "dig %s unresolved at step %d (%s)",
                    Path(tuple(resolved)),
                    depth,
                    step,
                    extra={"monadic_action_color": "yellow"},
                )
            break
    return current


def dig_with_cast(root: JSONNode | MonadicJSON, *steps: StepLike) -> Option[object]:
    return dig(root, *steps).flatmap(unjson, target=JSONNode)


class MonadicJSON:
    """A parsed JSON document queried through ``Option`` values."""

    __slots__ = ("_root",)

    def __init__(self, root: JSONNode) -> None:
        self._root = root

    @classmethod
    def from_python(cls, value: object) -> MonadicJSON:
        return cls(JSONNode.from_python(value))

    @property
    def root(self) -> JSONNode:
        return self._root

    def dig(self, *steps: StepLike) -> Option[JSONNode]:
        """Traverse ``steps`` and return the node found there, or ``Nothing``."""
        return dig(self._root, *steps)

    def dig_with_cast(self, *steps: StepLike) -> Option[object]:
        """Like ``dig`` but scalars come back as plain Python values.

        A JSON ``null`` leaf gives ``Some(None)``; arrays and objects are
        returned as ``JSONNode`` for further traversal.
        """
        return dig_with_cast(self._root, *steps)

    def has_key(self, key: str) -> bool:
        return resolve_step(Key(key), self._root).is_some()

    def to_python(self) -> object:
        return self._root.to_python()

    def dumps(self, *, indent: int | None = None, sort_keys: bool = False) -> str:
        return self._root.dumps(indent=indent, sort_keys=sort_keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonadicJSON):
            return NotImplemented
        return self._root == other._root

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MonadicJSON({self.dumps()})"


def parse(text: str | bytes | bytearray) -> MonadicJSON:
    """Parse JSON ``text`` into a queryable document."""
    return MonadicJSON(parse_node(text))


__all__ = [
    "MonadicJSON",
    "dig",
    "dig_with_cast",
    "parse",
    "resolve_step",
    "unjson",
]
