from .document import MonadicJSON, dig, dig_with_cast, parse, resolve_step, unjson
from .node import JSONNode, JSONScalar, JSONType, JSONValue
from .parse import parse_node
from .paths import Index, Key, P, Path, Step, StepLike, as_step

__all__ = [
    "Index",
    "JSONNode",
    "JSONScalar",
    "JSONType",
    "JSONValue",
    "Key",
    "MonadicJSON",
    "P",
    "Path",
    "Step",
    "StepLike",
    "as_step",
    "dig",
    "dig_with_cast",
    "parse",
    "parse_node",
    "resolve_step",
    "unjson",
]
