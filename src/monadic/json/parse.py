from __future__ import annotations

import json

from ..errors import DocumentParseError, JSONTypeError
from ..runtime.logging import get_logger
from .node import JSONNode


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite constant {name} is not valid JSON")


def parse_node(text: str | bytes | bytearray) -> JSONNode:
    """Parse JSON ``text`` into a tagged node tree.

    Raises ``DocumentParseError`` on malformed input and on numbers or
    nesting the node tree cannot represent.
    """

    try:
        raw = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(
            f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
        ) from exc
    except ValueError as exc:
        raise DocumentParseError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DocumentParseError("JSON document is nested too deeply") from exc

    get_logger().debug(
        "parse %d chars into %s root",
        len(text),
        type(raw).__name__,
        extra={"monadic_action_color": "cyan"},
    )
    try:
        return JSONNode.from_python(raw)
    except JSONTypeError as exc:
        raise DocumentParseError(f"unrepresentable JSON value: {exc}") from exc


__all__ = ["parse_node"]
