"""Exception hierarchy for monadic."""

from __future__ import annotations

from typing import Any


class MonadicError(Exception):
    """Base class for all errors raised by monadic."""


class CannotUnwrapNone(MonadicError):
    """Raised when ``unwrap`` is called on ``Nothing``."""

    def __init__(self, message: str = "cannot unwrap Nothing") -> None:
        super().__init__(message)


class TypeMismatch(MonadicError, TypeError):
    """Raised when an Option payload cannot be converted to the requested type."""

    def __init__(self, value: Any, target: Any, detail: str | None = None) -> None:
        self.value = value
        self.target = target
        message = (
            f"cannot convert {type(value).__name__} value {_value_repr(value)} "
            f"to {_target_name(target)}"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class JSONTypeError(MonadicError, TypeError):
    """Raised on a typed accessor of the wrong node variant or an unsupported value."""


class DocumentParseError(MonadicError, ValueError):
    """Raised when document text is not valid JSON."""


_MAX_REPR = 80


def _value_repr(value: Any) -> str:
    try:
        text = repr(value)
    except ValueError:
        # int-to-str digit limit
        return "<too large to display>"
    if len(text) > _MAX_REPR:
        return text[: _MAX_REPR - 3] + "..."
    return text


def _target_name(target: Any) -> str:
    if target is None:
        return "None"
    if isinstance(target, type):
        return target.__qualname__
    return repr(target)


__all__ = [
    "CannotUnwrapNone",
    "DocumentParseError",
    "JSONTypeError",
    "MonadicError",
    "TypeMismatch",
]
