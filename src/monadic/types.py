"""Checked conversion of dynamically typed payloads to a requested type."""

from __future__ import annotations

import typing
from functools import cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import TypeMismatch

T = TypeVar("T")

_NONE_TYPE = type(None)


def convert(value: object, target: Any) -> Any:
    """Return ``value`` converted to ``target`` or raise ``TypeMismatch``.

    Primitive targets follow a small fixed table: ``int`` widens to
    ``float``, ``bool`` is never treated as a number, and ``str``/``bool``/
    ``None`` only accept themselves. Plain classes are checked with
    ``isinstance``. Any other type form (generics, unions, pydantic models)
    is validated in strict mode by a pydantic ``TypeAdapter``.
    """

    if target is object or target is Any:
        return value

    if target is None or target is _NONE_TYPE:
        if value is None:
            return None
        raise TypeMismatch(value, None)

    if target is bool:
        if isinstance(value, bool):
            return value
        raise TypeMismatch(value, target)

    if target is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise TypeMismatch(value, target)

    if target is float:
        if isinstance(value, bool):
            raise TypeMismatch(value, target)
        if isinstance(value, (int, float)):
            try:
                return float(value)
            except OverflowError as exc:
                raise TypeMismatch(value, target, detail="out of float range") from exc
        raise TypeMismatch(value, target)

    if target is str:
        if isinstance(value, str):
            return value
        raise TypeMismatch(value, target)

    if isinstance(target, type) and typing.get_origin(target) is None:
        if _is_pydantic_model(target):
            return _validate(value, target)
        if isinstance(value, target):
            return value
        raise TypeMismatch(value, target)

    return _validate(value, target)


def converts_to(value: object, target: Any) -> bool:
    try:
        convert(value, target)
    except TypeMismatch:
        return False
    return True


def _validate(value: object, target: Any) -> Any:
    adapter = _adapter_for(target)
    try:
        return adapter.validate_python(value, strict=True)
    except ValidationError as exc:
        raise TypeMismatch(value, target, detail=_first_error(exc)) from exc


@cache
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(target)
    except TypeError as exc:
        raise TypeError(f"unsupported conversion target {target!r}") from exc


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0].get("msg", exc))


def _is_pydantic_model(target: type) -> bool:
    return issubclass(target, BaseModel)


__all__ = ["convert", "converts_to"]
