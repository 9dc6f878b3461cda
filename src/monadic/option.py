"""Option (Maybe) monad over dynamically typed payloads.

An Option is either ``Some(value)`` or ``Nothing()``. The payload keeps its
runtime type; callers name the type they expect when extracting it::

    Some(13).unwrap(int)         # 13
    Some(13).unwrap(float)       # 13.0
    Some("abc").unwrap_or(0)     # 0, str does not convert to int
    Nothing().unwrap(int)        # raises CannotUnwrapNone

``map`` and ``flatmap`` short-circuit on ``Nothing`` and never call the
function. On ``Some`` they convert the payload to the function's input type
first (explicit ``target`` or the annotation of the first parameter) and
raise ``TypeMismatch`` when it does not convert.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from typing import Any, ClassVar, Generic, NoReturn, TypeVar

from .errors import CannotUnwrapNone, TypeMismatch
from .types import convert

T = TypeVar("T")

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


class Option(Generic[T]):
    """Closed sum type; ``Some`` and ``Nothing`` are the only variants."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Option is closed; only Some and Nothing may extend it")

    @staticmethod
    def from_nullable(value: T | None) -> Option[T]:
        """``Nothing`` for ``None``, otherwise ``Some(value)``."""
        if value is None:
            return NOTHING
        return Some(value)

    def is_some(self) -> bool:
        raise NotImplementedError

    def is_none(self) -> bool:
        return not self.is_some()

    def unwrap(self, target: Any = object) -> Any:
        raise NotImplementedError

    def unwrap_or(self, default: Any, target: Any = None) -> Any:
        raise NotImplementedError

    def map(self, func: Callable[..., Any], target: Any = None) -> Option[Any]:
        raise NotImplementedError

    def flatmap(
        self, func: Callable[..., Option[Any]], target: Any = None
    ) -> Option[Any]:
        raise NotImplementedError

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bool__(self) -> bool:
        raise TypeError(
            "Option values are not truthy; use is_some() or is_none() instead"
        )

    __hash__ = None  # type: ignore[assignment]


class Some(Option[T]):
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def is_some(self) -> bool:
        return True

    def unwrap(self, target: Any = object) -> Any:
        return convert(self._value, target)

    def unwrap_or(self, default: Any, target: Any = None) -> Any:
        if target is None:
            if default is None:
                return self._value
            target = type(default)
        try:
            return convert(self._value, target)
        except TypeMismatch:
            return default

    def map(self, func: Callable[..., Any], target: Any = None) -> Option[Any]:
        value = convert(self._value, _input_type(func, target))
        return Some(func(value))

    def flatmap(
        self, func: Callable[..., Option[Any]], target: Any = None
    ) -> Option[Any]:
        value = convert(self._value, _input_type(func, target))
        result = func(value)
        if not isinstance(result, Option):
            raise TypeError(
                f"flatmap function must return an Option, got {type(result).__name__}"
            )
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if not isinstance(other, Some):
            return False
        return _payloads_equal(self._value, other._value)

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __reduce__(self) -> tuple[type[Some[T]], tuple[T]]:
        return (Some, (self._value,))


class Nothing(Option[Any]):
    __slots__ = ()

    _instance: ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def unwrap(self, target: Any = object) -> NoReturn:
        raise CannotUnwrapNone()

    def unwrap_or(self, default: Any, target: Any = None) -> Any:
        return default

    def map(self, func: Callable[..., Any], target: Any = None) -> Option[Any]:
        return self

    def flatmap(
        self, func: Callable[..., Option[Any]], target: Any = None
    ) -> Option[Any]:
        return self

    def __eq__(self, other: object) -> bool:
        # Absence never equals anything, itself included.
        if not isinstance(other, Option):
            return NotImplemented
        return False

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> tuple[type[Nothing], tuple[()]]:
        return (Nothing, ())


NOTHING: Nothing = Nothing()


def _payloads_equal(left: object, right: object) -> bool:
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return bool(left == right)


def _input_type(func: Callable[..., Any], target: Any) -> Any:
    if target is not None:
        return target

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return object

    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL_KINDS]
    if not positional:
        return object

    first = positional[0]
    annotation = first.annotation
    if annotation is inspect.Parameter.empty:
        return object
    if isinstance(annotation, str):
        try:
            hints = typing.get_type_hints(func)
        except (AttributeError, NameError, TypeError):
            return object
        annotation = hints.get(first.name, object)
    return annotation


__all__ = ["NOTHING", "Nothing", "Option", "Some"]
