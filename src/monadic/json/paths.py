"""Traversal paths: ordered sequences of array indices and object keys."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Index:
    """Array position. Negative values are kept as-is and never resolve."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Index requires an int, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return f"[{self.value}]"


@dataclass(frozen=True)
class Key:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Key requires a str, got {type(self.value).__name__}")

    def __str__(self) -> str:
        if self.value.isidentifier():
            return f".{self.value}"
        return f"[{json.dumps(self.value, ensure_ascii=False)}]"


Step: TypeAlias = Index | Key
StepLike: TypeAlias = "Step | int | str | Path"


def as_step(raw: Step | int | str) -> Step:
    """Normalize a raw ``int``/``str`` into an ``Index``/``Key`` step."""

    if isinstance(raw, (Index, Key)):
        return raw
    if isinstance(raw, bool):
        raise TypeError("bool is not a valid path step; use an int index or str key")
    if isinstance(raw, int):
        return Index(raw)
    if isinstance(raw, str):
        return Key(raw)
    raise TypeError(
        f"path steps must be int indices or str keys, got {type(raw).__name__}"
    )


def iter_steps(raw_steps: Iterable[StepLike]) -> Iterator[Step]:
    for raw in raw_steps:
        if isinstance(raw, Path):
            yield from raw.steps
        else:
            yield as_step(raw)


@dataclass(frozen=True)
class Path:
    """Immutable path builder.

    ``P.applications[0].name`` and ``Path.of("applications", 0, "name")``
    build the same path. Attribute access only works for keys that do not
    start with ``_`` and do not clash with ``Path`` members; use
    ``path["key"]`` for those.
    """

    steps: tuple[Step, ...] = ()

    @classmethod
    def of(cls, *raw_steps: StepLike) -> Path:
        return cls(tuple(iter_steps(raw_steps)))

    def __getitem__(self, key: int | str) -> Path:
        return Path((*self.steps, as_step(key)))

    def __getattr__(self, segment: str) -> Path:
        if segment.startswith("_"):
            raise AttributeError(segment)
        return Path((*self.steps, Key(segment)))

    def __add__(self, other: object) -> Path:
        if not isinstance(other, Path):
            return NotImplemented
        return Path((*self.steps, *other.steps))

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return "$" + "".join(str(step) for step in self.steps)


P = Path()

__all__ = ["Index", "Key", "P", "Path", "Step", "StepLike", "as_step", "iter_steps"]
