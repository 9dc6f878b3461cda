from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

import pytest

from .config import MONADIC_CONFIG
from .option import Option

_UNCHECKED = object()


@dataclass(frozen=True)
class _MonadicConfigSnapshot:
    log_level: int
    trace_traversal: bool
    rich_console: bool

    @classmethod
    def capture(cls) -> "_MonadicConfigSnapshot":
        return cls(
            log_level=MONADIC_CONFIG.log_level,
            trace_traversal=MONADIC_CONFIG.trace_traversal,
            rich_console=MONADIC_CONFIG.rich_console,
        )

    def restore(self) -> None:
        MONADIC_CONFIG.log_level = self.log_level
        MONADIC_CONFIG.trace_traversal = self.trace_traversal
        MONADIC_CONFIG.rich_console = self.rich_console


def assert_some(
    option: Option[Any], expected: Any = _UNCHECKED, target: Any = object
) -> Any:
    """Assert ``option`` is ``Some`` and return its payload converted to ``target``.

    When ``expected`` is given the payload must also equal it.
    """

    assert isinstance(option, Option), f"expected an Option, got {option!r}"
    assert option.is_some(), "expected Some, got Nothing"
    value = option.unwrap(target)
    if expected is not _UNCHECKED:
        assert value == expected, f"expected Some({expected!r}), got {option!r}"
    return value


def assert_nothing(option: Option[Any]) -> None:
    assert isinstance(option, Option), f"expected an Option, got {option!r}"
    assert option.is_none(), f"expected Nothing, got {option!r}"


@pytest.fixture()
def monadic_config() -> Generator[Any, None, None]:
    """Yield ``MONADIC_CONFIG`` and restore its settings afterwards."""

    snapshot = _MonadicConfigSnapshot.capture()
    try:
        yield MONADIC_CONFIG
    finally:
        snapshot.restore()


__all__ = ["assert_nothing", "assert_some", "monadic_config"]
