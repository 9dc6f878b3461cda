"""
monadic: an Option monad and Option-powered traversal of schemaless JSON.

This package uses a src-layout. Import the package as `monadic`.
"""

from importlib.metadata import version

__version__ = version("monadic")

from .config import MONADIC_CONFIG, MonadicConfig
from .errors import (
    CannotUnwrapNone,
    DocumentParseError,
    JSONTypeError,
    MonadicError,
    TypeMismatch,
)
from .json import (
    Index,
    JSONNode,
    JSONType,
    Key,
    MonadicJSON,
    P,
    Path,
    dig,
    dig_with_cast,
    parse,
    parse_node,
)
from .option import NOTHING, Nothing, Option, Some
from .runtime import configure_logging, get_logger
from .types import convert, converts_to

__all__ = [
    "__version__",
    "CannotUnwrapNone",
    "DocumentParseError",
    "Index",
    "JSONNode",
    "JSONType",
    "JSONTypeError",
    "Key",
    "MONADIC_CONFIG",
    "MonadicConfig",
    "MonadicError",
    "MonadicJSON",
    "NOTHING",
    "Nothing",
    "Option",
    "P",
    "Path",
    "Some",
    "TypeMismatch",
    "configure_logging",
    "convert",
    "converts_to",
    "dig",
    "dig_with_cast",
    "get_logger",
    "parse",
    "parse_node",
]
