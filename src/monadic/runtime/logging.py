from __future__ import annotations

import logging
import time
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import MONADIC_CONFIG

LOGGER_NAME = "monadic"

_LEVEL_STYLES = {
    logging.DEBUG: "dim cyan",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "bold red",
    logging.CRITICAL: "bold white on red",
}


class _MonadicRichConsoleHandler(logging.Handler):
    """Console handler that renders records as single rich lines on stderr."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._console = Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        # Only the leading action token ("dig", "parse", ...) is colored.
        message = record.getMessage()
        text = Text(message)
        color = getattr(record, "monadic_action_color", None)
        if color:
            action, _, _ = message.partition(" ")
            text.stylize(color, 0, len(action))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stamp = time.strftime("%H:%M:%S", time.localtime(record.created))
            line = Text.assemble(
                (stamp, "dim"),
                " ",
                (f"{record.levelname:<8}", _LEVEL_STYLES.get(record.levelno, "")),
                self._format_message_text(record),
                " ",
                (self._format_location(record), "dim"),
            )
            self._console.print(line, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


class _MonadicStreamHandler(logging.StreamHandler):
    """Plain stderr handler used when rich console output is disabled."""

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )


_CONSOLE_HANDLER_TYPES: tuple[type[logging.Handler], ...] = (
    _MonadicRichConsoleHandler,
    _MonadicStreamHandler,
)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach a console handler to the ``monadic`` logger.

    Safe to call repeatedly; at most one monadic console handler is installed,
    replacing the other kind when ``MONADIC_CONFIG.rich_console`` changed.
    The level defaults to ``MONADIC_CONFIG.log_level``.
    """

    logger = get_logger()
    logger.setLevel(MONADIC_CONFIG.log_level if level is None else level)

    handler_type: type[logging.Handler] = (
        _MonadicRichConsoleHandler
        if MONADIC_CONFIG.rich_console
        else _MonadicStreamHandler
    )
    for handler in list(logger.handlers):
        stale = type(handler) is not handler_type
        if isinstance(handler, _CONSOLE_HANDLER_TYPES) and stale:
            logger.removeHandler(handler)
            handler.close()
    if not any(type(handler) is handler_type for handler in logger.handlers):
        logger.addHandler(handler_type())
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
