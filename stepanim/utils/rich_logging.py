"""Rich logging integration for stepanim.

Provides a Rich console handler that knows about correlation IDs, and a file
formatter that strips Rich markup.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Matches [tag], [tag=value] and [/tag]
_MARKUP_PATTERN = re.compile(r"\[/?[^\]]+\]")


class CorrelationRichHandler(RichHandler):
    """RichHandler that prefixes messages with the function name and keeps
    the correlation ID on every record.
    """

    def __init__(
        self,
        *args: Any,
        console: Console | None = None,
        show_function: bool = True,
        **kwargs: Any,
    ) -> None:
        """Initialize the handler.

        Args:
            *args: Positional arguments for RichHandler
            console: Optional Rich Console instance, stderr by default
            show_function: Whether to prefix messages with the function name
            **kwargs: Keyword arguments for RichHandler

        """
        if console is None:
            # Live displays own stdout, so logs go to stderr
            console = Console(stderr=True, markup=True)
        self.show_function = show_function
        kwargs.setdefault("markup", True)
        super().__init__(*args, console=console, **kwargs)

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a record with its correlation ID and function name."""
        try:
            if not hasattr(record, "correlation_id"):
                # Lazy import, logging_config imports this module
                from stepanim.utils.logging_config import correlation_id

                record.correlation_id = correlation_id.get() or "no-correlation-id"

            func_name = getattr(record, "funcName", None)
            if self.show_function and func_name and func_name != "<module>":
                record.msg = f"[#ff69b4]{func_name}[/#ff69b4] {record.getMessage()}"
                record.args = ()

            super().emit(record)
        except Exception:
            self.handleError(record)


def strip_rich_markup(text: str) -> str:
    """Strip Rich markup from text for file logging.

    Args:
        text: Text with Rich markup

    Returns:
        Text without Rich markup

    """
    return _MARKUP_PATTERN.sub("", text)


class FileFormatter(logging.Formatter):
    """Formatter for file output that strips Rich markup."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, stripping Rich markup for file output."""
        return strip_rich_markup(super().format(record))


def create_rich_handler(
    console: Console | None = None,
    level: int | str = logging.INFO,
    show_path: bool = False,
    rich_tracebacks: bool = True,
) -> CorrelationRichHandler:
    """Create a RichHandler with correlation ID support.

    Args:
        console: Optional Rich Console instance
        level: Log level
        show_path: Whether to show file paths in log output
        rich_tracebacks: Whether to use rich tracebacks

    Returns:
        Configured handler instance

    """
    return CorrelationRichHandler(
        console=console,
        level=level,
        show_path=show_path,
        rich_tracebacks=rich_tracebacks,
    )
