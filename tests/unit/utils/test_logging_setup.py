"""Tests for logging setup, formatters and correlation IDs."""

from __future__ import annotations

import io
import json
import logging
import logging.handlers
import sys
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from stepanim.models import LogLevel, ObservabilityConfig
from stepanim.utils.exceptions import ValidationError
from stepanim.utils.logging_config import (
    LOGGER_NAMESPACE,
    CorrelationFilter,
    StructuredFormatter,
    correlation_id,
    get_correlation_id,
    get_logger,
    log_exception,
    set_correlation_id,
    setup_logging,
)
from stepanim.utils.rich_logging import (
    CorrelationRichHandler,
    FileFormatter,
    create_rich_handler,
    strip_rich_markup,
)

pytestmark = [pytest.mark.unit]


def make_record(msg="hello %s", args=("world",), func="tick", exc_info=None):
    return logging.LogRecord(
        name="stepanim.animation",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=exc_info,
        func=func,
    )


@pytest.fixture(autouse=True)
def _reset_correlation_id():
    token = correlation_id.set(None)
    yield
    correlation_id.reset(token)


class TestSetupLogging:
    def test_rich_console_by_default(self):
        setup_logging(ObservabilityConfig())
        logger = logging.getLogger(LOGGER_NAMESPACE)

        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], CorrelationRichHandler)

    def test_structured_console(self):
        setup_logging(ObservabilityConfig(structured_logging=True, log_level=LogLevel.DEBUG))
        logger = logging.getLogger(LOGGER_NAMESPACE)

        assert logger.level == logging.DEBUG
        assert not any(isinstance(h, CorrelationRichHandler) for h in logger.handlers)
        stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert isinstance(stream_handlers[0].formatter, StructuredFormatter)
        assert stream_handlers[0].stream is sys.stderr

    def test_log_file_strips_markup(self, tmp_path):
        log_file = tmp_path / "logs" / "stepanim.log"
        setup_logging(ObservabilityConfig(log_file=str(log_file), log_level=LogLevel.INFO))
        logger = logging.getLogger(LOGGER_NAMESPACE)

        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert log_file.parent.is_dir()

        get_logger("animation").info("[bold]step[/bold] changed")
        file_handlers[0].flush()

        content = log_file.read_text(encoding="utf-8")
        assert "step changed" in content
        assert "[bold]" not in content

    def test_structured_log_file(self, tmp_path):
        log_file = tmp_path / "stepanim.jsonl"
        setup_logging(
            ObservabilityConfig(
                log_file=str(log_file),
                structured_logging=True,
                log_level=LogLevel.DEBUG,
            )
        )
        logging.getLogger("stepanim.config").debug("loaded %s", "file")
        for handler in logging.getLogger(LOGGER_NAMESPACE).handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "loaded file"
        assert entry["logger"] == "stepanim.config"
        assert entry["correlation_id"] == get_correlation_id()

    def test_correlation_id_optional(self):
        setup_logging(ObservabilityConfig(log_correlation_id=False))
        assert get_correlation_id() is None

    def test_correlation_id_generated(self):
        setup_logging(ObservabilityConfig())
        assert get_correlation_id() is not None


class TestStructuredFormatter:
    def test_fields(self):
        record = make_record()
        record.correlation_id = "abc"
        record.step = 3

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello world"
        assert entry["function"] == "tick"
        assert entry["correlation_id"] == "abc"
        assert entry["step"] == 3
        assert "msg" not in entry
        assert "args" not in entry

    def test_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())

        entry = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestCorrelation:
    def test_set_and_get(self):
        assert set_correlation_id("frame-1") == "frame-1"
        assert get_correlation_id() == "frame-1"

    def test_generated_when_missing(self):
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated

    def test_filter_default(self):
        record = make_record()
        assert CorrelationFilter().filter(record) is True
        assert record.correlation_id == "no-correlation-id"

    def test_filter_uses_context(self):
        set_correlation_id("ctx")
        record = make_record()
        CorrelationFilter().filter(record)
        assert record.correlation_id == "ctx"


class TestHelpers:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("animation", "stepanim.animation"),
            ("stepanim", "stepanim"),
            ("stepanim.cli.main", "stepanim.cli.main"),
        ],
    )
    def test_get_logger_namespace(self, name, expected):
        assert get_logger(name).name == expected

    def test_log_exception_with_details(self):
        logger = MagicMock()
        log_exception(logger, ValidationError("bad duration", {"duration": -1}), "preset")

        logger.error.assert_called_once()
        args, kwargs = logger.error.call_args
        assert args[1:] == ("preset", "bad duration")
        assert kwargs["extra"] == {"details": {"duration": -1}}

    def test_log_exception_generic(self):
        logger = MagicMock()
        exc = RuntimeError("oops")
        log_exception(logger, exc, "render")
        logger.exception.assert_called_once_with("%s: %s", "render", exc)


class TestRichLogging:
    def test_strip_rich_markup(self):
        assert strip_rich_markup("[bold red]step[/bold red] [#ff69b4]tick[/#ff69b4]") == "step tick"
        assert strip_rich_markup("plain") == "plain"

    def test_file_formatter(self):
        formatter = FileFormatter("%(message)s")
        assert formatter.format(make_record(msg="[dim]%s[/dim]", args=("x",))) == "x"

    def test_handler_prefixes_function_name(self):
        out = io.StringIO()
        handler = CorrelationRichHandler(
            console=Console(file=out, width=120, color_system=None),
            show_path=False,
        )
        record = make_record()

        handler.emit(record)

        assert record.correlation_id == "no-correlation-id"
        assert "tick hello world" in out.getvalue()

    def test_handler_without_function_name(self):
        out = io.StringIO()
        handler = CorrelationRichHandler(
            console=Console(file=out, width=120, color_system=None),
            show_function=False,
            show_path=False,
        )
        handler.emit(make_record())
        assert "tick" not in out.getvalue()
        assert "hello world" in out.getvalue()

    def test_create_rich_handler(self):
        handler = create_rich_handler(level="DEBUG")
        assert isinstance(handler, CorrelationRichHandler)
        assert handler.level == logging.DEBUG
        assert handler.console.stderr
