"""Tests for structured logging utilities."""

import json
import logging
from collections.abc import Generator

import pytest

from cmdslack.utils.logging import (
    StructuredFormatter,
    configure_logging,
    get_request_id,
    request_id_var,
    set_request_id,
)


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test."""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


@pytest.fixture
def reset_request_id() -> Generator[None, None, None]:
    token = request_id_var.set("")
    yield
    request_id_var.reset(token)


def _record(message: str = "hello %s", args: tuple = ("world",)) -> logging.LogRecord:
    return logging.LogRecord("cmdslack.test", logging.INFO, __file__, 1, message, args, None)


class TestStructuredFormatter:
    """Test suite for StructuredFormatter."""

    def test_json_fields(self, reset_request_id: None) -> None:
        data = json.loads(StructuredFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "cmdslack.test"
        assert data["message"] == "hello world"
        assert "timestamp" in data
        assert "request_id" not in data

    def test_request_id_included(self, reset_request_id: None) -> None:
        set_request_id("T-1")
        assert get_request_id() == "T-1"
        data = json.loads(StructuredFormatter().format(_record()))
        assert data["request_id"] == "T-1"

    def test_exception_included(self, reset_request_id: None) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            record = logging.LogRecord(
                "cmdslack.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        data = json.loads(StructuredFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_json_format(self, restore_root_logger: None) -> None:
        configure_logging("debug", "json")
        assert logging.root.level == logging.DEBUG
        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0].formatter, StructuredFormatter)

    def test_text_format(self, restore_root_logger: None) -> None:
        configure_logging(logging.WARNING, "text")
        assert logging.root.level == logging.WARNING
        assert not isinstance(logging.root.handlers[0].formatter, StructuredFormatter)
