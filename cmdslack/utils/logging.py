# cmdslack/utils/logging.py
"""Structured logging with JSON format and correlation ID support.

Provides:
- JSON-formatted log output for structured logging
- Invocation correlation ID (Slack trigger_id) via ContextVar
- Centralized logger configuration for text or JSON output
"""

import json
import logging
from contextvars import ContextVar
from typing import Any

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Correlation ID for tracking one slash command invocation across tasks
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def set_request_id(request_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        request_id: Unique identifier for the invocation.
    """
    request_id_var.set(request_id)


def get_request_id() -> str:
    """Get the correlation ID for the current context.

    Returns:
        Current request ID, or empty string if not set.
    """
    return request_id_var.get()


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON with timestamp, level, logger name,
    message, and optional request_id for correlation.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = get_request_id()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(level: int | str = logging.INFO, fmt: str = "text") -> None:
    """Configure application logging on the root logger.

    Args:
        level: Logging level or level name (default: logging.INFO).
        fmt: "json" for StructuredFormatter output, anything else for text.
    """
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logging.root.handlers = [handler]
    logging.root.setLevel(level.upper() if isinstance(level, str) else level)
