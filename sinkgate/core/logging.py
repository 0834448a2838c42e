"""Structured JSON logging for sinkgate's own diagnostics."""

import json
import logging
from datetime import UTC, datetime
from typing import Any

# Dynamically derive standard LogRecord attributes at module import time
# This ensures future Python additions (like taskName) are automatically handled
_STANDARD_LOGRECORD_KEYS: frozenset[str] = frozenset(
    logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None
    ).__dict__.keys()
)

GATE_LOGGER_NAME = "sinkgate.gate"
STATUS_LOGGER_NAME = "sinkgate.status"


class JSONFormatter(logging.Formatter):
    """JSON formatter with UTC ISO8601 timestamps."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        # Standard sinkgate fields
        for field in ("event_id", "appender", "reason", "error"):
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exc_info"] = self.formatException(record.exc_info)

        # Add any extra fields passed via extra={}
        for key, value in vars(record).items():
            if key not in _STANDARD_LOGRECORD_KEYS and key not in log_data:
                log_data[key] = value

        try:
            return json.dumps(log_data, default=str)
        except Exception:
            return str(log_data)


def _setup_json_handler(logger: logging.Logger, level: int | None) -> None:
    """Configure a logger with JSON formatting.

    Args:
        logger: The logger to configure.
        level: The logging level to set. None keeps an explicitly set level
            and falls back to INFO for unconfigured loggers.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    logger.propagate = False


def configure_gate_logger(level: int | None = None) -> logging.Logger:
    """Configure and return the logger used by dispatch gates.

    Suppression decisions are logged at DEBUG, so they stay silent at the
    default level.
    """
    logger = logging.getLogger(GATE_LOGGER_NAME)
    _setup_json_handler(logger, level)
    return logger


def configure_status_logger(level: int | None = None) -> logging.Logger:
    """Configure and return the logger that error reporters write to."""
    logger = logging.getLogger(STATUS_LOGGER_NAME)
    _setup_json_handler(logger, level)
    return logger


def get_logger(name: str = "sinkgate", level: int | None = None) -> logging.Logger:
    """Get a logger with JSON formatting.

    Args:
        name: The logger name. Defaults to "sinkgate".
        level: The logging level to set. None keeps an explicitly set level.
    """
    logger = logging.getLogger(name)
    _setup_json_handler(logger, level)
    return logger
