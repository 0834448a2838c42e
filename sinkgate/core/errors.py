"""Failure taxonomy and error reporting for appenders.

Only ``AppenderLoggingError`` crosses a gate's boundary. Everything else an
appender raises is wrapped in it first.
"""

import logging
import threading
import time
from typing import Protocol

from sinkgate.core.logging import configure_status_logger

# Reports always emitted before throttling kicks in
MAX_EXCEPTIONS = 3

# Seconds between reports once throttled (5 minutes)
EXCEPTION_INTERVAL = 300.0


class AppenderLoggingError(RuntimeError):
    """Raised when an event could not be delivered to an appender.

    Attributes:
        appender_name: Name of the appender that failed, if known.
        original: The exception raised by the appender, if any.
    """

    def __init__(
        self,
        message: str,
        appender_name: str | None = None,
        original: BaseException | None = None,
    ) -> None:
        self.appender_name = appender_name
        self.original = original
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.original is not None:
            return f"{base}: {self.original}"
        return base


def as_delivery_failure(
    error: Exception, message: str, appender_name: str
) -> AppenderLoggingError:
    """Return ``error`` if it already is an AppenderLoggingError, else wrap it."""
    if isinstance(error, AppenderLoggingError):
        return error
    return AppenderLoggingError(message, appender_name=appender_name, original=error)


class ErrorReporter(Protocol):
    """Sink for delivery problems of a single appender."""

    def report(self, message: str, cause: BaseException | None = None) -> None: ...


class DefaultErrorReporter:
    """Writes reports to the JSON status logger, throttling repeats.

    The first ``max_exceptions`` reports are always logged. After that at
    most one report per ``interval`` seconds gets through; the rest are
    counted in ``dropped_count``.

    Reports without a cause are usage warnings (recursion, appender not
    started) and are logged at WARNING; reports with a cause at ERROR.

    Args:
        appender_name: Name attached to every log record as ``appender``.
        logger: Logger to write to. Defaults to the status logger.
        max_exceptions: Reports logged before throttling.
        interval: Minimum seconds between reports once throttled.
    """

    def __init__(
        self,
        appender_name: str,
        logger: logging.Logger | None = None,
        max_exceptions: int = MAX_EXCEPTIONS,
        interval: float = EXCEPTION_INTERVAL,
    ) -> None:
        self.appender_name = appender_name
        self._log = logger or configure_status_logger()
        self._max_exceptions = max_exceptions
        self._interval = interval
        self._lock = threading.Lock()
        self._report_count = 0
        self._dropped_count = 0
        self._last_report: float | None = None

    @property
    def report_count(self) -> int:
        """Number of reports actually logged."""
        return self._report_count

    @property
    def dropped_count(self) -> int:
        """Number of reports suppressed by throttling."""
        return self._dropped_count

    def _should_log(self) -> bool:
        now = time.monotonic()
        with self._lock:
            if self._report_count < self._max_exceptions or (
                self._last_report is not None and now - self._last_report >= self._interval
            ):
                self._report_count += 1
                self._last_report = now
                return True
            self._dropped_count += 1
            return False

    def report(self, message: str, cause: BaseException | None = None) -> None:
        if not self._should_log():
            return
        extra = {"appender": self.appender_name}
        if cause is None:
            self._log.warning(message, extra=extra)
            return
        extra["error"] = str(cause)
        self._log.error(message, extra=extra, exc_info=cause)
