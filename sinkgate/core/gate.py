"""Dispatch gate between the logging pipeline and a single appender.

The gate decides whether an event reaches its appender, calls the appender,
and keeps appender failures from leaking into the caller unless the
appender asks for them to propagate.

Checks run in a fixed order and short-circuit:
- gate filter DENY
- event level below the gate threshold
- re-entrant call on the same thread (reported)
- appender not started (failure)
- appender's own filter
- the guarded ``append`` call (failure on any exception)

IMPORTANT: the gate holds no lock across ``append``. Its only mutable state
is the per-thread re-entrancy flag.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from sinkgate.core.appender import Appender
from sinkgate.core.errors import AppenderLoggingError, as_delivery_failure
from sinkgate.core.event import LogEvent
from sinkgate.core.filter import AbstractFilterable, Filter, Filterable, FilterResult
from sinkgate.core.level import Level
from sinkgate.core.logging import configure_gate_logger

RECURSIVE_CALL_MSG = "Recursive call to appender "
NOT_STARTED_MSG = "Attempted to append to non-started appender "
APPENDER_ERROR_MSG = "An exception occurred processing appender "


class DeliveryOutcome(Enum):
    """What happened to an event passed to ``DispatchGate.deliver``.

    DELIVERED: ``append`` ran and returned normally.
    SUPPRESSED: The event was dropped, or delivery failed and the appender
        ignores failures. Either way ``append`` did not complete.
    """

    DELIVERED = "delivered"
    SUPPRESSED = "suppressed"


class DispatchGate(AbstractFilterable):
    """Guards calls into one appender.

    One gate is typically shared by every thread logging to its appender.

    Args:
        appender: The appender events are delivered to.
        level: Least severe level let through. None accepts every level.
        filter: Optional filter; only a DENY result suppresses the event.
    """

    def __init__(
        self,
        appender: Appender,
        level: Level | None = None,
        filter: Filter | None = None,
    ) -> None:
        super().__init__(filter)
        self._appender = appender
        self._level = level
        self._int_level = Level.ALL.int_level if level is None else level.int_level
        self._appender_filter: Filterable | None = (
            appender if isinstance(appender, Filterable) else None
        )
        self._recursive = threading.local()
        self._log = configure_gate_logger()
        self.start()

    @property
    def appender(self) -> Appender:
        return self._appender

    @property
    def level(self) -> Level | None:
        return self._level

    def deliver(self, event: LogEvent) -> DeliveryOutcome:
        """Deliver ``event`` to the appender unless a check suppresses it.

        Returns:
            The outcome of the delivery attempt.

        Raises:
            AppenderLoggingError: If delivery failed and the appender does not
                ignore failures.
        """
        if self._should_skip(event):
            return DeliveryOutcome.SUPPRESSED
        return self._deliver_preventing_recursion(event)

    def _should_skip(self, event: LogEvent) -> bool:
        return (
            self._is_filtered_by_gate(event)
            or self._is_filtered_by_level(event)
            or self._is_recursive_call()
        )

    def _is_filtered_by_gate(self, event: LogEvent) -> bool:
        if self._filter is not None and self._filter.filter(event) is FilterResult.DENY:
            self._log_suppressed(event, "filter")
            return True
        return False

    def _is_filtered_by_level(self, event: LogEvent) -> bool:
        if self._level is not None and self._int_level < event.level.int_level:
            self._log_suppressed(event, "level")
            return True
        return False

    def _is_recursive_call(self) -> bool:
        if getattr(self._recursive, "active", False):
            self._appender.error_reporter.report(self._error_message(RECURSIVE_CALL_MSG))
            return True
        return False

    @contextmanager
    def _recursion_guard(self) -> Iterator[None]:
        self._recursive.active = True
        try:
            yield
        finally:
            self._recursive.active = False

    def _deliver_preventing_recursion(self, event: LogEvent) -> DeliveryOutcome:
        with self._recursion_guard():
            if not self._appender.is_started():
                return self._handle_error(self._error_message(NOT_STARTED_MSG))
            if self._appender_filter is not None and self._appender_filter.is_filtered(event):
                self._log_suppressed(event, "appender_filter")
                return DeliveryOutcome.SUPPRESSED
            return self._try_call_appender(event)

    def _try_call_appender(self, event: LogEvent) -> DeliveryOutcome:
        try:
            self._appender.append(event)
        except Exception as e:
            message = self._error_message(APPENDER_ERROR_MSG)
            self._appender.error_reporter.report(message, e)
            if self._appender.ignore_failures:
                return DeliveryOutcome.SUPPRESSED
            failure = as_delivery_failure(e, message, self._appender.name)
            if failure is e:
                raise
            raise failure from e
        return DeliveryOutcome.DELIVERED

    def _handle_error(self, message: str) -> DeliveryOutcome:
        self._appender.error_reporter.report(message)
        if not self._appender.ignore_failures:
            raise AppenderLoggingError(message, appender_name=self._appender.name)
        return DeliveryOutcome.SUPPRESSED

    def _error_message(self, prefix: str) -> str:
        return prefix + self._appender.name

    def _log_suppressed(self, event: LogEvent, reason: str) -> None:
        if not self._log.isEnabledFor(logging.DEBUG):
            return
        self._log.debug(
            "Suppressed %s event for %s",
            event.level,
            self._appender.name,
            extra={
                "event_id": event.id,
                "appender": self._appender.name,
                "reason": reason,
            },
        )

    def __repr__(self) -> str:
        return f"DispatchGate(appender={self._appender.name!r}, level={self._level})"
