"""In-memory appender that keeps delivered events in a list."""

import threading

from sinkgate.core.appender import AbstractAppender
from sinkgate.core.errors import ErrorReporter
from sinkgate.core.event import LogEvent
from sinkgate.core.filter import Filter


class ListAppender(AbstractAppender):
    """Collects events in memory.

    This appender is suitable for development and testing. It provides
    no durability guarantees.

    Args:
        name: Appender name. Defaults to the class name.
        max_size: Maximum events kept. 0 means unbounded (default). When full,
            the oldest event is dropped (FIFO eviction).
    """

    def __init__(
        self,
        name: str | None = None,
        max_size: int = 0,
        filter: Filter | None = None,
        ignore_failures: bool = True,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        super().__init__(name, filter, ignore_failures, error_reporter)
        self._events: list[LogEvent] = []
        self._max_size = max_size
        self._dropped_count = 0
        self._lock = threading.Lock()

    def append(self, event: LogEvent) -> None:
        with self._lock:
            if self._max_size > 0 and len(self._events) >= self._max_size:
                self._events.pop(0)
                self._dropped_count += 1
            self._events.append(event)

    @property
    def events(self) -> list[LogEvent]:
        """Snapshot of the collected events, oldest first."""
        with self._lock:
            return list(self._events)

    @property
    def dropped_count(self) -> int:
        """Number of events dropped due to size limit."""
        return self._dropped_count

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        """Always truthy so 'appender or default' works correctly."""
        return True
