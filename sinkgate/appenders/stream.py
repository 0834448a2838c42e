"""Appender writing JSON lines to a text stream."""

import sys
import threading
from typing import TextIO

from sinkgate.core.appender import AbstractAppender
from sinkgate.core.errors import ErrorReporter
from sinkgate.core.event import LogEvent
from sinkgate.core.filter import Filter


class StreamAppender(AbstractAppender):
    """Writes one JSON document per event to ``stream``.

    Writes are serialized with a lock so lines from concurrent threads never
    interleave. Each event is flushed immediately.

    Args:
        stream: Target stream. Defaults to ``sys.stderr`` looked up at write time.
        close_on_stop: Close the stream when the appender stops.
    """

    def __init__(
        self,
        name: str | None = None,
        stream: TextIO | None = None,
        close_on_stop: bool = False,
        filter: Filter | None = None,
        ignore_failures: bool = True,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        super().__init__(name, filter, ignore_failures, error_reporter)
        self._stream = stream
        self._close_on_stop = close_on_stop
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def append(self, event: LogEvent) -> None:
        line = event.model_dump_json() + "\n"
        with self._lock:
            stream = self.stream
            stream.write(line)
            stream.flush()

    def stop(self) -> None:
        if self._close_on_stop and self._stream is not None:
            with self._lock:
                self._stream.close()
        super().stop()
