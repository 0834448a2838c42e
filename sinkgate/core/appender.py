"""Appender protocol and base class."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from sinkgate.core.errors import DefaultErrorReporter, ErrorReporter
from sinkgate.core.event import LogEvent
from sinkgate.core.filter import AbstractFilterable, Filter


@runtime_checkable
class Appender(Protocol):
    """Destination that writes or transmits log events.

    Gates only talk to appenders through this interface. Appenders that also
    implement ``Filterable`` get their own filter consulted before ``append``.
    """

    @property
    def name(self) -> str: ...

    @property
    def ignore_failures(self) -> bool: ...

    @property
    def error_reporter(self) -> ErrorReporter: ...

    def is_started(self) -> bool: ...

    def append(self, event: LogEvent) -> None: ...


class AbstractAppender(AbstractFilterable, ABC):
    """Base class for appenders.

    Appenders start in the INITIALIZED state; gates refuse to deliver to them
    until ``start()`` has been called.
    """

    def __init__(
        self,
        name: str | None = None,
        filter: Filter | None = None,
        ignore_failures: bool = True,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        """Initialize the appender.

        Args:
            name: Optional name for the appender. Defaults to the class name.
            filter: Optional filter applied by the appender itself.
            ignore_failures: If False, delivery failures propagate to callers.
            error_reporter: Where delivery problems are reported. Defaults to a
                DefaultErrorReporter writing to the status logger.
        """
        super().__init__(filter)
        self._name = name or self.__class__.__name__
        self._ignore_failures = ignore_failures
        self._error_reporter = error_reporter or DefaultErrorReporter(self._name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def ignore_failures(self) -> bool:
        return self._ignore_failures

    @property
    def error_reporter(self) -> ErrorReporter:
        return self._error_reporter

    @abstractmethod
    def append(self, event: LogEvent) -> None:
        """Write a single event.

        Args:
            event: The event to write.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, state={self.state.name})"
