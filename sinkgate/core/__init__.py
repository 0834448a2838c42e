"""Core components for sinkgate.

This module exposes the primary types, constants, and utilities:

Types:
    LogEvent: Immutable, validated log event.
    Level: Named severity; lower int_level is more severe.
    DispatchGate: Decides whether an event reaches its appender and contains failures.
    DeliveryOutcome: Result of a single DispatchGate.deliver call.
    Appender: Protocol every appender satisfies.
    AbstractAppender: Base class for appenders.

Filtering:
    Filter: Base class for three-valued event filters.
    FilterResult: ACCEPT, NEUTRAL or DENY.
    CompositeFilter: First non-NEUTRAL child result wins.
    Filterable: Capability of components with their own filter.
    AbstractFilterable: Holds an optional filter.

Failure Handling:
    AppenderLoggingError: The only failure type raised by DispatchGate.deliver.
    ErrorReporter: Protocol for recording delivery problems.
    DefaultErrorReporter: Throttled reporter writing to the status logger.

Constants:
    MAX_CONTEXT_SIZE: Maximum serialized context size in bytes (1MB).
"""

from sinkgate.core.appender import AbstractAppender, Appender
from sinkgate.core.errors import (
    AppenderLoggingError,
    DefaultErrorReporter,
    ErrorReporter,
)
from sinkgate.core.event import MAX_CONTEXT_SIZE, LogEvent
from sinkgate.core.filter import (
    AbstractFilterable,
    CompositeFilter,
    Filter,
    Filterable,
    FilterResult,
)
from sinkgate.core.gate import DeliveryOutcome, DispatchGate
from sinkgate.core.level import Level
from sinkgate.core.lifecycle import LifeCycle, State

__all__ = [
    "LogEvent",
    "MAX_CONTEXT_SIZE",
    "Level",
    "LifeCycle",
    "State",
    "DispatchGate",
    "DeliveryOutcome",
    "Appender",
    "AbstractAppender",
    "Filter",
    "FilterResult",
    "CompositeFilter",
    "Filterable",
    "AbstractFilterable",
    "AppenderLoggingError",
    "ErrorReporter",
    "DefaultErrorReporter",
]
