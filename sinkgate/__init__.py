"""sinkgate - guarded dispatch of log events to appenders."""

from sinkgate.appenders import ListAppender, RedisStreamAppender, StreamAppender
from sinkgate.core import (
    AbstractAppender,
    AbstractFilterable,
    Appender,
    AppenderLoggingError,
    CompositeFilter,
    DefaultErrorReporter,
    DeliveryOutcome,
    DispatchGate,
    ErrorReporter,
    Filter,
    Filterable,
    FilterResult,
    Level,
    LifeCycle,
    LogEvent,
    State,
)
from sinkgate.filters import LevelRangeFilter, RegexFilter, ThresholdFilter

__version__ = "0.1.0"

__all__ = [
    # Core
    "LogEvent",
    "Level",
    "LifeCycle",
    "State",
    "DispatchGate",
    "DeliveryOutcome",
    # Appenders
    "Appender",
    "AbstractAppender",
    "ListAppender",
    "StreamAppender",
    "RedisStreamAppender",
    # Filters
    "Filter",
    "FilterResult",
    "Filterable",
    "AbstractFilterable",
    "CompositeFilter",
    "ThresholdFilter",
    "LevelRangeFilter",
    "RegexFilter",
    # Failure handling
    "AppenderLoggingError",
    "ErrorReporter",
    "DefaultErrorReporter",
    # Meta
    "__version__",
]
