"""Appender implementations."""

from sinkgate.appenders.inmemory import ListAppender
from sinkgate.appenders.redis_stream import RedisStreamAppender
from sinkgate.appenders.stream import StreamAppender

__all__ = ["ListAppender", "RedisStreamAppender", "StreamAppender"]
