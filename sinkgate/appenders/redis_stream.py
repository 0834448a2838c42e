"""Redis Streams appender.

Features:
- XADD of each event as JSON into a single stream
- Approximate MAXLEN trimming
- Connection pooling
- Health checks
- Password-masked URLs in logs

The client is created on ``start()``. Gates report delivery to an appender
that was never started (or has been stopped) as a failure.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse, urlunparse

from sinkgate.core.appender import AbstractAppender
from sinkgate.core.errors import AppenderLoggingError, ErrorReporter
from sinkgate.core.event import LogEvent
from sinkgate.core.filter import Filter

logger = logging.getLogger("sinkgate.redis")

DEFAULT_STREAM_KEY = "sinkgate:events"


def _sanitize_url(url: str) -> str:
    """Mask password in Redis URL for logging."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            netloc = f"{parsed.username}:****@{parsed.hostname}"
            if parsed.port:
                netloc += f":{parsed.port}"
            return urlunparse(
                (parsed.scheme, netloc, parsed.path, parsed.params, parsed.query, parsed.fragment)
            )
        return f"{parsed.hostname}:{parsed.port or 6379}"
    except ValueError:
        return "<url>"


@dataclass
class AppenderHealth:
    """Health check result."""

    healthy: bool
    latency_ms: float
    details: dict[str, Any]


class RedisStreamAppender(AbstractAppender):
    """Appends events to a Redis stream.

    Args:
        redis_url: Redis connection URL.
        stream_key: Stream key events are added to.
        maxlen: Approximate stream length cap. None disables trimming.
        pool_size: Connection pool size.
        client: Pre-built client exposing ``xadd``/``ping``/``close``. When
            given, ``redis_url`` and ``pool_size`` are ignored and the client
            is not closed on stop.
    """

    def __init__(
        self,
        name: str | None = None,
        redis_url: str = "redis://localhost:6379",
        stream_key: str = DEFAULT_STREAM_KEY,
        maxlen: int | None = 100_000,
        pool_size: int = 10,
        client: Any = None,
        filter: Filter | None = None,
        ignore_failures: bool = True,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        super().__init__(name, filter, ignore_failures, error_reporter)
        self._url = redis_url
        self._url_safe = _sanitize_url(redis_url)
        self.stream_key = stream_key
        self.maxlen = maxlen
        self._pool_size = pool_size
        self._owns_client = client is None
        self._redis: Any = client

    @property
    def redis_url(self) -> str:
        return self._url

    def _connect(self) -> Any:
        try:
            from redis import ConnectionPool, Redis
        except ImportError as e:
            raise ImportError("Install redis: pip install sinkgate[redis]") from e

        pool = ConnectionPool.from_url(
            self._url, max_connections=self._pool_size, decode_responses=True
        )
        client = Redis(connection_pool=pool)
        try:
            client.ping()
        except Exception:
            client.close()
            raise
        logger.info(f"Connected to Redis at {self._url_safe}", extra={"appender": self.name})
        return client

    def start(self) -> None:
        if self._redis is None:
            self._redis = self._connect()
        super().start()

    def stop(self) -> None:
        super().stop()
        if self._owns_client and self._redis is not None:
            try:
                self._redis.close()
            except Exception as e:
                logger.debug(f"Error closing Redis connection: {e}", extra={"appender": self.name})
            self._redis = None

    def append(self, event: LogEvent) -> None:
        client = self._redis
        if client is None:
            raise AppenderLoggingError(
                f"Redis client for {self.name} is not connected", appender_name=self.name
            )
        kwargs: dict[str, Any] = {}
        if self.maxlen is not None:
            kwargs["maxlen"] = self.maxlen
            kwargs["approximate"] = True
        client.xadd(
            self.stream_key,
            {"event_id": event.id, "level": event.level.name, "data": event.model_dump_json()},
            **kwargs,
        )

    def health_check(self) -> AppenderHealth:
        """Ping the server and report latency."""
        client = self._redis
        if client is None:
            return AppenderHealth(healthy=False, latency_ms=0.0, details={"error": "not connected"})
        start = time.perf_counter()
        try:
            client.ping()
        except Exception as e:
            return AppenderHealth(
                healthy=False,
                latency_ms=(time.perf_counter() - start) * 1000,
                details={"error": str(e), "url": self._url_safe},
            )
        return AppenderHealth(
            healthy=True,
            latency_ms=(time.perf_counter() - start) * 1000,
            details={"url": self._url_safe, "stream_key": self.stream_key},
        )
