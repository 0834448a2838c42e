"""Pytest configuration, Hypothesis profiles and shared test doubles."""

import pytest
from hypothesis import settings

from sinkgate.core.event import LogEvent
from sinkgate.core.level import Level

# Register Hypothesis profiles
settings.register_profile("ci", max_examples=100)
settings.register_profile("dev", max_examples=20)

# Load dev profile by default, CI can override via --hypothesis-profile=ci
settings.load_profile("dev")


class RecordingReporter:
    """Error reporter that keeps every report."""

    def __init__(self):
        self.reports: list[tuple[str, BaseException | None]] = []

    def report(self, message: str, cause: BaseException | None = None) -> None:
        self.reports.append((message, cause))

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.reports]


class FakeAppender:
    """Appender satisfying the protocol without any base class.

    It is deliberately not Filterable.
    """

    def __init__(
        self,
        name: str = "fake",
        started: bool = True,
        ignore_failures: bool = True,
        error: Exception | None = None,
    ):
        self._name = name
        self._started = started
        self._ignore_failures = ignore_failures
        self._reporter = RecordingReporter()
        self.error = error
        self.appended: list[LogEvent] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def ignore_failures(self) -> bool:
        return self._ignore_failures

    @property
    def error_reporter(self) -> RecordingReporter:
        return self._reporter

    def is_started(self) -> bool:
        return self._started

    def append(self, event: LogEvent) -> None:
        self.appended.append(event)
        if self.error is not None:
            raise self.error


def make_event(level: Level = Level.INFO, message: str = "hello", **kwargs) -> LogEvent:
    return LogEvent(level=level, logger_name="test", message=message, **kwargs)


@pytest.fixture
def appender() -> FakeAppender:
    return FakeAppender()
