"""Message pattern filter."""

import re

from sinkgate.core.event import LogEvent
from sinkgate.core.filter import Filter, FilterResult


class RegexFilter(Filter):
    """Matches events whose whole message matches ``pattern``.

    Args:
        pattern: Regular expression, compiled once.
        on_match: Result for matching events.
        on_mismatch: Result for the rest.
    """

    def __init__(
        self,
        pattern: str | re.Pattern[str],
        on_match: FilterResult = FilterResult.NEUTRAL,
        on_mismatch: FilterResult = FilterResult.DENY,
    ) -> None:
        super().__init__(on_match, on_mismatch)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def filter(self, event: LogEvent) -> FilterResult:
        return self._result(self.pattern.fullmatch(event.message) is not None)
