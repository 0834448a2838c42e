"""Level-based filters."""

from sinkgate.core.event import LogEvent
from sinkgate.core.filter import Filter, FilterResult
from sinkgate.core.level import Level


class ThresholdFilter(Filter):
    """Matches events at least as severe as ``level``.

    Args:
        level: Least severe level that matches. Defaults to ERROR.
        on_match: Result for matching events.
        on_mismatch: Result for less severe events.
    """

    def __init__(
        self,
        level: Level = Level.ERROR,
        on_match: FilterResult = FilterResult.NEUTRAL,
        on_mismatch: FilterResult = FilterResult.DENY,
    ) -> None:
        super().__init__(on_match, on_mismatch)
        self.level = level

    def filter(self, event: LogEvent) -> FilterResult:
        return self._result(event.level.is_more_specific_than(self.level))


class LevelRangeFilter(Filter):
    """Matches events whose level lies between two levels, inclusive.

    Args:
        min_level: Most severe bound. Defaults to OFF.
        max_level: Least severe bound. Defaults to ERROR.
    """

    def __init__(
        self,
        min_level: Level = Level.OFF,
        max_level: Level = Level.ERROR,
        on_match: FilterResult = FilterResult.NEUTRAL,
        on_mismatch: FilterResult = FilterResult.DENY,
    ) -> None:
        if min_level.int_level > max_level.int_level:
            raise ValueError(
                f"min_level {min_level} must be at least as severe as max_level {max_level}"
            )
        super().__init__(on_match, on_mismatch)
        self.min_level = min_level
        self.max_level = max_level

    def filter(self, event: LogEvent) -> FilterResult:
        return self._result(event.level.is_in_range(self.min_level, self.max_level))
