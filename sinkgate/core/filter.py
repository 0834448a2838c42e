"""Filter primitives.

Filters answer ACCEPT, NEUTRAL or DENY for an event. Gates and appenders
hold at most one filter; adding a second one promotes it to a
``CompositeFilter``.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol, runtime_checkable

from sinkgate.core.event import LogEvent
from sinkgate.core.lifecycle import LifeCycle


class FilterResult(Enum):
    """Three-valued filter decision."""

    ACCEPT = "accept"
    NEUTRAL = "neutral"
    DENY = "deny"


class Filter(LifeCycle, ABC):
    """Base class for event filters.

    Args:
        on_match: Result returned when the filter condition holds.
        on_mismatch: Result returned when it does not.
    """

    def __init__(
        self,
        on_match: FilterResult = FilterResult.NEUTRAL,
        on_mismatch: FilterResult = FilterResult.DENY,
    ) -> None:
        super().__init__()
        self.on_match = on_match
        self.on_mismatch = on_mismatch

    @abstractmethod
    def filter(self, event: LogEvent) -> FilterResult:
        """Decide what happens to ``event``."""
        ...

    def _result(self, matched: bool) -> FilterResult:
        return self.on_match if matched else self.on_mismatch

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(on_match={self.on_match.name}, on_mismatch={self.on_mismatch.name})"


class CompositeFilter(Filter):
    """Ordered chain of filters; the first ACCEPT or DENY wins."""

    def __init__(self, filters: list[Filter] | None = None) -> None:
        super().__init__()
        self._filters: list[Filter] = list(filters or [])

    @property
    def filters(self) -> list[Filter]:
        return list(self._filters)

    def is_empty(self) -> bool:
        return not self._filters

    def add(self, filter: Filter) -> "CompositeFilter":
        if isinstance(filter, CompositeFilter):
            self._filters.extend(filter.filters)
        else:
            self._filters.append(filter)
        return self

    def remove(self, filter: Filter) -> "CompositeFilter":
        try:
            self._filters.remove(filter)
        except ValueError:
            pass
        return self

    def start(self) -> None:
        for child in self._filters:
            child.start()
        super().start()

    def stop(self) -> None:
        for child in self._filters:
            child.stop()
        super().stop()

    def filter(self, event: LogEvent) -> FilterResult:
        for child in self._filters:
            result = child.filter(event)
            if result is not FilterResult.NEUTRAL:
                return result
        return FilterResult.NEUTRAL

    def __len__(self) -> int:
        return len(self._filters)


@runtime_checkable
class Filterable(Protocol):
    """Capability of components that apply their own filter to events."""

    def is_filtered(self, event: LogEvent) -> bool: ...


class AbstractFilterable(LifeCycle):
    """Holds an optional filter and cascades lifecycle calls to it."""

    def __init__(self, filter: Filter | None = None) -> None:
        super().__init__()
        self._filter = filter

    @property
    def filter(self) -> Filter | None:
        return self._filter

    def has_filter(self) -> bool:
        return self._filter is not None

    def add_filter(self, filter: Filter) -> None:
        """Attach a filter, promoting to a CompositeFilter on the second one."""
        if self._filter is None:
            self._filter = filter
        elif isinstance(self._filter, CompositeFilter):
            self._filter.add(filter)
        else:
            self._filter = CompositeFilter([self._filter, filter])
        if self.is_started() and not filter.is_started():
            filter.start()

    def remove_filter(self, filter: Filter) -> None:
        if self._filter is None:
            return
        if self._filter is filter:
            self._filter = None
        elif isinstance(self._filter, CompositeFilter):
            self._filter.remove(filter)
            if len(self._filter) == 1:
                self._filter = self._filter.filters[0]
            elif self._filter.is_empty():
                self._filter = None

    def is_filtered(self, event: LogEvent) -> bool:
        """Return True only when the filter explicitly denies the event."""
        return self._filter is not None and self._filter.filter(event) is FilterResult.DENY

    def start(self) -> None:
        if self._filter is not None:
            self._filter.start()
        super().start()

    def stop(self) -> None:
        if self._filter is not None:
            self._filter.stop()
        super().stop()
