"""Filter implementations."""

from sinkgate.core.filter import CompositeFilter
from sinkgate.filters.level import LevelRangeFilter, ThresholdFilter
from sinkgate.filters.regex import RegexFilter

__all__ = ["CompositeFilter", "LevelRangeFilter", "RegexFilter", "ThresholdFilter"]
