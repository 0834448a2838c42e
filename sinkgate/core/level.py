"""Severity levels for sinkgate events.

Lower ``int_level`` means more severe. ``OFF`` is the most severe synthetic
level and ``ALL`` the least restrictive one.
"""

import threading
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

# Same ceiling as a 32-bit signed int so custom levels stay below ALL
ALL_INT_LEVEL = 2_147_483_647

_LEVELS: dict[str, "Level"] = {}
_LEVELS_LOCK = threading.Lock()


class Level(BaseModel):
    """Immutable, named severity.

    Attributes:
        name: Upper-case level name, unique across the registry.
        int_level: Numeric severity, lower is more severe.
    """

    name: str
    int_level: int = Field(ge=0)

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    OFF: ClassVar["Level"]
    FATAL: ClassVar["Level"]
    ERROR: ClassVar["Level"]
    WARN: ClassVar["Level"]
    INFO: ClassVar["Level"]
    DEBUG: ClassVar["Level"]
    TRACE: ClassVar["Level"]
    ALL: ClassVar["Level"]

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("level name must not be empty")
        return v

    def __str__(self) -> str:
        return self.name

    def is_more_specific_than(self, other: "Level") -> bool:
        """Return True if this level is at least as severe as ``other``."""
        return self.int_level <= other.int_level

    def is_less_specific_than(self, other: "Level") -> bool:
        """Return True if this level is at most as severe as ``other``."""
        return self.int_level >= other.int_level

    def is_in_range(self, min_level: "Level", max_level: "Level") -> bool:
        """Check whether this level lies between two levels, inclusive.

        ``min_level`` is the most severe bound (e.g. ERROR) and ``max_level``
        the least severe one (e.g. DEBUG).
        """
        return min_level.int_level <= self.int_level <= max_level.int_level

    @classmethod
    def for_name(cls, name: str, int_level: int) -> "Level":
        """Return the registered level for ``name``, creating it if needed.

        Raises:
            ValueError: If ``name`` is already registered with a different int_level.
        """
        level = cls(name=name, int_level=int_level)
        with _LEVELS_LOCK:
            existing = _LEVELS.get(level.name)
            if existing is None:
                _LEVELS[level.name] = level
                return level
        if existing.int_level != level.int_level:
            raise ValueError(
                f"level {level.name} already registered with int_level "
                f"{existing.int_level}, got {level.int_level}"
            )
        return existing

    @classmethod
    def value_of(cls, name: str) -> "Level":
        """Look up a registered level by name (case-insensitive).

        Raises:
            ValueError: If no level with that name exists.
        """
        level = _LEVELS.get(name.strip().upper())
        if level is None:
            raise ValueError(f"unknown level: {name!r}")
        return level

    @classmethod
    def to_level(cls, name: str | None, default: "Level | None" = None) -> "Level | None":
        if name is None:
            return default
        return _LEVELS.get(name.strip().upper(), default)

    @classmethod
    def values(cls) -> list["Level"]:
        """Registered levels, most severe first."""
        return sorted(_LEVELS.values(), key=lambda level: level.int_level)


Level.OFF = Level.for_name("OFF", 0)
Level.FATAL = Level.for_name("FATAL", 100)
Level.ERROR = Level.for_name("ERROR", 200)
Level.WARN = Level.for_name("WARN", 300)
Level.INFO = Level.for_name("INFO", 400)
Level.DEBUG = Level.for_name("DEBUG", 500)
Level.TRACE = Level.for_name("TRACE", 600)
Level.ALL = Level.for_name("ALL", ALL_INT_LEVEL)
