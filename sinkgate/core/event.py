"""Log event model for sinkgate."""

import json
import re
import threading
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from sinkgate.core.level import Level

# UUID v4 regex pattern for validation
_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# Maximum context size (1MB)
MAX_CONTEXT_SIZE = 1_000_000


class LogEvent(BaseModel):
    """Immutable, validated log event.

    Events are produced upstream by the logging pipeline and only read by
    gates and appenders. They are:
    - Immutable (frozen after creation)
    - Validated (all fields checked on construction)
    - Serializable (JSON-compatible via model_dump_json())

    Attributes:
        id: UUID v4 string, auto-generated if not provided.
        timestamp: UTC datetime, auto-generated if not provided.
        level: Severity of the event. A registered level name is accepted too.
        logger_name: Name of the logger that produced the event.
        message: Formatted message text.
        context: JSON-serializable dictionary (max 1MB when serialized).
        thread_name: Name of the thread that created the event.
        thrown: Formatted exception text, if the event carries one.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    level: Level
    logger_name: str = ""
    message: str = ""
    context: dict[str, Any] = Field(default_factory=dict)
    thread_name: str = Field(default_factory=lambda: threading.current_thread().name)
    thrown: str | None = None

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Ensure id is a valid UUID v4 string."""
        if not _UUID_PATTERN.match(v):
            raise ValueError(f"id must be a valid UUID v4 string, got: {v!r}")
        return v.lower()

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> Any:
        """Resolve level names against the registry."""
        if isinstance(v, str):
            return Level.value_of(v)
        return v

    @field_validator("logger_name")
    @classmethod
    def validate_logger_name(cls, v: str) -> str:
        return v.strip()

    @field_validator("context")
    @classmethod
    def validate_context(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Ensure context is strictly JSON-serializable and within size limits."""
        try:
            serialized = json.dumps(v)
        except (TypeError, ValueError) as e:
            raise ValueError(f"context must be JSON-serializable: {e}") from e

        byte_length = len(serialized.encode("utf-8"))
        if byte_length > MAX_CONTEXT_SIZE:
            raise ValueError(
                f"context exceeds maximum size of {MAX_CONTEXT_SIZE} bytes "
                f"(got {byte_length} bytes)"
            )
        return v
