"""Core data models for log normalization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import LevelParseError

FUNCTION_ORIGIN = "function"


class LogLevel(str, Enum):
    """Severity levels emitted by the supported runtime loggers."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


def parse_level(token: str) -> LogLevel:
    """Parse an exact, case-sensitive severity token."""
    try:
        return LogLevel(token)
    except ValueError as e:
        raise LevelParseError(token) from e


@dataclass(frozen=True, slots=True)
class StructuredLog:
    """Log line reconstructed field by field."""

    timestamp: str | None
    request_id: str | None  # correlation id assigned by the runtime
    level: LogLevel | None
    data: Any


@dataclass(frozen=True, slots=True)
class Unformatted:
    """Result for text lines that were split into a StructuredLog."""

    log: StructuredLog


@dataclass(frozen=True, slots=True)
class Formatted:
    """Result for payloads that were already structured data."""

    value: Any


LogResult = Unformatted | Formatted


class RawRecord(BaseModel):
    """Envelope of one captured log event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    emission_timestamp: str = Field(default="", alias="time", description="Capture time.")
    origin_tag: str = Field(alias="type", description="Emitting source, e.g. 'function'.")
    payload: Any = Field(alias="record", description="Raw text line or structured value.")


def log_result_to_dict(result: LogResult) -> Any:
    """Convert a LogResult into a JSON-serializable value."""
    if isinstance(result, Formatted):
        return result.value
    log = result.log
    return {
        "timestamp": log.timestamp,
        "request_id": log.request_id,
        "level": log.level.value if log.level is not None else None,
        "data": log.data,
    }
