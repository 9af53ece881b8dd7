"""Normalize runtime log lines captured by a cloud log service into one record shape."""

from __future__ import annotations

from lambda_log_normalizer.core.batch import BatchResult, RecordFailure, normalize_batch, parse
from lambda_log_normalizer.core.config import FailurePolicy
from lambda_log_normalizer.core.models import (
    Formatted,
    LogLevel,
    LogResult,
    RawRecord,
    StructuredLog,
    Unformatted,
)

__all__ = [
    "BatchResult",
    "FailurePolicy",
    "Formatted",
    "LogLevel",
    "LogResult",
    "RawRecord",
    "RecordFailure",
    "StructuredLog",
    "Unformatted",
    "normalize_batch",
    "parse",
]
