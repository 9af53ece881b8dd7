"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from lambda_log_normalizer.core.batch import RecordFailure, normalize_batch
from lambda_log_normalizer.core.models import RawRecord, log_result_to_dict
from lambda_log_normalizer.core.reader import load_records

DEFAULT_LIMIT = 1000
HARD_LIMIT = 10000


def _failure_to_dict(failure: RecordFailure) -> dict[str, Any]:
    """Convert a RecordFailure into a JSON-serializable dict."""
    return {
        "index": failure.index,
        "error": type(failure.error).__name__,
        "message": str(failure.error),
        "record": failure.record.model_dump(by_alias=True),
    }


def _coerce_records(records: Sequence[dict[str, Any]]) -> list[RawRecord]:
    out: list[RawRecord] = []
    for i, obj in enumerate(records):
        try:
            out.append(RawRecord.model_validate(obj))
        except ValidationError as e:
            raise ValueError(f"Invalid log record at index {i}: {e}") from e
    return out


async def normalize_logs_impl(
    *,
    records: Sequence[dict[str, Any]] | None = None,
    log_path: str | None = None,
    policy: str | None = None,
    limit: int | None = None,
    max_workers: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `normalize_logs` MCP tool.

    Notes
    -----
    - Exactly one of records / log_path must be given.
    - limit caps the number of returned results and failures (hard-capped at HARD_LIMIT).
    - failures is only populated under the strict policy.
    """
    if (records is None) == (log_path is None):
        raise ValueError("Provide exactly one of records or log_path.")

    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    if limit > HARD_LIMIT:
        limit = HARD_LIMIT

    if log_path is not None:
        raw = await load_records(log_path)
    else:
        raw = _coerce_records(records or [])

    batch = normalize_batch(raw, policy=policy, max_workers=max_workers)
    results = batch.results[:limit]

    return {
        "count": len(results),
        "results": [log_result_to_dict(r) for r in results],
        "failures": [_failure_to_dict(f) for f in batch.failures[:limit]],
        "excluded": batch.excluded,
    }
