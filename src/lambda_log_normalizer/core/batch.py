"""Batch normalization of captured log records.

This module is the main integration point: it filters raw records down to
function logs and routes each payload through the recognizer chain.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .config import FailurePolicy, resolve_max_workers, resolve_policy
from .errors import NonTextPayload, NormalizeError, UnsupportedOrigin
from .formats import Dispatcher, default_dispatcher
from .models import FUNCTION_ORIGIN, LogResult, RawRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecordFailure:
    """A record that could not be normalized, with its position in the batch."""

    index: int
    record: RawRecord
    error: NormalizeError


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Output of one batch: results in input order plus what was left out."""

    results: list[LogResult]
    failures: list[RecordFailure] = field(default_factory=list)  # strict policy only
    excluded: int = 0


def normalize_record(record: RawRecord, dispatcher: Dispatcher | None = None) -> LogResult:
    """Normalize a single record or raise a NormalizeError."""
    if record.origin_tag != FUNCTION_ORIGIN:
        raise UnsupportedOrigin(record.origin_tag)
    if not isinstance(record.payload, str):
        raise NonTextPayload(record.payload)
    dispatcher = dispatcher or default_dispatcher()
    return dispatcher.dispatch(record.payload)


def _attempt(record: RawRecord, dispatcher: Dispatcher) -> LogResult | NormalizeError:
    try:
        return normalize_record(record, dispatcher)
    except NormalizeError as e:
        return e


def normalize_batch(
    records: Iterable[RawRecord],
    *,
    dispatcher: Dispatcher | None = None,
    policy: FailurePolicy | str | None = None,
    max_workers: int | None = None,
) -> BatchResult:
    """Normalize every record independently; per-record errors never fail the batch."""
    policy_eff = resolve_policy(policy)
    workers = resolve_max_workers(max_workers)
    dispatcher = dispatcher or default_dispatcher()

    items: Sequence[RawRecord] = list(records)
    if workers > 1 and len(items) > 1:
        # map() yields in submission order, so output order matches input order.
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(lambda r: _attempt(r, dispatcher), items))
    else:
        outcomes = [_attempt(r, dispatcher) for r in items]

    results: list[LogResult] = []
    failures: list[RecordFailure] = []
    excluded = 0
    for index, (record, outcome) in enumerate(zip(items, outcomes)):
        if isinstance(outcome, UnsupportedOrigin):
            logger.info("Excluding record %d: %r", index, record)
            excluded += 1
            continue
        if isinstance(outcome, NormalizeError):
            logger.warning("Dropping record %d: %s", index, outcome)
            if policy_eff is FailurePolicy.STRICT:
                failures.append(RecordFailure(index=index, record=record, error=outcome))
            continue
        results.append(outcome)

    return BatchResult(results=results, failures=failures, excluded=excluded)


def parse(records: Iterable[RawRecord]) -> list[LogResult]:
    """Normalize records, silently dropping anything that fails."""
    return normalize_batch(records, policy=FailurePolicy.DROP, max_workers=1).results
