"""Normalizer configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum

POLICY_ENV = "LOG_NORMALIZER_POLICY"
MAX_WORKERS_ENV = "LOG_NORMALIZER_MAX_WORKERS"
LOG_LEVEL_ENV = "LOG_NORMALIZER_LOG_LEVEL"


class FailurePolicy(str, Enum):
    """What the batch stage does with records that fail to normalize."""

    DROP = "drop"  # log and leave out of the output
    STRICT = "strict"  # leave out of the output, but report to the caller


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    policy: FailurePolicy = FailurePolicy.DROP
    max_workers: int = 1


def parse_policy(value: str | FailurePolicy) -> FailurePolicy:
    """Parse a policy name (case-insensitive)."""
    if isinstance(value, FailurePolicy):
        return value
    try:
        return FailurePolicy(value.strip().lower())
    except ValueError as e:
        valid = ", ".join(p.value for p in FailurePolicy)
        raise ValueError(f"Unknown failure policy '{value}'. Valid values: {valid}.") from e


def resolve_policy(policy: str | FailurePolicy | None) -> FailurePolicy:
    if policy is not None:
        return parse_policy(policy)

    env = os.getenv(POLICY_ENV)
    if env:
        return parse_policy(env)

    return FailurePolicy.DROP


def resolve_max_workers(max_workers: int | None) -> int:
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return max_workers

    env = os.getenv(MAX_WORKERS_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError(f"{MAX_WORKERS_ENV} must be an integer") from exc
        if value < 1:
            raise ValueError(f"{MAX_WORKERS_ENV} must be >= 1")
        return value

    return 1


def resolve_config(cfg: NormalizerConfig | None = None) -> NormalizerConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = NormalizerConfig()

    if os.getenv(POLICY_ENV):
        cfg = replace(cfg, policy=resolve_policy(None))

    if os.getenv(MAX_WORKERS_ENV):
        cfg = replace(cfg, max_workers=resolve_max_workers(None))

    return cfg
