"""JSON passthrough parser (.NET runtime logger)."""

from __future__ import annotations

import json
from dataclasses import dataclass

from ..models import Formatted


def _reject_constant(name: str) -> float:
    """NaN and Infinity are not JSON; refuse them instead of decoding to floats."""
    raise ValueError(f"Non-standard JSON constant {name!r}")


@dataclass(frozen=True, slots=True)
class JsonPassthroughRecognizer:
    """Pass payloads that are already JSON documents through unchanged."""

    def recognize(self, payload: str) -> Formatted | None:
        """Return the decoded document; no field extraction is attempted."""
        try:
            value = json.loads(payload, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            # ValueError covers JSONDecodeError and oversized integer literals.
            return None
        return Formatted(value)
