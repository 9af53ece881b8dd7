"""Recognizer composition utilities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import NoFormatMatched
from ..models import LogResult
from .base import Recognizer


@dataclass(frozen=True, slots=True)
class Dispatcher:
    """Try recognizers in order and return the first successful result."""

    recognizers: Sequence[Recognizer]

    def recognize(self, payload: str) -> LogResult | None:
        """Return the first successful result, or None if every recognizer declines."""
        for r in self.recognizers:
            out = r.recognize(payload)
            if out is not None:
                return out
        return None

    def dispatch(self, payload: str) -> LogResult:
        """Like recognize, but raise NoFormatMatched instead of declining."""
        out = self.recognize(payload)
        if out is None:
            raise NoFormatMatched(payload)
        return out
