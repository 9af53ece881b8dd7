"""Recognizer interface."""

from __future__ import annotations

from typing import Protocol

from ..models import LogResult


class Recognizer(Protocol):
    """Recognizer interface: return a LogResult if the payload matches, else None."""

    def recognize(self, payload: str) -> LogResult | None:
        """Interpret the payload under one log-line shape, or decline."""
        ...
