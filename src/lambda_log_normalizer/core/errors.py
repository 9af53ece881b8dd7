"""Normalization error types.

A recognizer declining a payload is not an error; these are raised only when
a record cannot be normalized at all.
"""

from __future__ import annotations

from typing import Any


class NormalizeError(Exception):
    """Base class for per-record normalization failures."""


class LevelParseError(NormalizeError, ValueError):
    """Severity token is not one of INFO, WARN or ERROR."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unable to parse {token!r} as LogLevel")
        self.token = token


class UnsupportedOrigin(NormalizeError):
    """Record was not emitted by a function runtime."""

    def __init__(self, origin_tag: str) -> None:
        super().__init__(f"Unsupported record origin {origin_tag!r}")
        self.origin_tag = origin_tag


class NonTextPayload(NormalizeError):
    """Record payload is structured data where text was expected."""

    def __init__(self, payload: Any) -> None:
        super().__init__(f"Expected text payload, got {type(payload).__name__}: {payload!r}")
        self.payload = payload


class NoFormatMatched(NormalizeError):
    """Every recognizer declined the payload."""

    def __init__(self, payload: str) -> None:
        super().__init__(f"Unable to parse {payload!r}")
        self.payload = payload
