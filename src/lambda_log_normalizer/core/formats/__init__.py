"""Log line recognizers and the dispatch chain.

Contains parsers for the runtime logger formats (tab-delimited, bracketed level, JSON).
"""

from __future__ import annotations

from .base import Recognizer
from .bracket import BracketedLevelRecognizer
from .composite import Dispatcher
from .passthrough import JsonPassthroughRecognizer
from .tab import TabDelimitedRecognizer


def default_dispatcher() -> Dispatcher:
    """Default recognizer chain (first match wins).

    Shape-specific recognizers come first; JSON is the most permissive and goes last.
    """
    return Dispatcher(
        recognizers=[
            TabDelimitedRecognizer(),
            BracketedLevelRecognizer(),
            JsonPassthroughRecognizer(),
        ]
    )


__all__ = [
    "BracketedLevelRecognizer",
    "Dispatcher",
    "JsonPassthroughRecognizer",
    "Recognizer",
    "TabDelimitedRecognizer",
    "default_dispatcher",
]
