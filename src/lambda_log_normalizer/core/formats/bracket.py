"""Bracketed level parser (Python runtime default logger)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..errors import LevelParseError
from ..models import StructuredLog, Unformatted, parse_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BracketedLevelRecognizer:
    """Parse '[LEVEL]\\t<timestamp> <request id>\\t<message>' lines.

    The whitespace between timestamp and request id varies in width, so it is
    matched as a run rather than a single tab.
    """

    _re = re.compile(
        r"^\[(?P<level>[^\]\s]*)\]\t(?P<ts>\S+)[ \t]+(?P<rid>[^\s]+)\t(?P<msg>.*)$",
        re.DOTALL,
    )

    def recognize(self, payload: str) -> Unformatted | None:
        """Parse a bracketed level line into an Unformatted result."""
        m = self._re.match(payload)
        if not m:
            return None

        try:
            level = parse_level(m.group("level"))
        except LevelParseError as e:
            logger.debug("Bracketed shape with bad level: %s", e)
            return None

        return Unformatted(
            StructuredLog(
                timestamp=m.group("ts"),
                request_id=m.group("rid"),
                level=level,
                data=m.group("msg"),
            )
        )
