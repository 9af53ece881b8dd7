"""Tab-delimited parser (Node.js runtime default logger)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import LevelParseError
from ..models import StructuredLog, Unformatted, parse_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TabDelimitedRecognizer:
    """Parse '<timestamp>\\t<request id>\\t<LEVEL>\\t<message>' lines."""

    separator: str = "\t"

    def recognize(self, payload: str) -> Unformatted | None:
        """Split the payload into four fields; the message keeps any further tabs."""
        parts = payload.split(self.separator, 3)
        if len(parts) < 4:
            return None

        ts, request_id, level_raw, message = parts
        try:
            level = parse_level(level_raw)
        except LevelParseError as e:
            logger.debug("Tab-delimited shape with bad level: %s", e)
            return None

        return Unformatted(
            StructuredLog(timestamp=ts, request_id=request_id, level=level, data=message)
        )
