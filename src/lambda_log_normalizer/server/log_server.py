"""MCP server entrypoint (stdio transport).

Exposes the log normalizer as an MCP tool so clients can hand over captured
log records and receive normalized entries.

Run locally (stdio):
    python -m lambda_log_normalizer.server.log_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from lambda_log_normalizer.core.config import LOG_LEVEL_ENV
from lambda_log_normalizer.tools.normalize import normalize_logs_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("log-normalizer", json_response=True)


@mcp.tool()
async def normalize_logs(
    records: list[dict[str, Any]] | None = None,
    log_path: str | None = None,
    policy: str | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Normalize captured runtime log records into structured entries.

    Parameters
    ----------
    records:
        Raw envelopes, each shaped like {"time": str, "type": str, "record": str | object}.
        Only records with type "function" and a text record are normalized.
    log_path:
        Path to a local file holding a JSON array or JSON lines of envelopes (.gz supported).
        Use either records or log_path.
    policy:
        "drop" (default) leaves failing records out silently; "strict" also returns them
        under "failures".
    limit:
        Maximum number of results returned (hard-capped in the implementation).

    Returns
    -------
    dict:
        {"count": int, "results": list, "failures": list[dict], "excluded": int}
    """
    return await normalize_logs_impl(records=records, log_path=log_path, policy=policy, limit=limit)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
