"""Load raw log records from a local file.

Accepts either a JSON array of envelopes or JSON lines; plain text or .gz.
"""

from __future__ import annotations

import gzip
import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap
from pydantic import ValidationError

from .models import RawRecord


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str):
    """Open a record file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding) as f:
            yield f


def _to_record(obj: object, *, where: str) -> RawRecord:
    try:
        return RawRecord.model_validate(obj)
    except ValidationError as e:
        raise ValueError(f"Invalid log record at {where}: {e}") from e


async def iter_records(log_path: str | Path, *, encoding: str = "utf-8") -> AsyncIterator[RawRecord]:
    """Yield RawRecord envelopes from a JSON array or JSON-lines file."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Record file not found: {path}")

    async with _open_text(path, encoding=encoding) as f:
        text = await f.read()

    stripped = text.lstrip()
    if stripped.startswith("["):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON array in {path}: {e}") from e
        for i, obj in enumerate(data):
            yield _to_record(obj, where=f"item {i}")
        return

    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON at line {line_no}: {e}") from e
        yield _to_record(obj, where=f"line {line_no}")


async def load_records(log_path: str | Path, **kwargs) -> list[RawRecord]:
    """Collect iter_records into a list."""
    return [r async for r in iter_records(log_path, **kwargs)]
