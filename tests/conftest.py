from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

NODE_LINE = "2020-11-18T23:52:30.128Z\t6e48723a-1596-4313-a9af-e4da9214d637\tINFO\tHello World\n"
PYTHON_LINE = "[INFO]\t2020-11-18T23:52:30.128Z    6e48723a-1596-4313-a9af-e4da9214d637\tHello World\n"
DOTNET_LINE = '{ "statusCode": 200, "body": "DotNet" }'


@pytest.fixture(autouse=True)
def _clear_normalizer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_NORMALIZER_POLICY", raising=False)
    monkeypatch.delenv("LOG_NORMALIZER_MAX_WORKERS", raising=False)


@pytest.fixture
def envelopes() -> list[dict[str, Any]]:
    return [
        {"time": "2020-11-18T23:52:30.128Z", "type": "function", "record": NODE_LINE},
        {"time": "2020-11-18T23:52:30.129Z", "type": "platform.start", "record": {"requestId": "x"}},
        {"time": "2020-11-18T23:52:30.130Z", "type": "function", "record": PYTHON_LINE},
        {"time": "2020-11-18T23:52:30.131Z", "type": "function", "record": "Bad log"},
        {"time": "2020-11-18T23:52:30.132Z", "type": "function", "record": DOTNET_LINE},
        {"time": "2020-11-18T23:52:30.133Z", "type": "function", "record": {"already": "json"}},
    ]


@pytest.fixture
def write_jsonl() -> Callable[[Path, list[dict[str, Any]]], None]:
    def _write(path: Path, items: list[dict[str, Any]]) -> None:
        path.write_text("\n".join(json.dumps(i) for i in items) + "\n", encoding="utf-8")

    return _write
