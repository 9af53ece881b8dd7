from __future__ import annotations

import pytest

from lambda_log_normalizer.core.errors import NoFormatMatched
from lambda_log_normalizer.core.formats import (
    BracketedLevelRecognizer,
    Dispatcher,
    JsonPassthroughRecognizer,
    TabDelimitedRecognizer,
    default_dispatcher,
)
from lambda_log_normalizer.core.models import Formatted, LogLevel, Unformatted

GUID = "6e48723a-1596-4313-a9af-e4da9214d637"
NODE_LINE = f"2020-11-18T23:52:30.128Z\t{GUID}\tINFO\tHello World\n"
PYTHON_LINE = f"[INFO]\t2020-11-18T23:52:30.128Z    {GUID}\tHello World\n"
DOTNET_LINE = '{ "statusCode": 200, "body": "DotNet" }'


def test_tab_delimited_recognizer() -> None:
    out = TabDelimitedRecognizer().recognize(NODE_LINE)
    assert isinstance(out, Unformatted)
    assert out.log.timestamp == "2020-11-18T23:52:30.128Z"
    assert out.log.request_id == GUID
    assert out.log.level == LogLevel.INFO
    assert out.log.data == "Hello World\n"


def test_tab_delimited_message_keeps_tabs_and_newlines() -> None:
    out = TabDelimitedRecognizer().recognize("ts\trid\tERROR\tline one\tcol\nline two\n")
    assert isinstance(out, Unformatted)
    assert out.log.level == LogLevel.ERROR
    assert out.log.data == "line one\tcol\nline two\n"


@pytest.mark.parametrize(
    "payload",
    ["Bad log", "ts\trid\tINFO", "ts\trid\tinfo\tmsg", "ts\trid\tDEBUG\tmsg", PYTHON_LINE],
)
def test_tab_delimited_declines(payload: str) -> None:
    assert TabDelimitedRecognizer().recognize(payload) is None


def test_bracketed_level_recognizer() -> None:
    out = BracketedLevelRecognizer().recognize(PYTHON_LINE)
    assert isinstance(out, Unformatted)
    assert out.log.timestamp == "2020-11-18T23:52:30.128Z"
    assert out.log.request_id == GUID
    assert out.log.level == LogLevel.INFO
    assert out.log.data == "Hello World\n"


@pytest.mark.parametrize("gap", ["\t", " ", "    ", " \t  "])
def test_bracketed_level_whitespace_width_does_not_matter(gap: str) -> None:
    out = BracketedLevelRecognizer().recognize(f"[WARN]\t2020-11-18T23:52:30.128Z{gap}{GUID}\tslow\n")
    assert isinstance(out, Unformatted)
    assert out.log.timestamp == "2020-11-18T23:52:30.128Z"
    assert out.log.request_id == GUID
    assert out.log.level == LogLevel.WARN
    assert out.log.data == "slow\n"


def test_bracketed_level_multiline_message() -> None:
    out = BracketedLevelRecognizer().recognize(f"[ERROR]\tts {GUID}\tTraceback:\n  File x\n")
    assert isinstance(out, Unformatted)
    assert out.log.data == "Traceback:\n  File x\n"


@pytest.mark.parametrize(
    "payload",
    [
        "Bad log",
        f"INFO\tts {GUID}\tmsg",
        f"[INFO ts {GUID}\tmsg",
        f"[DEBUG]\tts {GUID}\tmsg",
        f"[info]\tts {GUID}\tmsg",
        f"[INFO]\tts{GUID}msg",
        f"[INFO]\tts\n{GUID}\tmsg",
        NODE_LINE,
    ],
)
def test_bracketed_level_declines(payload: str) -> None:
    assert BracketedLevelRecognizer().recognize(payload) is None


@pytest.mark.parametrize(
    ("payload", "value"),
    [
        (DOTNET_LINE, {"statusCode": 200, "body": "DotNet"}),
        ("[1, 2, 3]", [1, 2, 3]),
        ("42", 42),
        ('"text"', "text"),
        ("null", None),
    ],
)
def test_json_passthrough_recognizer(payload: str, value: object) -> None:
    out = JsonPassthroughRecognizer().recognize(payload)
    assert isinstance(out, Formatted)
    assert out.value == value


@pytest.mark.parametrize(
    "payload",
    [
        "Bad log",
        "{not json}",
        "",
        PYTHON_LINE,
        "[" * 100000,
        "1" * 5000,
        "NaN",
        "Infinity",
        "-Infinity",
        '{"ratio": NaN}',
    ],
)
def test_json_passthrough_declines(payload: str) -> None:
    assert JsonPassthroughRecognizer().recognize(payload) is None


def test_dispatcher_first_match_wins() -> None:
    class Always:
        def __init__(self, value: object) -> None:
            self.value = value

        def recognize(self, payload: str) -> Formatted:
            return Formatted(self.value)

    class Never:
        def recognize(self, payload: str) -> None:
            return None

    dispatcher = Dispatcher(recognizers=[Never(), Always("first"), Always("second")])
    assert dispatcher.dispatch("anything") == Formatted("first")


def test_dispatcher_raises_when_all_decline() -> None:
    dispatcher = default_dispatcher()
    assert dispatcher.recognize("Bad log") is None
    with pytest.raises(NoFormatMatched) as exc_info:
        dispatcher.dispatch("Bad log")
    assert exc_info.value.payload == "Bad log"


def test_default_dispatcher_order() -> None:
    types = [type(r) for r in default_dispatcher().recognizers]
    assert types == [TabDelimitedRecognizer, BracketedLevelRecognizer, JsonPassthroughRecognizer]


def test_default_dispatcher_examples() -> None:
    dispatcher = default_dispatcher()
    node = dispatcher.dispatch(NODE_LINE)
    python = dispatcher.dispatch(PYTHON_LINE)
    dotnet = dispatcher.dispatch(DOTNET_LINE)
    assert isinstance(node, Unformatted)
    assert isinstance(python, Unformatted)
    assert node.log == python.log
    assert dotnet == Formatted({"statusCode": 200, "body": "DotNet"})


def test_bracketed_line_with_json_message_stays_unformatted() -> None:
    payload = f'[INFO]\t2020-11-18T23:52:30.128Z  {GUID}\t{{"statusCode": 200}}'
    out = default_dispatcher().dispatch(payload)
    assert isinstance(out, Unformatted)
    assert out.log.data == '{"statusCode": 200}'

