from __future__ import annotations

import json

import pytest

from src.handlers.websocket.parser import parse_speaker_message


def test_parse_speaker_message_ok() -> None:
    msg = parse_speaker_message(json.dumps({"type": " start ", "apiKey": "sk-test"}))
    assert msg == {"type": "start", "apiKey": "sk-test"}


def test_parse_speaker_message_accepts_bytes() -> None:
    msg = parse_speaker_message(json.dumps({"type": "audio", "audio": "AAAA"}).encode())
    assert msg["audio"] == "AAAA"


@pytest.mark.parametrize("msg_type", ["commit", "stop", "unknown"])
def test_parse_speaker_message_without_payload(msg_type: str) -> None:
    assert parse_speaker_message(json.dumps({"type": msg_type}))["type"] == msg_type


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "",
        json.dumps([]),
        json.dumps("start"),
        json.dumps({}),
        json.dumps({"type": ""}),
        json.dumps({"type": 3}),
        json.dumps({"type": "start"}),
        json.dumps({"type": "start", "apiKey": ""}),
        json.dumps({"type": "start", "apiKey": 42}),
        json.dumps({"type": "audio"}),
        json.dumps({"type": "audio", "audio": "   "}),
    ],
)
def test_parse_speaker_message_invalid(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_speaker_message(raw)
