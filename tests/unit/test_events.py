from __future__ import annotations

import pytest

from src.realtime.events import UPSTREAM_EVENT_KINDS, UpstreamEventKind, classify_event, parse_upstream_event


def test_delta_and_done_aliases_are_registered() -> None:
    deltas = [k for k, v in UPSTREAM_EVENT_KINDS.items() if v is UpstreamEventKind.TRANSLATION_DELTA]
    dones = [k for k, v in UPSTREAM_EVENT_KINDS.items() if v is UpstreamEventKind.TRANSLATION_DONE]
    assert len(deltas) == 4
    assert len(dones) == 4
    assert all(name.endswith(".delta") for name in deltas)
    assert all(name.endswith(".done") for name in dones)


@pytest.mark.parametrize(
    ("event", "kind"),
    [
        ({"type": "conversation.item.input_audio_transcription.completed"}, UpstreamEventKind.TRANSCRIPTION_COMPLETED),
        ({"type": "response.output_text.delta"}, UpstreamEventKind.TRANSLATION_DELTA),
        ({"type": "response.audio_transcript.done"}, UpstreamEventKind.TRANSLATION_DONE),
        ({"type": "conversation.item.created"}, UpstreamEventKind.ITEM_CREATED),
        ({"type": "response.done"}, UpstreamEventKind.RESPONSE_DONE),
        ({"type": "error"}, UpstreamEventKind.ERROR),
        ({"type": "session.updated"}, None),
        ({"type": None}, None),
        ({}, None),
    ],
)
def test_classify_event(event, kind) -> None:
    assert classify_event(event) is kind


def test_parse_upstream_event() -> None:
    assert parse_upstream_event('{"type":"response.done"}') == {"type": "response.done"}
    assert parse_upstream_event(b'{"type":"error"}') == {"type": "error"}
    assert parse_upstream_event("nope") is None
    assert parse_upstream_event("[]") is None
