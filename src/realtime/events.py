"""Upstream event names and the logical events they map to."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import orjson

logger = logging.getLogger(__name__)


class UpstreamEventKind(Enum):
    TRANSCRIPTION_COMPLETED = "transcription_completed"
    TRANSLATION_DELTA = "translation_delta"
    TRANSLATION_DONE = "translation_done"
    ITEM_CREATED = "item_created"
    RESPONSE_DONE = "response_done"
    ERROR = "error"


# Several API revisions name the same event differently; add new aliases here.
UPSTREAM_EVENT_KINDS: dict[str, UpstreamEventKind] = {
    "conversation.item.input_audio_transcription.completed": UpstreamEventKind.TRANSCRIPTION_COMPLETED,
    "response.audio_transcript.delta": UpstreamEventKind.TRANSLATION_DELTA,
    "response.output_audio_transcript.delta": UpstreamEventKind.TRANSLATION_DELTA,
    "response.text.delta": UpstreamEventKind.TRANSLATION_DELTA,
    "response.output_text.delta": UpstreamEventKind.TRANSLATION_DELTA,
    "response.audio_transcript.done": UpstreamEventKind.TRANSLATION_DONE,
    "response.output_audio_transcript.done": UpstreamEventKind.TRANSLATION_DONE,
    "response.text.done": UpstreamEventKind.TRANSLATION_DONE,
    "response.output_text.done": UpstreamEventKind.TRANSLATION_DONE,
    "conversation.item.created": UpstreamEventKind.ITEM_CREATED,
    "response.done": UpstreamEventKind.RESPONSE_DONE,
    "error": UpstreamEventKind.ERROR,
}


def classify_event(event: dict[str, Any]) -> UpstreamEventKind | None:
    event_type = event.get("type")
    if not isinstance(event_type, str):
        return None
    return UPSTREAM_EVENT_KINDS.get(event_type)


def parse_upstream_event(raw: str | bytes) -> dict[str, Any] | None:
    """Decode one upstream frame; anything that is not a JSON object yields None."""
    try:
        event = orjson.loads(raw)
    except orjson.JSONDecodeError:
        logger.debug("upstream: dropping non-JSON frame")
        return None
    if not isinstance(event, dict):
        return None
    return event


__all__ = [
    "UPSTREAM_EVENT_KINDS",
    "UpstreamEventKind",
    "classify_event",
    "parse_upstream_event",
]
