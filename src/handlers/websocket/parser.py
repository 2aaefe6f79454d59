"""Speaker message parsing/validation."""

from __future__ import annotations

from typing import Any

import orjson

from src.config.websocket import (
    WS_KEY_TYPE,
    WS_KEY_AUDIO,
    WS_TYPE_AUDIO,
    WS_TYPE_START,
    WS_KEY_API_KEY,
)

# Message types that carry a mandatory non-empty string field.
_REQUIRED_STRING_FIELDS: dict[str, str] = {
    WS_TYPE_START: WS_KEY_API_KEY,
    WS_TYPE_AUDIO: WS_KEY_AUDIO,
}


def parse_speaker_message(raw: str | bytes) -> dict[str, Any]:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise ValueError("message missing non-empty 'type'")
    msg_type = msg_type.strip()

    field = _REQUIRED_STRING_FIELDS.get(msg_type)
    if field is not None:
        value = msg.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"'{msg_type}' message missing non-empty '{field}'")

    # Normalize
    msg[WS_KEY_TYPE] = msg_type
    return msg


__all__ = ["parse_speaker_message"]
