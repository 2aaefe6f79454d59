"""Builders for commands sent to the OpenAI Realtime service."""

from __future__ import annotations

from typing import Any

from src.state.settings import UpstreamSettings


def session_update_command(settings: UpstreamSettings) -> dict[str, Any]:
    # turn_detection is disabled: turn boundaries come from the speaker's explicit commit.
    pcm_format = {"type": settings.audio_format, "rate": settings.sample_rate_hz}
    return {
        "type": "session.update",
        "session": {
            "type": "realtime",
            "instructions": settings.session_instructions,
            "output_modalities": ["text"],
            "audio": {
                "input": {
                    "format": pcm_format,
                    "transcription": {"model": settings.transcription_model},
                    "turn_detection": None,
                },
                "output": {
                    "format": dict(pcm_format),
                    "voice": settings.voice,
                },
            },
        },
    }


def append_audio_command(audio: str) -> dict[str, Any]:
    return {"type": "input_audio_buffer.append", "audio": audio}


def commit_command() -> dict[str, Any]:
    return {"type": "input_audio_buffer.commit"}


def response_create_command(instructions: str) -> dict[str, Any]:
    return {"type": "response.create", "response": {"instructions": instructions}}


def delete_item_command(item_id: str) -> dict[str, Any]:
    return {"type": "conversation.item.delete", "item_id": item_id}


__all__ = [
    "append_audio_command",
    "commit_command",
    "delete_item_command",
    "response_create_command",
    "session_update_command",
]
