from __future__ import annotations

from src.realtime.commands import (
    commit_command,
    delete_item_command,
    append_audio_command,
    session_update_command,
    response_create_command,
)


def test_session_update_command(upstream_settings) -> None:
    command = session_update_command(upstream_settings)
    assert command["type"] == "session.update"
    session = command["session"]
    assert session["type"] == "realtime"
    assert session["instructions"] == upstream_settings.session_instructions
    assert session["output_modalities"] == ["text"]
    assert session["audio"]["input"] == {
        "format": {"type": "audio/pcm", "rate": 24000},
        "transcription": {"model": "whisper-1"},
        "turn_detection": None,
    }
    assert session["audio"]["output"] == {"format": {"type": "audio/pcm", "rate": 24000}, "voice": "alloy"}


def test_audio_buffer_commands() -> None:
    assert append_audio_command("AAAA") == {"type": "input_audio_buffer.append", "audio": "AAAA"}
    assert commit_command() == {"type": "input_audio_buffer.commit"}


def test_response_and_delete_commands() -> None:
    assert response_create_command("translate") == {
        "type": "response.create",
        "response": {"instructions": "translate"},
    }
    assert delete_item_command("item_1") == {"type": "conversation.item.delete", "item_id": "item_1"}
