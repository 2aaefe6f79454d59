"""Human-readable status and error texts shown to speaker and viewers."""

from __future__ import annotations

STATUS_WAITING_FOR_SPEAKER = "Waiting for speaker to connect..."
STATUS_WAITING_FOR_SPEECH = "Connected — waiting for speech..."
STATUS_UPSTREAM_CONNECTED = "Connected — speak in Spanish..."
STATUS_LISTENING = "Listening — speak in Spanish..."
STATUS_SPEAKER_DISCONNECTED = "Speaker disconnected"

ERROR_SPEAKER_ALREADY_CONNECTED = "A speaker is already connected."
ERROR_UPSTREAM_CONNECTION = "OpenAI connection error"
ERROR_UPSTREAM_FALLBACK = "OpenAI error"

__all__ = [
    "ERROR_SPEAKER_ALREADY_CONNECTED",
    "ERROR_UPSTREAM_CONNECTION",
    "ERROR_UPSTREAM_FALLBACK",
    "STATUS_LISTENING",
    "STATUS_SPEAKER_DISCONNECTED",
    "STATUS_UPSTREAM_CONNECTED",
    "STATUS_WAITING_FOR_SPEAKER",
    "STATUS_WAITING_FOR_SPEECH",
]
