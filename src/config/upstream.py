"""OpenAI Realtime upstream configuration (env names, defaults and fixed prompts)."""

from __future__ import annotations

ENV_OPENAI_REALTIME_URL = "OPENAI_REALTIME_URL"
ENV_OPENAI_REALTIME_MODEL = "OPENAI_REALTIME_MODEL"
ENV_OPENAI_TRANSCRIPTION_MODEL = "OPENAI_TRANSCRIPTION_MODEL"
ENV_OPENAI_REALTIME_VOICE = "OPENAI_REALTIME_VOICE"
ENV_UPSTREAM_SAMPLE_RATE_HZ = "UPSTREAM_SAMPLE_RATE_HZ"
ENV_UPSTREAM_OPEN_TIMEOUT_S = "UPSTREAM_OPEN_TIMEOUT_S"
ENV_UPSTREAM_MAX_MESSAGE_BYTES = "UPSTREAM_MAX_MESSAGE_BYTES"

DEFAULT_OPENAI_REALTIME_URL = "wss://api.openai.com/v1/realtime"
DEFAULT_OPENAI_REALTIME_MODEL = "gpt-4o-mini-realtime-preview"
DEFAULT_OPENAI_TRANSCRIPTION_MODEL = "whisper-1"
DEFAULT_OPENAI_REALTIME_VOICE = "alloy"
DEFAULT_UPSTREAM_SAMPLE_RATE_HZ = 24000
DEFAULT_UPSTREAM_OPEN_TIMEOUT_S = 10.0
DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES = 16 * 1024 * 1024

# Input and output audio are raw PCM16 (base64 on the wire).
UPSTREAM_AUDIO_FORMAT = "audio/pcm"

SESSION_INSTRUCTIONS = (
    "You are a real-time Spanish to English translator. The user speaks in Spanish. "
    "Translate everything they say into natural, fluent English. Output ONLY the English translation. "
    "Do not repeat the Spanish. Do not add commentary."
)

TRANSLATION_INSTRUCTIONS = (
    "Translate the user audio from Spanish to English. Output ONLY the English translation. "
    "If the audio is unclear or empty, output nothing. "
    "Do NOT generate any text unless there is clear Spanish speech to translate. "
    "Do NOT make up content. Do NOT have a conversation."
)

__all__ = [
    "DEFAULT_OPENAI_REALTIME_MODEL",
    "DEFAULT_OPENAI_REALTIME_URL",
    "DEFAULT_OPENAI_REALTIME_VOICE",
    "DEFAULT_OPENAI_TRANSCRIPTION_MODEL",
    "DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES",
    "DEFAULT_UPSTREAM_OPEN_TIMEOUT_S",
    "DEFAULT_UPSTREAM_SAMPLE_RATE_HZ",
    "ENV_OPENAI_REALTIME_MODEL",
    "ENV_OPENAI_REALTIME_URL",
    "ENV_OPENAI_REALTIME_VOICE",
    "ENV_OPENAI_TRANSCRIPTION_MODEL",
    "ENV_UPSTREAM_MAX_MESSAGE_BYTES",
    "ENV_UPSTREAM_OPEN_TIMEOUT_S",
    "ENV_UPSTREAM_SAMPLE_RATE_HZ",
    "SESSION_INSTRUCTIONS",
    "TRANSLATION_INSTRUCTIONS",
    "UPSTREAM_AUDIO_FORMAT",
]
