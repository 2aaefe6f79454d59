"""Load runtime settings.

Env names and defaults live in `src/config/*`; this module resolves them into
the structured dataclasses the rest of the server consumes.
"""

from __future__ import annotations

import os
import logging

from src.state.settings import AppSettings, ServerSettings, UpstreamSettings
from src.config.server import ENV_HOST, ENV_PORT, DEFAULT_HOST, DEFAULT_PORT
from src.config.websocket import WS_ENDPOINT_PATH
from src.config.upstream import (
    SESSION_INSTRUCTIONS,
    UPSTREAM_AUDIO_FORMAT,
    ENV_OPENAI_REALTIME_URL,
    TRANSLATION_INSTRUCTIONS,
    ENV_OPENAI_REALTIME_MODEL,
    ENV_OPENAI_REALTIME_VOICE,
    DEFAULT_OPENAI_REALTIME_URL,
    ENV_UPSTREAM_SAMPLE_RATE_HZ,
    ENV_UPSTREAM_OPEN_TIMEOUT_S,
    DEFAULT_OPENAI_REALTIME_MODEL,
    DEFAULT_OPENAI_REALTIME_VOICE,
    ENV_OPENAI_TRANSCRIPTION_MODEL,
    ENV_UPSTREAM_MAX_MESSAGE_BYTES,
    DEFAULT_UPSTREAM_SAMPLE_RATE_HZ,
    DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
    DEFAULT_OPENAI_TRANSCRIPTION_MODEL,
    DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES,
)

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        logger.warning("settings: ignoring non-integer %s=%r", name, raw)
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        logger.warning("settings: ignoring non-numeric %s=%r", name, raw)
        return default


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > MAX_PORT:
        port = DEFAULT_PORT
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=port,
        ws_endpoint_path=WS_ENDPOINT_PATH,
    )


def _load_upstream_settings() -> UpstreamSettings:
    sample_rate = _int_env(ENV_UPSTREAM_SAMPLE_RATE_HZ, DEFAULT_UPSTREAM_SAMPLE_RATE_HZ)
    if sample_rate <= 0:
        sample_rate = DEFAULT_UPSTREAM_SAMPLE_RATE_HZ

    open_timeout = _float_env(ENV_UPSTREAM_OPEN_TIMEOUT_S, DEFAULT_UPSTREAM_OPEN_TIMEOUT_S)
    if open_timeout <= 0:
        open_timeout = DEFAULT_UPSTREAM_OPEN_TIMEOUT_S

    max_message_bytes = max(1, _int_env(ENV_UPSTREAM_MAX_MESSAGE_BYTES, DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES))

    return UpstreamSettings(
        url=_str_env(ENV_OPENAI_REALTIME_URL, DEFAULT_OPENAI_REALTIME_URL),
        model=_str_env(ENV_OPENAI_REALTIME_MODEL, DEFAULT_OPENAI_REALTIME_MODEL),
        transcription_model=_str_env(ENV_OPENAI_TRANSCRIPTION_MODEL, DEFAULT_OPENAI_TRANSCRIPTION_MODEL),
        voice=_str_env(ENV_OPENAI_REALTIME_VOICE, DEFAULT_OPENAI_REALTIME_VOICE),
        audio_format=UPSTREAM_AUDIO_FORMAT,
        sample_rate_hz=sample_rate,
        open_timeout_s=open_timeout,
        max_message_bytes=max_message_bytes,
        session_instructions=SESSION_INSTRUCTIONS,
        translation_instructions=TRANSLATION_INSTRUCTIONS,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        server=_load_server_settings(),
        upstream=_load_upstream_settings(),
    )


__all__ = ["load_settings"]
