"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    ws_endpoint_path: str


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    url: str
    model: str
    transcription_model: str
    voice: str
    audio_format: str
    sample_rate_hz: int
    open_timeout_s: float
    max_message_bytes: int
    session_instructions: str
    translation_instructions: str


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    upstream: UpstreamSettings


__all__ = [
    "AppSettings",
    "ServerSettings",
    "UpstreamSettings",
]
