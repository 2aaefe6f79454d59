"""Builders for the events broadcast to the speaker and viewers."""

from __future__ import annotations

from typing import Any

from src.config.websocket import (
    WS_KEY_TEXT,
    WS_KEY_TYPE,
    WS_KEY_DELTA,
    WS_EVENT_ERROR,
    WS_KEY_MESSAGE,
    WS_EVENT_STATUS,
    WS_EVENT_SPANISH,
    WS_EVENT_ENGLISH_DONE,
    WS_EVENT_ENGLISH_DELTA,
    WS_EVENT_SESSION_ENDED,
)


def status_event(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_EVENT_STATUS, WS_KEY_MESSAGE: message}


def error_event(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_EVENT_ERROR, WS_KEY_MESSAGE: message}


def session_ended_event() -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_EVENT_SESSION_ENDED}


def spanish_event(text: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_EVENT_SPANISH, WS_KEY_TEXT: text}


def english_delta_event(delta: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_EVENT_ENGLISH_DELTA, WS_KEY_DELTA: delta}


def english_done_event() -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_EVENT_ENGLISH_DONE}


__all__ = [
    "english_delta_event",
    "english_done_event",
    "error_event",
    "session_ended_event",
    "spanish_event",
    "status_event",
]
