"""Dispatch handlers for speaker control and audio messages."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

from src.handlers.session import RelaySession
from src.config.websocket import (
    WS_KEY_AUDIO,
    WS_TYPE_STOP,
    WS_TYPE_AUDIO,
    WS_TYPE_START,
    WS_KEY_API_KEY,
    WS_TYPE_COMMIT,
)

logger = logging.getLogger(__name__)

HandlerFn = Callable[[RelaySession, dict[str, Any]], Awaitable[None]]


async def _handle_start(relay: RelaySession, msg: dict[str, Any]) -> None:
    await relay.start_upstream(msg[WS_KEY_API_KEY].strip())


async def _handle_audio(relay: RelaySession, msg: dict[str, Any]) -> None:
    # Audio sent before the upstream is active is dropped without telling the speaker.
    await relay.send_audio(msg[WS_KEY_AUDIO])


async def _handle_commit(relay: RelaySession, _msg: dict[str, Any]) -> None:
    if not await relay.commit_audio():
        logger.debug("speaker: commit ignored, no active upstream session")


async def _handle_stop(relay: RelaySession, _msg: dict[str, Any]) -> None:
    await relay.end_session()


HANDLERS: dict[str, HandlerFn] = {
    WS_TYPE_START: _handle_start,
    WS_TYPE_AUDIO: _handle_audio,
    WS_TYPE_COMMIT: _handle_commit,
    WS_TYPE_STOP: _handle_stop,
}

__all__ = ["HANDLERS"]
