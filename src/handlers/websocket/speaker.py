"""Speaker connection: exclusivity and the command loop."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from src.handlers.session import RelaySession
from src.config.websocket import WS_CLOSE_BUSY_CODE
from src.config.messages import ERROR_SPEAKER_ALREADY_CONNECTED

from .dispatch import HANDLERS
from .frames import receive_frame
from .errors import reject_connection
from .parser import parse_speaker_message

logger = logging.getLogger(__name__)


async def run_speaker_loop(ws: WebSocket, relay: RelaySession) -> None:
    while True:
        raw = await receive_frame(ws)
        if raw is None:
            return

        try:
            msg = parse_speaker_message(raw)
        except ValueError as exc:
            logger.warning("speaker: ignoring malformed message: %s", exc)
            continue

        handler = HANDLERS.get(msg["type"])
        if handler is None:
            logger.debug("speaker: ignoring unsupported message type '%s'", msg["type"])
            continue
        await handler(relay, msg)


async def handle_speaker(ws: WebSocket, relay: RelaySession) -> None:
    # Claim before accepting so a client that sees the handshake complete also sees the slot taken.
    if not relay.claim_speaker(ws):
        await ws.accept()
        logger.info("speaker: rejecting second speaker connection")
        await reject_connection(ws, message=ERROR_SPEAKER_ALREADY_CONNECTED, close_code=WS_CLOSE_BUSY_CODE)
        return

    try:
        await ws.accept()
        logger.info("speaker: connected. Viewers: %s", relay.viewers.get_viewer_count())
        await run_speaker_loop(ws, relay)
    finally:
        await relay.release_speaker(ws)
        logger.info("speaker: disconnected. Viewers: %s", relay.viewers.get_viewer_count())


__all__ = ["handle_speaker", "run_speaker_loop"]
