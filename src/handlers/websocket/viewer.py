"""Viewer connection: join status, then receive-only until the client leaves."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from src.handlers.session import RelaySession
from src.realtime.outbound import status_event
from src.config.messages import STATUS_WAITING_FOR_SPEECH, STATUS_WAITING_FOR_SPEAKER

from .frames import receive_frame
from .errors import safe_send_event

logger = logging.getLogger(__name__)


async def handle_viewer(ws: WebSocket, relay: RelaySession) -> None:
    relay.viewers.add(ws)
    try:
        await ws.accept()
        logger.info("viewer: connected. Viewers: %s", relay.viewers.get_viewer_count())
        message = STATUS_WAITING_FOR_SPEECH if relay.has_speaker else STATUS_WAITING_FOR_SPEAKER
        await safe_send_event(ws, status_event(message))
        # Viewers are passive; anything they send is discarded.
        while await receive_frame(ws) is not None:
            pass
    finally:
        relay.viewers.discard(ws)
        logger.info("viewer: disconnected. Viewers: %s", relay.viewers.get_viewer_count())


__all__ = ["handle_viewer"]
