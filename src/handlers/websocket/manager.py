"""Inbound WebSocket gateway: classify by role and route."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from src.runtime.dependencies import RuntimeDeps
from src.config.websocket import WS_ROLE_SPEAKER, WS_ROLE_QUERY_PARAM

from .viewer import handle_viewer
from .speaker import handle_speaker

logger = logging.getLogger(__name__)


def is_speaker_connection(ws: WebSocket) -> bool:
    # Anything other than an exact "speaker" role, including no role at all, is a viewer.
    return ws.query_params.get(WS_ROLE_QUERY_PARAM) == WS_ROLE_SPEAKER


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    relay = runtime_deps.relay
    speaker = is_speaker_connection(ws)
    logger.debug("gateway: inbound connection role=%s", "speaker" if speaker else "viewer")
    if speaker:
        await handle_speaker(ws, relay)
    else:
        await handle_viewer(ws, relay)


__all__ = ["handle_websocket_connection", "is_speaker_connection"]
