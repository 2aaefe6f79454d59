"""Low-level frame reads and socket state checks."""

from __future__ import annotations

from typing import Any

from fastapi import WebSocketDisconnect
from starlette.websockets import WebSocketState


def is_open(ws: Any) -> bool:
    return ws.client_state == WebSocketState.CONNECTED and ws.application_state == WebSocketState.CONNECTED


async def receive_frame(ws: Any) -> str | bytes | None:
    """Return the next text or binary payload, or None once the client is gone."""
    try:
        message = await ws.receive()
    except WebSocketDisconnect:
        return None
    if message.get("type") == "websocket.disconnect":
        return None
    text = message.get("text")
    if text is not None:
        return text
    return message.get("bytes") or b""


__all__ = ["is_open", "receive_frame"]
