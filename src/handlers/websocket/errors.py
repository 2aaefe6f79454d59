"""Send helpers that never raise on a dead client socket."""

from __future__ import annotations

import logging
import contextlib
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect

from src.realtime.outbound import error_event

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_event(ws: WebSocket, event: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(event).decode("utf-8"))


async def send_error(ws: WebSocket, message: str) -> bool:
    return await safe_send_event(ws, error_event(message))


async def reject_connection(ws: WebSocket, *, message: str, close_code: int) -> None:
    # The socket is already accepted so the client can read the reason before the close.
    await send_error(ws, message)
    with contextlib.suppress(Exception):
        await ws.close(code=close_code, reason=message)


__all__ = [
    "reject_connection",
    "safe_send_event",
    "safe_send_text",
    "send_error",
]
