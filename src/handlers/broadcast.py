"""Fan-out of relay events to every open viewer and the speaker."""

from __future__ import annotations

import logging
from typing import Any

import orjson

from src.handlers.viewers import ViewerRegistry
from src.handlers.websocket.frames import is_open
from src.handlers.websocket.errors import safe_send_text

logger = logging.getLogger(__name__)


class Broadcaster:
    def __init__(self, viewers: ViewerRegistry) -> None:
        self._viewers = viewers

    async def broadcast(self, event: dict[str, Any], *, speaker: Any = None) -> int:
        """Serialize once, then deliver to each live recipient; returns the delivered count.

        A failed send is isolated to that recipient.
        """
        text = orjson.dumps(event).decode("utf-8")
        delivered = 0
        for viewer in self._viewers.snapshot():
            # Membership can change while earlier sends are awaited.
            if viewer not in self._viewers or not is_open(viewer):
                continue
            if await safe_send_text(viewer, text):
                delivered += 1
        if speaker is not None and is_open(speaker) and await safe_send_text(speaker, text):
            delivered += 1
        logger.debug("broadcast type=%s delivered=%s", event.get("type"), delivered)
        return delivered


__all__ = ["Broadcaster"]
