"""Factory for authenticated connections to the OpenAI Realtime service."""

from __future__ import annotations

import logging

from websockets.exceptions import WebSocketException
from websockets.asyncio.client import ClientConnection, connect

from src.errors import UpstreamConnectError

logger = logging.getLogger(__name__)


class UpstreamConnector:
    def __init__(
        self,
        *,
        url: str,
        model: str,
        open_timeout_s: float,
        max_message_bytes: int,
    ) -> None:
        self._url = url
        self._model = model
        self._open_timeout_s = float(open_timeout_s)
        self._max_message_bytes = int(max_message_bytes)

    @property
    def endpoint(self) -> str:
        sep = "&" if "?" in self._url else "?"
        return f"{self._url}{sep}model={self._model}"

    async def connect(self, api_key: str) -> ClientConnection:
        """Open the upstream socket; the credential travels only in the Authorization header."""
        logger.debug("upstream: connecting to %s", self.endpoint)
        try:
            return await connect(
                self.endpoint,
                additional_headers={"Authorization": f"Bearer {api_key}"},
                open_timeout=self._open_timeout_s,
                max_size=self._max_message_bytes,
            )
        except (WebSocketException, OSError, TimeoutError) as exc:
            raise UpstreamConnectError(f"{type(exc).__name__}: {exc}") from exc


__all__ = ["UpstreamConnector"]
