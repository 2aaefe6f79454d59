"""Process-wide relay state: the speaker slot, the viewers and the upstream session."""

from __future__ import annotations

import logging
from typing import Any

from src.state import UpstreamState
from src.state.settings import UpstreamSettings
from src.realtime import UpstreamSession, UpstreamConnector
from src.config.messages import STATUS_SPEAKER_DISCONNECTED
from src.realtime.outbound import status_event, session_ended_event

from .viewers import ViewerRegistry
from .broadcast import Broadcaster

logger = logging.getLogger(__name__)


class RelaySession:
    """Built once per process and shared by every connection handler.

    An upstream session only exists while a speaker holds the slot and has
    sent `start`; releasing the speaker always tears it down.
    """

    def __init__(self, *, connector: UpstreamConnector, upstream_settings: UpstreamSettings) -> None:
        self._connector = connector
        self._upstream_settings = upstream_settings
        self.viewers = ViewerRegistry()
        self._broadcaster = Broadcaster(self.viewers)
        self._speaker: Any = None
        self._upstream: UpstreamSession | None = None

    @property
    def speaker(self) -> Any:
        return self._speaker

    @property
    def has_speaker(self) -> bool:
        return self._speaker is not None

    @property
    def upstream(self) -> UpstreamSession | None:
        return self._upstream

    @property
    def upstream_state(self) -> UpstreamState:
        if self._upstream is None:
            return UpstreamState.ABSENT
        return self._upstream.state

    def claim_speaker(self, ws: Any) -> bool:
        if self._speaker is not None:
            return False
        self._speaker = ws
        return True

    async def release_speaker(self, ws: Any) -> None:
        if self._speaker is not ws:
            return
        self._speaker = None
        await self.stop_upstream()
        await self.broadcast(session_ended_event())
        await self.broadcast(status_event(STATUS_SPEAKER_DISCONNECTED))

    async def broadcast(self, event: dict[str, Any]) -> int:
        return await self._broadcaster.broadcast(event, speaker=self._speaker)

    async def start_upstream(self, api_key: str) -> UpstreamSession:
        await self.stop_upstream()
        upstream = UpstreamSession(
            connector=self._connector,
            settings=self._upstream_settings,
            broadcast=self.broadcast,
            on_closed=self._handle_upstream_closed,
        )
        self._upstream = upstream
        upstream.open(api_key)
        logger.info("relay: upstream session starting")
        return upstream

    async def stop_upstream(self) -> None:
        upstream, self._upstream = self._upstream, None
        if upstream is None:
            return
        await upstream.close()
        logger.info("relay: upstream session stopped")

    async def send_audio(self, audio: str) -> bool:
        if self._upstream is None:
            return False
        return await self._upstream.append_audio(audio)

    async def commit_audio(self) -> bool:
        if self._upstream is None:
            return False
        return await self._upstream.commit()

    async def end_session(self) -> None:
        await self.stop_upstream()
        await self.broadcast(session_ended_event())

    async def shutdown(self) -> None:
        await self.stop_upstream()

    def _handle_upstream_closed(self, upstream: UpstreamSession) -> None:
        # A late close from a replaced session must not clear its successor.
        if self._upstream is upstream:
            self._upstream = None
            logger.info("relay: upstream session closed")


__all__ = ["RelaySession"]
